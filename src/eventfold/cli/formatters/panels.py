"""Rich panels for important messages."""

from rich.panel import Panel

from eventfold.cli.formatters import console


def _panel(message: str, title: str, style: str, color: str) -> Panel:
    return Panel(
        f"[{style}]{message}[/]",
        title=f"[bold {color}]{title}[/]",
        border_style=color,
        expand=False,
    )


def info_panel(message: str, title: str = "Info") -> Panel:
    """Create an info panel with blue styling."""
    return _panel(message, title, "info", "blue")


def warning_panel(message: str, title: str = "Warning") -> Panel:
    """Create a warning panel with yellow styling."""
    return _panel(message, title, "warning", "yellow")


def error_panel(message: str, title: str = "Error") -> Panel:
    """Create an error panel with red styling."""
    return _panel(message, title, "error", "red")


def success_panel(message: str, title: str = "Success") -> Panel:
    """Create a success panel with green styling."""
    return _panel(message, title, "success", "green")


def print_info(message: str, title: str = "Info") -> None:
    """Print an info message in a panel."""
    console.print(info_panel(message, title))


def print_warning(message: str, title: str = "Warning") -> None:
    """Print a warning message in a panel."""
    console.print(warning_panel(message, title))


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message in a panel."""
    console.print(error_panel(message, title))


def print_success(message: str, title: str = "Success") -> None:
    """Print a success message in a panel."""
    console.print(success_panel(message, title))


__all__ = [
    "info_panel",
    "warning_panel",
    "error_panel",
    "success_panel",
    "print_info",
    "print_warning",
    "print_error",
    "print_success",
]
