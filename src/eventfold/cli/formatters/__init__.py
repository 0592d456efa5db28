"""Rich formatters for CLI output.

This module provides a shared Console instance for consistent terminal
output across the Eventfold CLI.

Semantic Colors:
- green: success
- yellow: warning
- red: error
- blue: info
"""

from rich.console import Console
from rich.theme import Theme

EVENTFOLD_THEME = Theme(
    {
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "info": "blue",
        "muted": "dim",
        "highlight": "bold cyan",
    }
)

console = Console(theme=EVENTFOLD_THEME, force_terminal=True)

__all__ = ["console", "EVENTFOLD_THEME"]
