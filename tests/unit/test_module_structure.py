"""Test package layout and entry points."""

from pathlib import Path
import re

from typer.testing import CliRunner

import eventfold
from eventfold.cli.main import app

PACKAGE_DIR = Path(__file__).parent.parent.parent / "src" / "eventfold"


def test_version_is_semver():
    """__version__ is an X.Y.Z string."""
    assert re.match(r"^\d+\.\d+\.\d+$", eventfold.__version__)


def test_main_py_entry_point():
    """__main__.py delegates to eventfold.main."""
    content = (PACKAGE_DIR / "__main__.py").read_text()
    assert "from eventfold import main" in content


def test_py_typed_exists():
    """The package ships a PEP 561 marker."""
    assert (PACKAGE_DIR / "py.typed").is_file()


def test_main_is_callable():
    """main() is exported."""
    assert callable(eventfold.main)


def test_main_app_help():
    """The Typer app behind main() renders help."""
    result = CliRunner().invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Eventfold" in result.output
