"""Integration tests for entry point execution."""

from contextlib import suppress
from io import StringIO
import runpy
import sys
from unittest.mock import patch


def test_main_module_entry_point():
    """`python -m eventfold` without arguments shows the help text."""
    original_argv = sys.argv
    sys.argv = ["eventfold"]

    try:
        with patch("sys.stdout", new=StringIO()) as fake_out, suppress(SystemExit):
            runpy.run_module("eventfold", run_name="__main__", alter_sys=True)
    finally:
        sys.argv = original_argv

    output = fake_out.getvalue()
    assert "Eventfold" in output or "Usage" in output
