"""Test that dependencies are configured correctly."""

from pathlib import Path
import tomllib

ROOT = Path(__file__).parent.parent.parent


def load_pyproject() -> dict:
    return tomllib.loads((ROOT / "pyproject.toml").read_text())


def dependency_names(deps: list[str]) -> set[str]:
    return {dep.split(">=")[0].split("==")[0].split("[")[0] for dep in deps}


def test_runtime_dependencies_configured():
    """All runtime dependencies are declared in pyproject.toml."""
    dep_names = dependency_names(load_pyproject()["project"]["dependencies"])

    for dep in ["anyio", "pydantic", "python-dotenv", "pyyaml", "rich", "structlog", "typer"]:
        assert dep in dep_names, f"Required dependency '{dep}' not found in pyproject.toml"


def test_test_extra_configured():
    """pip install -e .[test] brings in the test runner."""
    extra = dependency_names(load_pyproject()["project"]["optional-dependencies"]["test"])

    for dep in ["pytest", "pytest-asyncio", "pytest-cov"]:
        assert dep in extra, f"Test dependency '{dep}' not found in the test extra"


def test_dev_dependencies_configured():
    """Dev tooling is declared in the dev dependency group."""
    dev = dependency_names(load_pyproject().get("dependency-groups", {}).get("dev", []))

    for dep in ["pytest", "pytest-asyncio", "pytest-cov", "ruff", "mypy", "pre-commit"]:
        assert dep in dev, f"Required dev dependency '{dep}' not found in pyproject.toml"


def test_console_script():
    """The eventfold command points at eventfold:main."""
    assert load_pyproject()["project"]["scripts"]["eventfold"] == "eventfold:main"
