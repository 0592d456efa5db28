"""Unit tests for eventfold.config.loader module."""

import os
from pathlib import Path

import pytest
import yaml

from eventfold.config.loader import create_default_config, load_config
from eventfold.config.models import get_default_config
from eventfold.core.errors import ConfigError


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test in an empty directory without override variables."""
    for name in ("EVENTFOLD_EVENTS_DIR", "EVENTFOLD_LOG_LEVEL", "ADMIN_EMAIL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_yaml(path: Path, data: object) -> Path:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestLoadConfig:
    """Test load_config()."""

    def test_no_file_gives_defaults(self) -> None:
        """Without any file the defaults apply."""
        assert load_config() == get_default_config()

    def test_reads_default_file_from_cwd(self, isolated_env: Path) -> None:
        """./eventfold.yaml is picked up automatically."""
        write_yaml(isolated_env / "eventfold.yaml", {"persistence": {"events_dir": "data"}})
        assert load_config().persistence.events_dir == "data"

    def test_explicit_path(self, isolated_env: Path) -> None:
        """An explicit path is loaded and merged over defaults."""
        path = write_yaml(isolated_env / "custom.yaml", {"logging": {"level": "debug"}})
        config = load_config(path)
        assert config.logging.level == "debug"
        assert config.persistence.events_dir == "local-events"

    def test_missing_explicit_path_raises(self, isolated_env: Path) -> None:
        """A named file that does not exist is an error."""
        with pytest.raises(ConfigError, match="Configuration file not found"):
            load_config(isolated_env / "missing.yaml")

    def test_empty_file_gives_defaults(self, isolated_env: Path) -> None:
        """An empty YAML file is treated as an empty mapping."""
        path = isolated_env / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == get_default_config()

    def test_invalid_yaml_raises(self, isolated_env: Path) -> None:
        """Unparseable YAML is reported with the file name."""
        path = isolated_env / "broken.yaml"
        path.write_text("persistence: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.config_file == str(path)

    def test_non_mapping_top_level_raises(self, isolated_env: Path) -> None:
        """The document must be a mapping."""
        path = write_yaml(isolated_env / "list.yaml", ["a", "b"])
        with pytest.raises(ConfigError, match="mapping at the top level"):
            load_config(path)

    def test_validation_errors_name_the_field(self, isolated_env: Path) -> None:
        """Invalid values are reported by location."""
        path = write_yaml(isolated_env / "bad.yaml", {"logging": {"level": "loud"}})
        with pytest.raises(ConfigError, match="logging.level"):
            load_config(path)


class TestEnvironmentOverrides:
    """Test environment variable overrides."""

    def test_events_dir_override(
        self, isolated_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """EVENTFOLD_EVENTS_DIR wins over the file."""
        write_yaml(isolated_env / "eventfold.yaml", {"persistence": {"events_dir": "data"}})
        monkeypatch.setenv("EVENTFOLD_EVENTS_DIR", "/tmp/other-events")
        assert load_config().persistence.events_dir == "/tmp/other-events"

    def test_log_level_override_is_case_insensitive(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """EVENTFOLD_LOG_LEVEL accepts upper case."""
        monkeypatch.setenv("EVENTFOLD_LOG_LEVEL", "WARNING")
        assert load_config().logging.level == "warning"

    def test_admin_email_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """ADMIN_EMAIL sets the seeded admin's email."""
        monkeypatch.setenv("ADMIN_EMAIL", "root@example.com")
        config = load_config()
        assert config.seed.admin_email == "root@example.com"
        assert config.seed.admin_name == "Initial Admin"

    def test_empty_variable_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Blank variables do not override."""
        monkeypatch.setenv("EVENTFOLD_EVENTS_DIR", "")
        assert load_config().persistence.events_dir == "local-events"

    def test_dotenv_file_is_loaded(self, isolated_env: Path) -> None:
        """Variables from ./.env are applied."""
        (isolated_env / ".env").write_text("ADMIN_EMAIL=dotenv@example.com\n", encoding="utf-8")
        try:
            config = load_config()
        finally:
            os.environ.pop("ADMIN_EMAIL", None)
        assert config.seed.admin_email == "dotenv@example.com"


class TestCreateDefaultConfig:
    """Test create_default_config()."""

    def test_writes_loadable_file(self, isolated_env: Path) -> None:
        """The generated file round-trips to the defaults."""
        path = create_default_config()
        assert path == isolated_env / "eventfold.yaml"
        assert load_config(path) == get_default_config()

    def test_refuses_to_overwrite(self, isolated_env: Path) -> None:
        """An existing file is kept unless overwrite is set."""
        path = write_yaml(isolated_env / "eventfold.yaml", {"logging": {"level": "debug"}})
        with pytest.raises(ConfigError, match="already exists"):
            create_default_config(path)
        assert load_config(path).logging.level == "debug"

    def test_overwrite(self, isolated_env: Path) -> None:
        """overwrite=True replaces the file."""
        path = write_yaml(isolated_env / "eventfold.yaml", {"logging": {"level": "debug"}})
        create_default_config(path, overwrite=True)
        assert load_config(path).logging.level == "info"

    def test_creates_parent_directories(self, isolated_env: Path) -> None:
        """Nested destinations are created."""
        path = create_default_config(isolated_env / "conf" / "eventfold.yaml")
        assert path.exists()
