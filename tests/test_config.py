from pathlib import Path

import pytest

from backupbuddy.config import RunConfiguration, apply_overrides, configure
from backupbuddy.errors import ConfigurationError
from backupbuddy.globals import Globals


def test_defaults_without_overrides():
    run_config = apply_overrides(None)
    assert run_config == RunConfiguration()
    assert run_config.data_root == Path(Globals.DEFAULT_DATA_ROOT).expanduser()
    assert run_config.config_source == Path(Globals.DEFAULT_CONFIG_FILE).expanduser()


def test_empty_overrides_keep_defaults(tmp_path):
    run_config = apply_overrides({"config_source": "", "data_root": str(tmp_path / "data"), "log_root": None})
    assert run_config.config_source == RunConfiguration().config_source
    assert run_config.log_root == RunConfiguration().log_root
    assert run_config.data_root == tmp_path / "data"


def test_configure_creates_roots(tmp_path):
    run_config = configure({
        "config_source": str(tmp_path / "config.yaml"),
        "data_root": str(tmp_path / "a" / "data"),
        "log_root": str(tmp_path / "b" / "log"),
        "tmp_root": str(tmp_path / "c" / "tmp"),
    })
    assert run_config.data_root.is_dir()
    assert run_config.log_root.is_dir()
    assert run_config.tmp_root.is_dir()
    assert not run_config.config_source.exists()


def test_configure_is_idempotent(tmp_path):
    overrides = {"data_root": str(tmp_path / "data"), "log_root": str(tmp_path / "log"), "tmp_root": str(tmp_path / "tmp")}
    first = configure(overrides)
    second = configure(overrides)
    assert first == second


def test_configure_fails_when_root_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(ConfigurationError):
        configure({"data_root": str(blocker / "data"), "log_root": str(tmp_path / "log"), "tmp_root": str(tmp_path / "tmp")})
