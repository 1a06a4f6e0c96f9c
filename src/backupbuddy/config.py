from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from backupbuddy.errors import ConfigurationError
from backupbuddy.globals import Globals
from backupbuddy.log import logger

PATH_FIELDS = ("config_source", "data_root", "log_root", "tmp_root")


def _default(raw_path: str) -> Path:
    return Path(raw_path).expanduser()


@dataclass(frozen=True)
class RunConfiguration:
    """
    Process-wide paths for one CLI invocation.

    Attributes:
        config_source (Path): YAML file holding the job definitions.
        data_root (Path): Directory receiving one sub-directory per trigger.
        log_root (Path): Directory receiving the log file.
        tmp_root (Path): Scratch space for archives before they are stored.
    """
    config_source: Path = field(default_factory=lambda: _default(Globals.DEFAULT_CONFIG_FILE))
    data_root: Path = field(default_factory=lambda: _default(Globals.DEFAULT_DATA_ROOT))
    log_root: Path = field(default_factory=lambda: _default(Globals.DEFAULT_LOG_ROOT))
    tmp_root: Path = field(default_factory=lambda: _default(Globals.DEFAULT_TMP_ROOT))


def apply_overrides(overrides: Optional[dict]) -> RunConfiguration:
    """
    Build a RunConfiguration from the built-in defaults and the user overrides.

    An override replaces the default only if it is present and non-empty.
    """
    run_config = RunConfiguration()
    changes = {}

    for name in PATH_FIELDS:
        value = (overrides or {}).get(name)
        if value:
            changes[name] = Path(value).expanduser()
            logger.debug(f"Override for {name}: {changes[name]}")

    return replace(run_config, **changes)


def create_dir(path: Path) -> None:
    """Create `path` including missing parents. An existing directory is fine."""
    Path(path).mkdir(parents=True, exist_ok=True)


def configure(overrides: Optional[dict] = None) -> RunConfiguration:
    """
    Apply the path overrides and make sure the data, log and tmp roots exist.

    Parameters:
        overrides (dict): Optional keys `config_source`, `data_root`, `log_root`, `tmp_root`.

    Returns:
        RunConfiguration: The configuration used for every trigger of this run.

    Raises:
        ConfigurationError: If one of the roots cannot be created.
    """
    run_config = apply_overrides(overrides)

    for directory in (run_config.data_root, run_config.log_root, run_config.tmp_root):
        try:
            create_dir(directory)
        except OSError as e:
            raise ConfigurationError(f"Failed to create directory \"{directory}\": {e}") from e

    logger.debug(f"Config source: {run_config.config_source}")
    logger.debug(f"Data root: {run_config.data_root}, log root: {run_config.log_root}, tmp root: {run_config.tmp_root}")

    return run_config
