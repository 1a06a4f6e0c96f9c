from pathlib import Path

import yaml

from backupbuddy.errors import ConfigurationError
from backupbuddy.globals import Globals
from backupbuddy.log import logger

HEADER = """\
# BackupBuddy configuration
#
# Run a job with:  backupbuddy perform --trigger <trigger>
#
# Job options:
#   paths:          files or directories to archive (required)
#   excludes:       tar exclude patterns
#   compress:       gzip the archive
#   encryption:     openssl or gpg
#   recipient:      gpg key to encrypt for
#   password_file:  file with the openssl passphrase
#   keep:           number of packages to keep per trigger
#
"""


def build_template(triggers: list[str]) -> dict:
    return {
        "extension": Globals.DEFAULT_EXTENSION,
        "jobs": [
            {
                "trigger": trigger,
                "label": trigger.replace("_", " ").title(),
                "paths": ["~/Documents"],
                "excludes": [],
                "compress": True,
                "keep": 5,
            }
            for trigger in triggers
        ],
    }


def generate_config(config_source: Path, triggers: list[str]) -> Path:
    """
    Write a configuration skeleton with one job definition per trigger.

    Raises:
        ConfigurationError: If the file already exists or cannot be written.
    """
    config_source = Path(config_source).expanduser()
    triggers = [trigger for trigger in triggers if trigger]

    if not triggers:
        raise ConfigurationError("Please provide at least one trigger.")

    if config_source.exists():
        raise ConfigurationError(f"Configuration file \"{config_source}\" already exists.")

    try:
        config_source.parent.mkdir(parents=True, exist_ok=True)
        with open(config_source, "w") as f:
            f.write(HEADER)
            yaml.safe_dump(build_template(triggers), f, sort_keys=False)
    except OSError as e:
        raise ConfigurationError(f"Failed to write \"{config_source}\": {e}") from e

    logger.info(f"Generated configuration for {', '.join(triggers)} at {config_source}")
    return config_source
