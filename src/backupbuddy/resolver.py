from pathlib import Path
from typing import Protocol

import yaml

from backupbuddy.errors import ResolutionError
from backupbuddy.job import BackupJob
from backupbuddy.log import logger
from backupbuddy.registry import JobRegistry
from backupbuddy.security import EncryptionTool


class JobResolver(Protocol):
    """Turns a trigger name and a config source into a runnable job."""

    def resolve(self, trigger_name: str, config_source: Path, registry: JobRegistry) -> BackupJob:
        ...


def parse_config(path_to_config: Path) -> dict:
    """
    Parses the YAML configuration file that defines the backup jobs.

    Returns:
        dict: The configuration, containing at least a `jobs` list.

    Raises:
        ResolutionError: If the file does not exist, is not UTF-8 / valid YAML or has no `jobs` list.
    """
    try:
        with open(path_to_config, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise ResolutionError(f"Configuration file \"{path_to_config}\" not found.") from None
    except UnicodeDecodeError as e:
        raise ResolutionError(f"Configuration file \"{path_to_config}\" is not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        raise ResolutionError(f"Configuration file \"{path_to_config}\" is not valid YAML: {e}") from e

    if not isinstance(config, dict) or not isinstance(config.get("jobs"), list):
        raise ResolutionError(f"Configuration file \"{path_to_config}\" must contain a 'jobs' list.")

    logger.debug(f"Configuration contains {len(config['jobs'])} job definitions.")

    return config


def build_job(definition, extension: str, index: int) -> BackupJob:
    """
    Create a BackupJob from one entry of the `jobs` list.

    Parameters:
        definition (dict): The raw YAML entry.
        extension (str): Config-wide archive extension, used unless the entry sets its own.
        index (int): Position in the `jobs` list, only used in error messages.
    """
    if not isinstance(definition, dict):
        raise ResolutionError(f"Job definition #{index + 1} must be a mapping.")

    trigger = definition.get("trigger")
    if not trigger or not isinstance(trigger, str):
        raise ResolutionError(f"Job definition #{index + 1} has no trigger.")

    paths = definition.get("paths")
    if isinstance(paths, str):
        paths = [paths]
    if not paths or not isinstance(paths, list):
        raise ResolutionError(f"Job \"{trigger}\" does not list any paths.")

    encryption = definition.get("encryption")
    if encryption is not None:
        try:
            encryption = EncryptionTool.from_name(encryption)
        except ValueError as e:
            raise ResolutionError(f"Job \"{trigger}\": {e}") from e

    excludes = definition.get("excludes") or []
    if isinstance(excludes, str):
        excludes = [excludes]
    if not isinstance(excludes, list):
        raise ResolutionError(f"Job \"{trigger}\": 'excludes' must be a list of patterns.")

    # bool is an int subclass, `keep: true` is not a count
    keep = definition.get("keep")
    if keep is not None and (isinstance(keep, bool) or not isinstance(keep, int) or keep < 1):
        raise ResolutionError(f"Job \"{trigger}\": 'keep' must be a positive integer.")

    return BackupJob(
        trigger=trigger,
        label=str(definition.get("label") or trigger),
        paths=[str(p) for p in paths],
        excludes=[str(ex) for ex in excludes],
        compress=bool(definition.get("compress", False)),
        encryption=encryption,
        recipient=definition.get("recipient"),
        password_file=definition.get("password_file"),
        keep=keep,
        extension=str(definition.get("extension") or extension),
    )


class YamlJobResolver:
    """
    Resolves triggers against a YAML configuration file.

    Every definition in the file is registered into the registry while it is
    read, the trigger then has to match exactly one of them.
    """

    def resolve(self, trigger_name: str, config_source: Path, registry: JobRegistry) -> BackupJob:
        config = parse_config(config_source)

        if config.get("extension"):
            registry.extension = str(config["extension"])

        for index, definition in enumerate(config["jobs"]):
            registry.register(build_job(definition, registry.extension, index))

        matches = [job for job in registry.jobs if job.trigger == trigger_name]

        if not matches:
            available = ", ".join(job.trigger for job in registry.jobs) or "none"
            raise ResolutionError(
                f"No job definition for trigger \"{trigger_name}\" in \"{config_source}\". "
                f"Available triggers: {available}"
            )

        if len(matches) > 1:
            raise ResolutionError(f"Trigger \"{trigger_name}\" is defined {len(matches)} times in \"{config_source}\".")

        return matches[0]
