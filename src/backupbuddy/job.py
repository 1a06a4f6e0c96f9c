import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from backupbuddy.config import RunConfiguration
from backupbuddy.context import TriggerContext
from backupbuddy.errors import PerformError
from backupbuddy.globals import Globals
from backupbuddy.log import logger
from backupbuddy.security import EncryptionTool, encrypt_file
from backupbuddy.utils import run_command

PACKAGE_PATTERN = re.compile(r"^\d{4}\.\d{2}\.\d{2}\.\d{2}\.\d{2}\.\d{2}[._]")
TIMESTAMP_WIDTH = len("YYYY.MM.DD.HH.MM.SS")


def unique_destination(directory: Path, name: str) -> Path:
    """
    Return `directory / name`, or `<timestamp>_<n><rest>` if that is taken.

    `_` sorts after `.`, so a later package of the same second stays newer in name order.
    """
    destination = directory / name
    counter = 1
    while destination.exists():
        destination = directory / f"{name[:TIMESTAMP_WIDTH]}_{counter}{name[TIMESTAMP_WIDTH:]}"
        counter += 1
    return destination


@dataclass
class BackupJob:
    """
    A backup job read from the configuration, bound to one trigger.

    Attributes:
        trigger (str): Name the operator uses to run the job.
        label (str): Human-readable name used in log messages.
        paths (List[str]): Files or directories to archive.
        excludes (List[str]): tar exclude patterns.
        compress (bool): Gzip the archive.
        encryption (Optional[EncryptionTool]): Encrypt the archive before storing it.
        recipient (Optional[str]): GPG recipient.
        password_file (Optional[str]): OpenSSL passphrase file.
        keep (Optional[int]): Number of packages to keep in the trigger's data directory.
        extension (str): Archive extension, defaults to the config-wide setting.
    """
    trigger: str
    label: str
    paths: List[str]
    excludes: List[str] = field(default_factory=list)
    compress: bool = False
    encryption: Optional[EncryptionTool] = None
    recipient: Optional[str] = None
    password_file: Optional[str] = None
    keep: Optional[int] = None
    extension: str = Globals.DEFAULT_EXTENSION

    @property
    def package_suffix(self) -> str:
        return f"{self.extension}.gz" if self.compress else self.extension

    def describe(self) -> str:
        steps = ["archive"]
        if self.compress:
            steps.append("compress")
        if self.encryption:
            steps.append(f"encrypt ({self.encryption.value})")
        return f"{self.label} [{self.trigger}]: {', '.join(self.paths)} ---({', '.join(steps)})--> store"

    def perform(self, context: TriggerContext, run_config: RunConfiguration) -> Path:
        """
        Archive the job's paths, optionally encrypt the archive and store it
        in the trigger's data directory.

        Returns:
            Path: The stored package.

        Raises:
            PerformError: If a source path is missing or an external tool fails.
        """
        try:
            sources = [Path(p).expanduser().resolve() for p in self.paths]
        except (RuntimeError, OSError) as e:
            raise PerformError(f"Invalid source path in \"{self.label}\": {e}") from e

        missing = [str(src) for src in sources if not src.exists()]
        if missing:
            raise PerformError(f"Source path(s) do not exist: {', '.join(missing)}")

        work_dir = run_config.tmp_root / context.trigger_name
        work_dir.mkdir(parents=True, exist_ok=True)
        archive = work_dir / f"{context.timestamp}.{self.package_suffix}"
        package = archive

        try:
            run_command(self._tar_cmd(archive, sources), f"Archiving \"{self.label}\"")

            if self.encryption is not None:
                package = encrypt_file(self.encryption, archive, recipient=self.recipient, password_file=self.password_file)
                archive.unlink()

            stored = unique_destination(context.trigger_data_dir, package.name)
            try:
                shutil.move(str(package), str(stored))
            except OSError as e:
                raise PerformError(f"Failed to store package in \"{context.trigger_data_dir}\": {e}") from e
        finally:
            # Leftovers of a failed run
            for leftover in (archive, package):
                if leftover.exists():
                    leftover.unlink()

        logger.info(f"Stored package {stored}")

        if self.keep is not None:
            self.cycle(context.trigger_data_dir)

        return stored

    def cycle(self, trigger_data_dir: Path) -> List[Path]:
        """
        Remove the oldest packages so that at most `keep` remain.

        Package names start with their timestamp, so name order is age order.
        """
        packages = sorted(p for p in trigger_data_dir.iterdir() if p.is_file() and PACKAGE_PATTERN.match(p.name))
        excess = packages[:-self.keep]

        for old_package in excess:
            old_package.unlink()
            logger.debug(f"Removed old package {old_package}")

        return excess

    def _tar_cmd(self, archive: Path, sources: List[Path]) -> List[str]:
        cmd = ["tar", "-czf" if self.compress else "-cf", str(archive)]
        for pattern in self.excludes:
            cmd += ["--exclude", pattern]
        for src in sources:
            cmd += ["-C", str(src.parent), src.name]
        return cmd
