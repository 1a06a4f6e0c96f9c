import logging
from pathlib import Path

from backupbuddy.globals import Globals

logger = logging.getLogger("BackupBuddy")
logger.setLevel(logging.INFO)

if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def add_file_handler(log_root: Path) -> None:
    """
    Mirror all log messages into `<log_root>/backupbuddy.log`.

    Calling this twice for the same log root does not add a second handler.
    """
    log_file = Path(log_root) / Globals.LOG_FILE_NAME

    for existing in logger.handlers:
        if isinstance(existing, logging.FileHandler) and Path(existing.baseFilename) == log_file.resolve():
            return

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    logger.addHandler(file_handler)
