import os


class Globals:
    DEFAULT_ROOT = os.path.join("~", "BackupBuddy")
    DEFAULT_CONFIG_FILE = os.path.join(DEFAULT_ROOT, "config.yaml")
    DEFAULT_DATA_ROOT = os.path.join(DEFAULT_ROOT, "data")
    DEFAULT_LOG_ROOT = os.path.join(DEFAULT_ROOT, "log")
    DEFAULT_TMP_ROOT = os.path.join(DEFAULT_ROOT, ".tmp")
    TIMESTAMP_FORMAT = "%Y.%m.%d.%H.%M.%S"
    DEFAULT_EXTENSION = "tar"
    LOG_FILE_NAME = "backupbuddy.log"
    REQUIRED_SYSTEM_BINS = ["tar"]
