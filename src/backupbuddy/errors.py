class BackupBuddyError(Exception):
    """Base class for all errors raised by BackupBuddy."""


class ConfigurationError(BackupBuddyError):
    """Path overrides are invalid or the data/log/tmp roots cannot be created. Fatal."""


class ResolutionError(BackupBuddyError):
    """No usable job definition exists for a trigger."""


class PerformError(BackupBuddyError):
    """A resolved job failed while running."""
