import shutil
import subprocess

from backupbuddy.errors import PerformError
from backupbuddy.globals import Globals
from backupbuddy.log import logger


def check_system_dependencies(required_bins=None):
    """
    Checks whether all required system binaries are available in the system's PATH.

    Parameters:
        required_bins (list): Binaries to look for. Defaults to `Globals.REQUIRED_SYSTEM_BINS`.

    Returns:
        bool: True if all required binaries are found, False otherwise.
    """
    for current_bin in required_bins or Globals.REQUIRED_SYSTEM_BINS:
        path = shutil.which(current_bin)
        if path is None:
            logger.error(f"BackupBuddy requires {current_bin}. Please install it on your system.")
            return False
    return True


def run_command(cmd, description):
    """
    Run an external command and turn a failure into a PerformError.

    Parameters:
        cmd (list[str]): Command and arguments, passed to subprocess without a shell.
        description (str): Short description used in the error message (e.g. "Archiving").
    """
    logger.debug(cmd)

    try:
        subprocess.run(cmd, check=True)
    except subprocess.CalledProcessError as e:
        raise PerformError(f"{description} failed with exit status {e.returncode}.") from e
    except FileNotFoundError as e:
        raise PerformError(f"{description} failed: \"{cmd[0]}\" is not installed.") from e
