from pathlib import Path

from backupbuddy.errors import PerformError
from backupbuddy.log import logger
from backupbuddy.security.tool import EncryptionTool
from backupbuddy.utils import run_command


def encrypt_file(tool: EncryptionTool, file_to_encrypt: Path, recipient=None, password_file=None) -> Path:
    """
    Encrypts a single file next to the original, appending the tool's ciphertext ending.

    Parameters:
        tool (EncryptionTool): OpenSSL or GPG.
        file_to_encrypt (Path): Plaintext file, typically a freshly created archive.
        recipient (str): GPG key the file is encrypted for.
        password_file (Path): File holding the OpenSSL passphrase.

    Returns:
        Path: Path to the ciphertext. The plaintext file is left untouched.

    Raises:
        PerformError: If the configuration is incomplete or the tool fails.
    """
    file_to_encrypt = Path(file_to_encrypt)
    out_file = file_to_encrypt.with_name(file_to_encrypt.name + tool.ciphertext_ending)

    # Remove ciphertext from a previous run
    if out_file.exists():
        out_file.unlink()
        logger.debug(f"Old ciphertext removed: {out_file}")

    try:
        cmd = tool.encrypt_cmd(file_to_encrypt, out_file, recipient=recipient, password_file=password_file)
    except ValueError as e:
        raise PerformError(f"Invalid encryption settings: {e}") from e

    run_command(cmd, f"{tool.value} encryption of \"{file_to_encrypt}\"")

    if not out_file.exists():
        raise PerformError(f"Encryption succeeded but ciphertext not found: {out_file}")

    return out_file
