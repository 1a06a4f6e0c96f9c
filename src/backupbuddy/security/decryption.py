from pathlib import Path

from backupbuddy.errors import PerformError
from backupbuddy.log import logger
from backupbuddy.security.tool import EncryptionTool
from backupbuddy.utils import run_command


def decrypt_file(tool: EncryptionTool, ciphertext: Path, out_file: Path, password_file=None, base64=False, salt=True) -> Path:
    """
    Decrypts a backup package produced by OpenSSL or GPG.

    Parameters:
        tool (EncryptionTool): Tool the package was encrypted with.
        ciphertext (Path): Encrypted input file.
        out_file (Path): Where the plaintext is written. Parent directories are created.
        password_file (Path): OpenSSL passphrase file (ignored for GPG).
        base64 (bool): OpenSSL only, the input is base64 encoded.
        salt (bool): OpenSSL only, the input was encrypted with a salt.

    Returns:
        Path: `out_file` on success.
    """
    ciphertext = Path(ciphertext)
    out_file = Path(out_file)

    if not ciphertext.is_file():
        raise PerformError(f"Ciphertext does not exist at {ciphertext}")

    try:
        cmd = tool.decrypt_cmd(ciphertext, out_file, password_file=password_file, base64=base64, salt=salt)
    except ValueError as e:
        raise PerformError(f"Invalid decryption settings: {e}") from e

    out_file.parent.mkdir(parents=True, exist_ok=True)
    run_command(cmd, f"Decryption of \"{ciphertext}\"")

    logger.debug(f"Successfully decrypted: {ciphertext} -> {out_file}")
    return out_file
