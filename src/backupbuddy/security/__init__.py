from backupbuddy.security.tool import EncryptionTool
from backupbuddy.security.encryption import encrypt_file
from backupbuddy.security.decryption import decrypt_file

__all__ = ["EncryptionTool", "encrypt_file", "decrypt_file"]
