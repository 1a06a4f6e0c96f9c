from enum import Enum


class EncryptionTool(Enum):
    """External tools used to encrypt and decrypt backup packages."""
    OPENSSL = "openssl"
    GPG = "gpg"

    @classmethod
    def from_name(cls, name: str) -> "EncryptionTool":
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(tool.value for tool in cls)
            raise ValueError(f"Unsupported encryption tool \"{name}\". Choose one of: {choices}.") from None

    @property
    def ciphertext_ending(self) -> str:
        return ".enc" if self is EncryptionTool.OPENSSL else ".gpg"

    def encrypt_cmd(self, in_file, out_file, recipient=None, password_file=None, base64=False, salt=True) -> list[str]:
        if self is EncryptionTool.GPG:
            if not recipient:
                raise ValueError("GPG encryption requires a recipient.")
            return ["gpg", "--batch", "--yes", "--encrypt", "--recipient", recipient, "--output", str(out_file), str(in_file)]

        return self._openssl_cmd(in_file, out_file, password_file, base64, salt, decrypt=False)

    def decrypt_cmd(self, in_file, out_file, password_file=None, base64=False, salt=True) -> list[str]:
        if self is EncryptionTool.GPG:
            return ["gpg", "--decrypt", "--output", str(out_file), str(in_file)]

        return self._openssl_cmd(in_file, out_file, password_file, base64, salt, decrypt=True)

    @staticmethod
    def _openssl_cmd(in_file, out_file, password_file, base64, salt, decrypt) -> list[str]:
        if not password_file:
            raise ValueError("OpenSSL requires a password file.")

        cmd = ["openssl", "aes-256-cbc"]
        if decrypt:
            cmd.append("-d")
        if base64:
            cmd.append("-base64")
        cmd.append("-salt" if salt else "-nosalt")
        cmd += ["-pass", f"file:{password_file}", "-in", str(in_file), "-out", str(out_file)]
        return cmd
