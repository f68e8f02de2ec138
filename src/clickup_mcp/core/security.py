from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .config import AppConfig
from .errors import KeyManagerError

KEY_BYTES = 32  # AES-256
IV_LENGTH = 16
AUTH_TAG_LENGTH = 16
DEFAULT_KEY_FILE = Path("data") / "encryption.key"


class KeyManager:
    """
    AES-256-GCM helper for encrypting values at rest.

    The key comes from `key_hex` when given, otherwise it is read from
    `key_file` (hex) or generated and written there on first use.
    Encrypted values have the form "iv:ciphertext:tag", each part hex encoded.
    """

    def __init__(
        self,
        key_file: Union[str, Path] = DEFAULT_KEY_FILE,
        *,
        key_hex: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.key_file = Path(key_file)
        self.log = logger or logging.getLogger("clickup_mcp.security")
        if key_hex is not None:
            self._key = self._parse_key(key_hex)
        else:
            self._key = self._load_or_generate()
        self._aead = AESGCM(self._key)

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        *,
        key_file: Union[str, Path] = DEFAULT_KEY_FILE,
        logger: Optional[logging.Logger] = None,
    ) -> "KeyManager":
        key_hex = config.encryption_key if config.encryption_key_from_env else None
        return cls(key_file, key_hex=key_hex, logger=logger)

    @staticmethod
    def _parse_key(key_hex: str) -> bytes:
        try:
            key = bytes.fromhex(key_hex.strip())
        except ValueError as exc:
            raise KeyManagerError("Could not initialize encryption key") from exc
        if len(key) != KEY_BYTES:
            raise KeyManagerError("Could not initialize encryption key")
        return key

    def _load_or_generate(self) -> bytes:
        try:
            self.key_file.parent.mkdir(parents=True, exist_ok=True)
            if self.key_file.is_file():
                return self._parse_key(self.key_file.read_text(encoding="ascii"))

            key = os.urandom(KEY_BYTES)
            self.key_file.write_text(key.hex(), encoding="ascii")
            self.log.info("Generated new encryption key at %s", self.key_file)
            return key
        except OSError as exc:
            self.log.error(
                "Failed to load or generate encryption key",
                extra={"error_type": type(exc).__name__},
            )
            raise KeyManagerError("Could not initialize encryption key") from exc

    def encrypt(self, text: str) -> str:
        iv = os.urandom(IV_LENGTH)
        sealed = self._aead.encrypt(iv, text.encode("utf-8"), None)
        encrypted, tag = sealed[:-AUTH_TAG_LENGTH], sealed[-AUTH_TAG_LENGTH:]
        return f"{iv.hex()}:{encrypted.hex()}:{tag.hex()}"

    def decrypt(self, text: str) -> str:
        parts = text.split(":")
        if len(parts) != 3 or not all(parts):
            raise KeyManagerError("Invalid encrypted text format")

        iv_hex, encrypted_hex, tag_hex = parts
        try:
            iv = bytes.fromhex(iv_hex)
            sealed = bytes.fromhex(encrypted_hex) + bytes.fromhex(tag_hex)
            plain = self._aead.decrypt(iv, sealed, None)
        except (ValueError, InvalidTag) as exc:
            raise KeyManagerError("Invalid encrypted text format") from exc
        return plain.decode("utf-8")


__all__ = ["KeyManager", "DEFAULT_KEY_FILE"]
