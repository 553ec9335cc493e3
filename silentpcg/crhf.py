"""AES-based correlation-robust hash H(i, x)."""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import CrhfError

__all__ = ["AesCrhf"]

_BLOCK = 16
_INDEX_BYTES = 8
_log = logging.getLogger(__name__)


class AesCrhf:
    """Hashes (index || input), zero-padded, by encrypting its first AES block."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) != _BLOCK:
            raise CrhfError("Invalid AES key length")
        self._cipher = Cipher(algorithms.AES(key), modes.ECB())

    @classmethod
    def default(cls) -> AesCrhf:
        """An instance with the all-zero key; not secure."""
        _log.warning("AesCrhf using insecure default ZERO key!")
        return cls(bytes(_BLOCK))

    def hash(self, index: int, data: bytes) -> bytes:
        """Return a 16-byte hash of ``data`` under ``index``."""
        data = bytes(data)
        if not data:
            raise CrhfError("Input cannot be empty")
        try:
            prefix = index.to_bytes(_INDEX_BYTES, "little")
        except OverflowError as exc:
            raise CrhfError("Index does not fit in 64 bits") from exc
        block = (prefix + data)[:_BLOCK].ljust(_BLOCK, b"\x00")
        encryptor = self._cipher.encryptor()
        return encryptor.update(block) + encryptor.finalize()

    def __repr__(self) -> str:
        return "AesCrhf()"