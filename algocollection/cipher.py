"""Additive byte-shift cipher for data and files."""

from __future__ import annotations

import os
from pathlib import Path


def shift_encrypt(data: bytes, key: int) -> bytes:
    """Add ``key`` to every byte, wrapping modulo 256."""
    return bytes((byte + key) % 256 for byte in data)


def shift_decrypt(data: bytes, key: int) -> bytes:
    """Subtract ``key`` from every byte, wrapping modulo 256."""
    return bytes((byte - key) % 256 for byte in data)


def encrypt_file(
    source: str | os.PathLike[str], target: str | os.PathLike[str], key: int
) -> None:
    """Write an encrypted copy of ``source`` to ``target``."""
    Path(target).write_bytes(shift_encrypt(Path(source).read_bytes(), key))


def decrypt_file(
    source: str | os.PathLike[str], target: str | os.PathLike[str], key: int
) -> None:
    """Write a decrypted copy of ``source`` to ``target``."""
    Path(target).write_bytes(shift_decrypt(Path(source).read_bytes(), key))