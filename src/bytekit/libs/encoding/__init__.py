"""
Binary-to-text encodings.
"""

from __future__ import annotations

__all__ = [
    "STANDARD_ALPHABET",
    "URLSAFE_ALPHABET",
    "Base64Codec",
    "base64_encode",
    "base64_decode",
    "build_base64_codec",
]

from typing import TYPE_CHECKING

from .b64 import (
    STANDARD_ALPHABET,
    URLSAFE_ALPHABET,
    Base64Codec,
    base64_decode,
    base64_encode,
)

if TYPE_CHECKING:
    from bytekit.schemas import Base64Config


def build_base64_codec(cfg: Base64Config | None = None) -> Base64Codec:
    """Create a :class:`Base64Codec` from a resolved configuration."""
    if cfg is None:
        return Base64Codec()
    return Base64Codec(cfg.alphabet, cfg.pad_char)
