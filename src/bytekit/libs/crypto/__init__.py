"""
Stream cipher primitives.
"""

from __future__ import annotations

__all__ = [
    "RC4",
    "RC4State",
    "rc4_initialize",
    "rc4_transform",
    "build_rc4",
]

from typing import TYPE_CHECKING

from .rc4 import RC4, RC4State, rc4_initialize, rc4_transform

if TYPE_CHECKING:
    from bytekit.schemas import RC4Config


def build_rc4(key: bytes, cfg: RC4Config | None = None) -> RC4:
    """Create an :class:`RC4` cipher object from a resolved configuration."""
    persist = cfg.persist_cursors if cfg is not None else False
    return RC4(key, persist_cursors=persist)
