"""
Data contracts and type definitions.
"""

__all__ = [
    "Base64Config",
    "RC4Config",
]

from .config import Base64Config, RC4Config
