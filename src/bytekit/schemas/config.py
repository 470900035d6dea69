"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass

from bytekit.libs.encoding.b64 import PAD_CHAR, STANDARD_ALPHABET


@dataclass
class Base64Config:
    """Configuration for the Base64 codec.

    Attributes:
        alphabet: 64 unique ASCII characters mapped to sextets 0..63.
        pad_char: Trailing padding character.
    """

    alphabet: str = STANDARD_ALPHABET
    pad_char: str = PAD_CHAR


@dataclass
class RC4Config:
    """Configuration for the RC4 cipher.

    Attributes:
        persist_cursors: Continue one keystream across successive calls
            instead of restarting it on every call.
    """

    persist_cursors: bool = False
