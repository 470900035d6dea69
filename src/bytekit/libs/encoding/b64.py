"""
Base64 binary-to-text codec (RFC 4648 layout) with a pluggable alphabet.
"""

from __future__ import annotations

__all__ = [
    "STANDARD_ALPHABET",
    "URLSAFE_ALPHABET",
    "PAD_CHAR",
    "Base64Codec",
    "base64_encode",
    "base64_decode",
]

import logging

from bytekit.libs.errors import InvalidCharacter, InvalidLength

logger = logging.getLogger(__name__)

STANDARD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
URLSAFE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
PAD_CHAR = "="

_NOT_FOUND = -1


class Base64Codec:
    """Encode bytes into padded Base64 text and decode it back.

    A codec is immutable after construction, so one instance may be shared
    freely between callers.
    """

    def __init__(self, alphabet: str = STANDARD_ALPHABET, pad_char: str = PAD_CHAR):
        """
        Args:
            alphabet: 64 unique ASCII characters, indexed 0..63.
            pad_char: Single ASCII character used for trailing padding.
                Must not be part of ``alphabet``.

        Raises:
            ValueError: If the alphabet or padding character is invalid.
        """
        if len(alphabet) != 64 or not alphabet.isascii():
            raise ValueError("Alphabet must be 64 ASCII characters")
        if len(set(alphabet)) != 64:
            raise ValueError("Alphabet characters must be unique")
        if len(pad_char) != 1 or not pad_char.isascii():
            raise ValueError("Padding must be a single ASCII character")
        if pad_char in alphabet:
            raise ValueError("Padding character must not be part of the alphabet")

        self._alphabet = alphabet
        self._pad = pad_char
        self._pad_ord = ord(pad_char)
        self._encode_table = alphabet.encode("ascii")
        self._decode_table = self._build_decode_table(alphabet)

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def pad_char(self) -> str:
        return self._pad

    def encode(self, data: bytes | bytearray | memoryview) -> str:
        """Encode bytes into Base64 text.

        Every 3 input bytes become 4 output characters. A trailing group of
        2 bytes ends with one padding character, a trailing group of 1 byte
        ends with two.

        Args:
            data: Input bytes; may be empty.

        Returns:
            ASCII text of length ``4 * ceil(len(data) / 3)``.
        """
        data = bytes(data)
        n = len(data)
        if n == 0:
            return ""

        table = self._encode_table
        pad = self._pad_ord
        out = bytearray(4 * ((n + 2) // 3))
        o = 0
        for i in range(0, n, 3):
            remain = n - i
            a = data[i]
            b = data[i + 1] if remain > 1 else 0
            c = data[i + 2] if remain > 2 else 0
            triple = (a << 16) | (b << 8) | c

            out[o] = table[(triple >> 18) & 0x3F]
            out[o + 1] = table[(triple >> 12) & 0x3F]
            out[o + 2] = table[(triple >> 6) & 0x3F] if remain > 1 else pad
            out[o + 3] = table[triple & 0x3F] if remain > 2 else pad
            o += 4

        logger.debug("base64: encoded %d bytes into %d chars", n, len(out))
        return out.decode("ascii")

    def decode(self, text: str | bytes | bytearray) -> bytes:
        """Decode Base64 text back into bytes.

        Padding characters count as zero sextets; the output length is
        reduced by one for each of the last two characters that is padding.

        Args:
            text: Encoded text. ASCII ``bytes`` are accepted as well.

        Returns:
            The decoded bytes.

        Raises:
            InvalidLength: If the length is not a positive multiple of 4.
            InvalidCharacter: If a character is neither in the alphabet nor
                the padding character.
        """
        n = len(text)
        if n == 0 or n % 4:
            raise InvalidLength(
                f"Base64 input length must be a positive multiple of 4, got {n}"
            )
        raw = self._to_codes(text)

        pad = self._pad_ord
        table = self._decode_table

        sextets = bytearray(n)
        for pos, ch in enumerate(raw):
            if ch == pad:
                continue
            idx = table[ch] if ch < 128 else _NOT_FOUND
            if idx == _NOT_FOUND:
                raise InvalidCharacter(chr(ch), pos)
            sextets[pos] = idx

        out_len = n // 4 * 3
        if raw[-1] == pad:
            out_len -= 1
        if raw[-2] == pad:
            out_len -= 1

        out = bytearray(out_len)
        j = 0
        for i in range(0, n, 4):
            triple = (
                (sextets[i] << 18)
                | (sextets[i + 1] << 12)
                | (sextets[i + 2] << 6)
                | sextets[i + 3]
            )
            for shift in (16, 8, 0):
                if j < out_len:
                    out[j] = (triple >> shift) & 0xFF
                    j += 1

        logger.debug("base64: decoded %d chars into %d bytes", n, out_len)
        return bytes(out)

    @staticmethod
    def _to_codes(text: str | bytes | bytearray) -> bytes:
        """Return the character codes of ``text`` without losing bad chars."""
        if isinstance(text, str):
            for pos, ch in enumerate(text):
                if ord(ch) > 0x7F:
                    raise InvalidCharacter(ch, pos)
            return text.encode("ascii")
        return bytes(text)

    @staticmethod
    def _build_decode_table(alphabet: str) -> list[int]:
        table = [_NOT_FOUND] * 128
        for idx, ch in enumerate(alphabet):
            table[ord(ch)] = idx
        return table

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(alphabet={self._alphabet!r}, "
            f"pad_char={self._pad!r})"
        )


_STANDARD = Base64Codec()


def base64_encode(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes with the standard Base64 alphabet."""
    return _STANDARD.encode(data)


def base64_decode(text: str | bytes | bytearray) -> bytes:
    """Decode standard-alphabet Base64 text.

    Raises:
        InvalidLength: If the length is not a positive multiple of 4.
        InvalidCharacter: If a non-alphabet, non-padding character appears.
    """
    return _STANDARD.decode(text)
