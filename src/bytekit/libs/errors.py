class CodecError(ValueError):
    """Base class for encoding and cipher input errors."""


class InvalidLength(CodecError):
    """Encoded input length is not a positive multiple of the group size."""


class InvalidCharacter(CodecError):
    """Encoded input contains a character outside the alphabet."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Invalid character {char!r} at position {position}")
        self.char = char
        self.position = position


class InvalidKey(CodecError):
    """Cipher key is unusable (for example, empty)."""
