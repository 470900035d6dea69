from __future__ import annotations

__all__ = ["RC4", "RC4State", "rc4_initialize", "rc4_transform"]

import logging
from dataclasses import dataclass, field

from bytekit.libs.errors import InvalidKey

logger = logging.getLogger(__name__)


@dataclass
class RC4State:
    """Mutable RC4 state: the 256-entry permutation and the PRGA cursors.

    A state belongs to one caller; concurrent transforms on the same state
    need external locking.

    Attributes:
        S: Permutation of the byte values 0..255.
        i: First PRGA cursor.
        j: Second PRGA cursor.
        persist_cursors: When False, every :func:`rc4_transform` call starts
            from ``i = j = 0``. When True, cursors are saved back after each
            call and the keystream continues on the next one.
    """

    S: bytearray = field(repr=False)
    i: int = 0
    j: int = 0
    persist_cursors: bool = False

    def copy(self) -> RC4State:
        return RC4State(bytearray(self.S), self.i, self.j, self.persist_cursors)


def rc4_initialize(
    key: bytes | bytearray | memoryview,
    *,
    persist_cursors: bool = False,
) -> RC4State:
    """Perform the RC4 Key-Scheduling Algorithm (KSA).

    Args:
        key: RC4 key bytes (must not be empty).
        persist_cursors: Whether the state keeps its PRGA cursors between
            :func:`rc4_transform` calls.

    Returns:
        A freshly scrambled state.

    Raises:
        InvalidKey: If ``key`` is empty.
    """
    if not key:
        raise InvalidKey("Key must not be empty")

    key = bytes(key)
    S = bytearray(range(256))
    j = 0
    klen = len(key)
    for i in range(256):
        j = (j + S[i] + key[i % klen]) & 0xFF
        S[i], S[j] = S[j], S[i]

    logger.debug("rc4: state initialized from %d-byte key", klen)
    return RC4State(S, persist_cursors=persist_cursors)


def rc4_transform(
    data: bytes | bytearray | memoryview,
    state: RC4State,
) -> bytearray | memoryview:
    """Encrypt/Decrypt data with the RC4 Pseudo-Random Generation Algorithm.

    Mutable buffers (``bytearray`` or a writable ``memoryview``) are XORed
    in place and returned as the same object, so the caller's plaintext is
    overwritten. Immutable input is copied into a new ``bytearray`` first.

    The permutation in ``state`` is advanced either way. Cursors restart at
    zero on every call unless ``state.persist_cursors`` is set.

    Args:
        data: Plaintext or ciphertext.
        state: State returned by :func:`rc4_initialize`.

    Returns:
        The transformed buffer.
    """
    buf: bytearray | memoryview
    if isinstance(data, bytearray) or _is_writable_view(data):
        buf = data
    else:
        buf = bytearray(data)

    if not buf:
        return buf

    S = state.S
    if state.persist_cursors:
        i, j = state.i, state.j
    else:
        i = j = 0

    for idx in range(len(buf)):
        i = (i + 1) & 0xFF
        j = (j + S[i]) & 0xFF
        S[i], S[j] = S[j], S[i]
        t = (S[i] + S[j]) & 0xFF
        buf[idx] ^= S[t]

    if state.persist_cursors:
        state.i, state.j = i, j

    return buf


def _is_writable_view(data: object) -> bool:
    return (
        isinstance(data, memoryview)
        and not data.readonly
        and data.format == "B"
        and data.ndim == 1
    )


class RC4:
    """Minimal RC4 cipher object built on :func:`rc4_initialize`.

    In the default mode each :meth:`crypt` call starts over from the
    key-scheduled state, so encrypting and then decrypting with the same
    object round-trips. With ``persist_cursors=True`` the object behaves
    as one continuous keystream across calls.
    """

    def __init__(self, key: bytes, *, persist_cursors: bool = False) -> None:
        """
        Args:
            key: RC4 key bytes (must not be empty).
            persist_cursors: Continue the keystream across :meth:`crypt`
                calls instead of restarting it.

        Raises:
            InvalidKey: If ``key`` is empty.
        """
        self._S0 = rc4_initialize(key, persist_cursors=persist_cursors)
        self._state = self._S0.copy()

    @property
    def persist_cursors(self) -> bool:
        return self._S0.persist_cursors

    def crypt(self, data: bytes) -> bytes:
        """Encrypts/Decrypts data

        Args:
            data: Input bytes, either plaintext or ciphertext.

        Returns:
            Output bytes after XOR with the RC4 keystream.
        """
        if not data:
            return b""

        state = self._state if self.persist_cursors else self._S0.copy()
        return bytes(rc4_transform(bytearray(data), state))

    def reset(self) -> None:
        """Rewind a continuous keystream back to the key-scheduled state."""
        self._state = self._S0.copy()
