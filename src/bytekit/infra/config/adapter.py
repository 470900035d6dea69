from __future__ import annotations

from pathlib import Path
from typing import Any

from bytekit.libs.encoding.b64 import PAD_CHAR, STANDARD_ALPHABET, URLSAFE_ALPHABET
from bytekit.schemas import Base64Config, RC4Config

_NAMED_ALPHABETS = {
    "standard": STANDARD_ALPHABET,
    "urlsafe": URLSAFE_ALPHABET,
}


class ConfigAdapter:
    """Typed accessor over a loaded configuration mapping.

    Missing sections and keys fall back to built-in defaults, so an empty
    mapping yields the reference behavior of both primitives.

    Args:
        config (dict[str, Any]): Loaded configuration mapping.
    """

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self._config: dict[str, Any] = dict(config or {})

    def get_config(self) -> dict[str, Any]:
        """Return the full raw configuration mapping."""
        return self._config

    def get_base64_config(self) -> Base64Config:
        """Build a Base64Config from the ``base64`` section.

        ``alphabet`` may be a literal 64-character alphabet or one of the
        names ``"standard"`` and ``"urlsafe"``.

        Returns:
            Base64Config: Resolved codec configuration.

        Raises:
            ValueError: If ``alphabet`` or ``pad_char`` is not a string.
        """
        cfg = self._section(self._config, "base64")
        alphabet = cfg.get("alphabet", "standard")
        pad_char = cfg.get("pad_char", PAD_CHAR)

        if not isinstance(alphabet, str):
            raise ValueError(
                f"base64.alphabet must be str, got {type(alphabet).__name__}"
            )
        if not isinstance(pad_char, str):
            raise ValueError(
                f"base64.pad_char must be str, got {type(pad_char).__name__}"
            )

        alphabet = _NAMED_ALPHABETS.get(alphabet.lower(), alphabet)
        return Base64Config(alphabet=alphabet, pad_char=pad_char)

    def get_rc4_config(self) -> RC4Config:
        """Build an RC4Config from the ``rc4`` section.

        Raises:
            ValueError: If ``persist_cursors`` is not a boolean.
        """
        cfg = self._section(self._config, "rc4")
        persist = cfg.get("persist_cursors", False)
        if not isinstance(persist, bool):
            raise ValueError(
                f"rc4.persist_cursors must be bool, got {type(persist).__name__}"
            )
        return RC4Config(persist_cursors=persist)

    def get_log_level(self) -> str:
        """Return the configured logging level, ``"INFO"`` if missing."""
        level = self._debug_cfg().get("log_level")
        if level is None:
            return "INFO"
        if not isinstance(level, str):
            raise ValueError(
                f"general.debug.log_level must be str, got {type(level).__name__}"
            )
        return level or "INFO"

    def get_log_dir(self) -> Path | None:
        """Return the log file directory, or None to log to console only."""
        log_dir = self._debug_cfg().get("log_dir")
        if log_dir is None:
            return None
        if not isinstance(log_dir, str):
            raise ValueError(
                f"general.debug.log_dir must be str, got {type(log_dir).__name__}"
            )
        if not log_dir:
            return None
        return Path(log_dir).expanduser().resolve()

    def _debug_cfg(self) -> dict[str, Any]:
        general = self._section(self._config, "general")
        return self._section(general, "debug", prefix="general.")

    @staticmethod
    def _section(
        parent: dict[str, Any], name: str, prefix: str = ""
    ) -> dict[str, Any]:
        section = parent.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ValueError(
                f"[{prefix}{name}] must be a table, got {type(section).__name__}"
            )
        return section
