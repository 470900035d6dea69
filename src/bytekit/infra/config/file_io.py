from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from bytekit.infra.paths import DEFAULT_CONFIG_FILE, LOCAL_SETTING_FILES, SETTING_PATH

logger = logging.getLogger(__name__)


def _resolve_file_path(
    user_path: str | Path | None,
    local_filenames: list[str],
    fallback_path: Path,
) -> Path | None:
    """
    Find the configuration file to load.

    Lookup order:
        1. User-specified path (if provided and exists)
        2. The first of `local_filenames` present in the working directory
        3. The per-user fallback path

    Args:
        user_path: Optional file path explicitly provided by the user.
        local_filenames: File names to probe in the working directory.
        fallback_path: Per-user settings file.

    Returns:
        The resolved path, or None if nothing matched.
    """
    if user_path:
        path = Path(user_path).expanduser().resolve()
        if path.is_file():
            return path
        logger.warning("Specified config file not found: %s", path)

    cwd = Path.cwd()
    for name in local_filenames:
        candidate = (cwd / name).resolve()
        if candidate.is_file():
            logger.debug("Using local config file: %s", candidate)
            return candidate

    if fallback_path.is_file():
        return fallback_path.resolve()

    return None


def _load_by_extension(path: Path) -> dict[str, Any]:
    """
    Parse a `.toml` or `.json` configuration file.

    Args:
        path: Path to the configuration file.

    Returns:
        Parsed configuration mapping.

    Raises:
        ValueError: If the extension is unsupported, parsing fails, or the
            root element is not a table/object.
    """
    ext = path.suffix.lower()

    if ext == ".toml":
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e

    elif ext == ".json":
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    else:
        raise ValueError(f"Unsupported config file extension: {ext}")

    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a dict, got {type(data)} in {path}")

    return data


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load the bytekit configuration mapping.

    Resolution order:
        - Explicit `config_path` (if provided)
        - `settings.toml` or `settings.json` in the working directory
        - `SETTING_PATH` in the user config directory

    Args:
        config_path: Optional explicit configuration file path.

    Returns:
        Parsed configuration as a dictionary.

    Raises:
        FileNotFoundError: If no configuration file is found.
        ValueError: If the file cannot be parsed.
    """
    path = _resolve_file_path(
        user_path=config_path,
        local_filenames=LOCAL_SETTING_FILES,
        fallback_path=SETTING_PATH,
    )
    if not path:
        raise FileNotFoundError("No valid config file found.")

    logger.debug("Loading configuration from: %s", path)
    return _load_by_extension(path)


def copy_default_config(target: Path) -> None:
    """Write the packaged sample configuration to `target`."""
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(DEFAULT_CONFIG_FILE.read_bytes())
    logger.info("Sample configuration written to: %s", target)


def save_config(
    config: dict[str, Any],
    output_path: str | Path = SETTING_PATH,
) -> None:
    """
    Save a configuration mapping as JSON.

    Args:
        config: Configuration mapping.
        output_path: Destination JSON file.

    Raises:
        OSError: If writing to disk fails.
    """
    output = Path(output_path).expanduser().resolve()
    output.parent.mkdir(parents=True, exist_ok=True)

    try:
        with output.open("w", encoding="utf-8") as f:
            json.dump(config, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error("Failed to write config JSON '%s': %s", output, e)
        raise

    logger.info("Configuration saved to JSON: %s", output)


def save_config_file(
    source_path: str | Path,
    output_path: str | Path = SETTING_PATH,
) -> None:
    """
    Convert a TOML/JSON configuration file into the JSON settings file.

    Raises:
        FileNotFoundError: If the source file does not exist.
        ValueError: If the source file cannot be parsed.
    """
    source = Path(source_path).expanduser().resolve()
    if not source.is_file():
        raise FileNotFoundError(f"Source file not found: {source}")

    save_config(_load_by_extension(source), output_path)
