"""
Command line front end for the Base64 codec and the RC4 cipher.

Usage:
  bytekit b64encode "Hello, Base64!"
  bytekit b64decode SGVsbG8sIEJhc2U2NCE=
  bytekit rc4 --key Key Plaintext
  bytekit rc4 --key Key --hex BBF316E8D940AF0AD3
  bytekit demo
  bytekit config init [--force]
  bytekit config import settings.toml
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from bytekit import __version__
from bytekit.infra.config import (
    ConfigAdapter,
    copy_default_config,
    load_config,
    save_config_file,
)
from bytekit.infra.logger import setup_logging
from bytekit.infra.paths import DEFAULT_CONFIG_FILENAME, SETTING_PATH
from bytekit.libs.crypto import build_rc4
from bytekit.libs.encoding import build_base64_codec
from bytekit.libs.errors import CodecError

logger = logging.getLogger(__name__)

DEMO_B64_TEXT = "Hello, Base64!"
DEMO_RC4_KEY = "secretkey"
DEMO_RC4_TEXT = "Hello, RC4!"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bytekit",
        description="Base64 encoding and RC4 stream cipher utilities.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--config", type=Path, help="Path to a TOML/JSON config")
    parser.add_argument("--log-level", help="Override the configured log level")

    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("b64encode", help="Base64-encode UTF-8 text")
    enc.add_argument("text")

    dec = sub.add_parser("b64decode", help="Decode Base64 text")
    dec.add_argument("text")

    rc4 = sub.add_parser("rc4", help="RC4-transform text or hex")
    rc4.add_argument("--key", required=True, help="Cipher key (UTF-8)")
    group = rc4.add_mutually_exclusive_group(required=True)
    group.add_argument("text", nargs="?", help="Plaintext; prints hex ciphertext")
    group.add_argument("--hex", help="Hex ciphertext; prints decrypted text")

    sub.add_parser("demo", help="Run the Base64 and RC4 demonstrations")

    cfg = sub.add_parser("config", help="Manage configuration files")
    cfg_sub = cfg.add_subparsers(dest="config_command", required=True)
    init = cfg_sub.add_parser(
        "init", help=f"Write a sample {DEFAULT_CONFIG_FILENAME} to the cwd"
    )
    init.add_argument("--force", action="store_true", help="Overwrite existing")
    imp = cfg_sub.add_parser("import", help="Save a TOML/JSON file as user settings")
    imp.add_argument("source", type=Path)
    return parser


def _load_settings(config_path: Path | None) -> dict[str, Any]:
    try:
        return load_config(config_path)
    except FileNotFoundError:
        if config_path is not None:
            raise
        logger.debug("No config file found, using defaults")
        return {}


def _run_b64encode(adapter: ConfigAdapter, args: argparse.Namespace) -> None:
    codec = build_base64_codec(adapter.get_base64_config())
    print(codec.encode(args.text.encode("utf-8")))


def _run_b64decode(adapter: ConfigAdapter, args: argparse.Namespace) -> None:
    codec = build_base64_codec(adapter.get_base64_config())
    print(codec.decode(args.text).decode("utf-8", errors="replace"))


def _run_rc4(adapter: ConfigAdapter, args: argparse.Namespace) -> None:
    cipher = build_rc4(args.key.encode("utf-8"), adapter.get_rc4_config())
    if args.hex is not None:
        try:
            data = bytes.fromhex(args.hex)
        except ValueError as e:
            raise CodecError(f"Invalid hex input: {e}") from e
        print(cipher.crypt(data).decode("utf-8", errors="replace"))
    else:
        print(cipher.crypt(args.text.encode("utf-8")).hex().upper())


def _run_demo(adapter: ConfigAdapter, args: argparse.Namespace) -> None:
    codec = build_base64_codec(adapter.get_base64_config())
    encoded = codec.encode(DEMO_B64_TEXT.encode("utf-8"))
    print(f"Encoded: {encoded}")
    print(f"Decoded: {codec.decode(encoded).decode('utf-8')}")

    # Fresh cipher objects per direction so each starts from the KSA output
    key = DEMO_RC4_KEY.encode("utf-8")
    rc4_cfg = adapter.get_rc4_config()
    ciphertext = build_rc4(key, rc4_cfg).crypt(DEMO_RC4_TEXT.encode("utf-8"))
    print(f"Original data: {DEMO_RC4_TEXT}")
    print(f"Encrypted data: {' '.join(f'{b:02X}' for b in ciphertext)}")
    plaintext = build_rc4(key, rc4_cfg).crypt(ciphertext)
    print(f"Decrypted data: {plaintext.decode('utf-8')}")


def _run_config(args: argparse.Namespace) -> int:
    if args.config_command == "init":
        target = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if target.exists() and not args.force:
            print(f"Refusing to overwrite {target} (use --force)", file=sys.stderr)
            return 1
        copy_default_config(target)
        print(f"Wrote {target}")
        return 0

    try:
        save_config_file(args.source, SETTING_PATH)
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    print(f"Saved settings to {SETTING_PATH}")
    return 0


_COMMANDS = {
    "b64encode": _run_b64encode,
    "b64decode": _run_b64decode,
    "rc4": _run_rc4,
    "demo": _run_demo,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # config commands must work even when the current settings are broken
    if args.command == "config":
        try:
            setup_logging(args.log_level or "INFO")
        except ValueError as e:
            print(f"Configuration error: {e}", file=sys.stderr)
            return 2
        return _run_config(args)

    try:
        adapter = ConfigAdapter(_load_settings(args.config))
        setup_logging(
            args.log_level or adapter.get_log_level(),
            adapter.get_log_dir(),
        )
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    try:
        _COMMANDS[args.command](adapter, args)
    except CodecError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # invalid alphabet in config surfaces when the codec is built
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    return 0
