"""
Command-line entry point.

Usage:
    ledgerkeys convert-id <KEY>     print a key (hex, G... or S...) in every form
    ledgerkeys gen-seed             print a new secret seed and its public key
    ledgerkeys sec-to-pub           read a secret seed from stdin, print its public key

Environment Variables:
    LEDGERKEYS_LOG_LEVEL            log level (default: WARNING)
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .__about__ import __version__
from .config import load_settings
from .errors import LedgerKeysError
from .keys import SecretKey, log_key
from .logger import get_logger

EXIT_SUCCESS = 0
EXIT_ERROR = 1


def _convert_id(args: argparse.Namespace) -> int:
    log_key(sys.stdout, args.key)
    return EXIT_SUCCESS


def _gen_seed(args: argparse.Namespace) -> int:
    with SecretKey.random() as sk:
        print(f"Secret seed: {sk.get_strkey_seed()}")
        print(f"Public: {sk.get_strkey_public()}")
    return EXIT_SUCCESS


def _sec_to_pub(args: argparse.Namespace) -> int:
    if sys.stdin.isatty():
        print("Secret key seed: ", end="", file=sys.stderr, flush=True)
    text = sys.stdin.readline().strip()
    with SecretKey.from_strkey_seed(text) as sk:
        print(sk.get_strkey_public())
    return EXIT_SUCCESS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledgerkeys", description="Ed25519 key utilities for ledger nodes."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("convert-id", help="display a key in all known forms")
    p.add_argument("key", help="hex, public key (G...) or seed (S...)")
    p.set_defaults(func=_convert_id)

    p = sub.add_parser("gen-seed", help="generate a random secret seed")
    p.set_defaults(func=_gen_seed)

    p = sub.add_parser("sec-to-pub", help="print the public key for a seed read from stdin")
    p.set_defaults(func=_sec_to_pub)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    log = get_logger("ledgerkeys", level=settings.log_level)
    try:
        return args.func(args)
    except LedgerKeysError as e:
        log.error("%s failed: %s", args.command, e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


__all__: tuple[str, ...] = ("build_parser", "main")
