"""
Command-line entry point.

`genpass` starts the interactive terminal generator; `genpass --print`
generates a single password and prints it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Sequence

from .app import Controller
from .config import GenPassConfig, DEFAULT_CONFIG, MAX_VALUE, MIN_VALUE
from .generator import CategoryCounts, check_password_strength, generate_password
from .randomness import ENTROPY_SOURCES, make_random_source
from .tui import TerminalSetupError, run

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genpass",
        description="Generate passwords from per-category character counts.",
    )
    counts = parser.add_argument_group("initial counts")
    for name in ("letters", "uppercase", "symbols", "numbers"):
        counts.add_argument(
            f"--{name}",
            type=int,
            default=getattr(DEFAULT_CONFIG, name),
            metavar="N",
            help=f"{name} in the password (default: %(default)s, range {MIN_VALUE}-{MAX_VALUE})",
        )

    parser.add_argument(
        "--entropy",
        choices=ENTROPY_SOURCES,
        default=DEFAULT_CONFIG.entropy_source,
        help="random source (default: %(default)s)",
    )
    parser.add_argument(
        "--qubits",
        type=int,
        default=DEFAULT_CONFIG.num_qubits,
        metavar="N",
        help="qubits per circuit run for --entropy quantum (default: %(default)s)",
    )
    parser.add_argument(
        "--entropy-rounds",
        type=int,
        default=DEFAULT_CONFIG.entropy_rounds,
        metavar="N",
        help="SHA-256 mixing rounds for --entropy quantum (default: %(default)s)",
    )
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="print one password and exit instead of starting the interface",
    )
    parser.add_argument("--log-file", metavar="PATH", help="write log records to PATH")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> GenPassConfig:
    config = replace(
        DEFAULT_CONFIG,
        entropy_source=args.entropy,
        num_qubits=args.qubits,
        entropy_rounds=args.entropy_rounds,
    )
    return replace(
        config,
        letters=config.clamp(args.letters),
        uppercase=config.clamp(args.uppercase),
        symbols=config.clamp(args.symbols),
        numbers=config.clamp(args.numbers),
    )


def setup_logging(args: argparse.Namespace) -> None:
    """
    The interactive screen owns the terminal, so records only go to
    --log-file there. In --print mode they go to stderr.
    """
    level = logging.DEBUG if args.verbose else logging.WARNING
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=level, format=LOG_FORMAT)
    elif args.print_only:
        logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    else:
        logging.getLogger("genpass").addHandler(logging.NullHandler())


def print_password(config: GenPassConfig) -> None:
    counts = CategoryCounts(
        letters=config.letters,
        uppercase=config.uppercase,
        symbols=config.symbols,
        numbers=config.numbers,
    )
    password = generate_password(counts, make_random_source(config))
    strength = check_password_strength(password)
    print(f"Generated password: {password}")
    print(f"Strength: {strength.label}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args)

    config = config_from_args(args)

    try:
        if args.print_only:
            print_password(config)
            return 0
        controller = Controller(config)
    except ValueError as exc:
        # Bad entropy settings, e.g. more qubits than the simulator supports.
        parser.error(str(exc))

    logger.debug("Starting interactive session (entropy=%s)", config.entropy_source)
    try:
        run(config, controller)
    except TerminalSetupError as exc:
        print(f"genpass: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
