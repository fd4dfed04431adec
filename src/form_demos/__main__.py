"""Run one of the form demos."""
from __future__ import annotations

import argparse
from typing import List, Optional

from .config import AppConfig
from .logging_config import setup_logging

DEMOS = ("stack", "queue", "qr")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="form-demos", description=__doc__)
    parser.add_argument("demo", nargs="?", choices=DEMOS, default="qr", help="demo window to open")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG or WARNING")
    parser.add_argument("--log-file", help="also write logs to this file")
    parser.add_argument("--debug", action="store_true", help="append tracebacks to error messages")
    return parser


def load_config(argv: Optional[List[str]] = None) -> tuple[str, AppConfig]:
    """Parse ``argv`` and return the chosen demo and its configuration."""

    args = build_parser().parse_args(argv)
    config = AppConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level.upper()
    if args.log_file:
        config.log_file = args.log_file
    if args.debug:
        config.debug = True
    return args.demo, config


def main(argv: Optional[List[str]] = None) -> int:
    demo, config = load_config(argv)
    setup_logging(config)

    from .app import run

    return run(demo, config)


if __name__ == "__main__":  # pragma: no cover - manual launch only
    raise SystemExit(main())
