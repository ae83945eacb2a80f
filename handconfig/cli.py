from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from handconfig.config import SyncConfig
from handconfig.log import configure_logging
from handconfig.sinks import RecordingSink
from handconfig.sync import ConfigFileError, SettingsSynchronizer


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="handconfig",
        description="Hand-tracking controller emulation settings",
    )
    p.add_argument("--host", required=False, help="Live endpoint host (default: localhost)")
    p.add_argument("--port", required=False, type=int, help="Live endpoint UDP port (default: 10001)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every dispatched record")
    sub = p.add_subparsers(dest="cmd", required=True)

    push = sub.add_parser("push", help="Load a configuration file and push it live")
    push.add_argument("config", type=Path)
    push.add_argument(
        "--flush-once",
        action="store_true",
        help="Send the snapshot once at end of file instead of after every line",
    )

    defaults = sub.add_parser("defaults", help="Write the default configuration file")
    defaults.add_argument("--out", required=True, type=Path)

    show = sub.add_parser("show", help="Print the records a flush would send")
    show.add_argument("config", nargs="?", type=Path)
    return p


def _config_from_args(args: argparse.Namespace) -> SyncConfig:
    config = SyncConfig.from_env()
    if args.host:
        config = replace(config, host=args.host)
    if args.port is not None:
        config = replace(config, port=args.port)
    if getattr(args, "flush_once", False):
        config = replace(config, flush_per_line=False)
    return config


def _print_error(message: str) -> None:
    sys.stderr.write(f"{message}\n")


def main(argv: list[str] | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    config = _config_from_args(args)

    try:
        if args.cmd == "push":
            sync = SettingsSynchronizer(config, on_error=_print_error)
            sync.load_from_file(args.config)
            return 0

        if args.cmd == "defaults":
            sync = SettingsSynchronizer(config)
            sync.save_to_file(args.out)
            return 0

        if args.cmd == "show":
            # Never touches the live endpoint: loading replays into a sink that
            # only records.
            sync = SettingsSynchronizer(
                replace(config, flush_per_line=False),
                live_sink=RecordingSink(),
                on_error=_print_error,
            )
            if args.config is not None:
                sync.load_from_file(args.config)
            sys.stdout.write("\n".join(sync.snapshot()) + "\n")
            return 0
    except (OSError, ConfigFileError) as e:
        _print_error(f"handconfig: {e}")
        return 1

    raise AssertionError(f"Unhandled command: {args.cmd}")
