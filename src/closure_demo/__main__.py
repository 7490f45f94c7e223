"""CLI entry-point for closure_demo.

Usage:
    python -m closure_demo counter [--instances N] [--calls C ...] [--start S] [--json]
    python -m closure_demo registry [--seed FILE] [--json]
    python -m closure_demo demo
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import jsonschema
import yaml

from closure_demo import __version__
from closure_demo.config import DemoConfig
from closure_demo.demo import run_counters, run_registries
from closure_demo.model import Record
from closure_demo.seed import load_seed
from closure_demo.utils.exit_codes import ExitCode
from closure_demo.utils.json_norm import stable_json_dump

_logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="closure-demo",
        description="Private state behind closures: counter and registry factories.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log factory activity to stderr.",
    )
    sub = p.add_subparsers(dest="command")

    # ── counter subcommand ──────────────────────────────────────────
    counter_p = sub.add_parser(
        "counter",
        help="Create independent counters and call each of them.",
    )
    counter_p.add_argument(
        "--instances",
        type=int,
        default=None,
        help="Number of counters to create (default 2).",
    )
    counter_p.add_argument(
        "--calls",
        type=int,
        nargs="+",
        default=None,
        help="Calls per counter, in creation order (default 4 3).",
    )
    counter_p.add_argument(
        "--start",
        type=int,
        default=None,
        help="Initial private value of every counter (default 0).",
    )
    counter_p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the returned values as JSON to stdout.",
    )

    # ── registry subcommand ─────────────────────────────────────────
    reg_p = sub.add_parser(
        "registry",
        help="Build two registries, rewrite one verse on each, print both.",
    )
    reg_p.add_argument(
        "--seed",
        type=Path,
        default=None,
        help="YAML or JSON file with the records to start from.",
    )
    reg_p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print lookups and both snapshots as JSON to stdout.",
    )

    # ── demo subcommand ─────────────────────────────────────────────
    sub.add_parser(
        "demo",
        help="Run the counter and registry replays with default settings.",
    )
    return p


def _load_records(seed_path: Path | None) -> tuple[Record, ...] | None:
    if seed_path is None:
        return None
    return load_seed(seed_path)


def _handle_counter(config: DemoConfig) -> int:
    results = run_counters(config)
    if config.json_out:
        stable_json_dump({"counters": results}, sys.stdout)
        return ExitCode.SUCCESS
    for values in results:
        for v in values:
            print(v)
    return ExitCode.SUCCESS


def _handle_registry(config: DemoConfig) -> int:
    try:
        records = _load_records(config.seed_path)
    except (OSError, ValueError, yaml.YAMLError, jsonschema.ValidationError) as exc:
        print(f"error: invalid seed {config.seed_path}: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    try:
        if config.json_out:
            stable_json_dump(run_registries(records), sys.stdout)
        else:
            run_registries(records, out=sys.stdout)
    except jsonschema.ValidationError as exc:
        print(f"error: registry snapshot violates schema: {exc.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR

    try:
        config = DemoConfig.from_env()
        if args.command == "counter":
            config = config.override(
                instances=args.instances,
                calls=tuple(args.calls) if args.calls is not None else None,
                start=args.start,
                json_out=args.json_out,
            )
        elif args.command == "registry":
            config = config.override(seed_path=args.seed, json_out=args.json_out)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    _logger.debug("running %s with %r", args.command, config)

    if args.command == "counter":
        return _handle_counter(config)
    if args.command == "registry":
        return _handle_registry(config)

    # demo: both replays, text output, env-configured seed if any
    rc = _handle_counter(config)
    if rc != ExitCode.SUCCESS:
        return rc
    return _handle_registry(config)


if __name__ == "__main__":
    raise SystemExit(main())
