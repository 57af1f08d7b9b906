"""Command-line inspection of implementor artifacts."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from .artifact import discover_trait_artifacts, read_artifact
from .core import InspectSettings, load_inspect_settings, summarize_table


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="implementor-registry",
        description="Inspect generated trait implementor artifacts.",
    )
    parser.add_argument("--config", default=None, help="Path to a JSON/YAML settings file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    # Subcommand copy must not override a value given before the subcommand.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=argparse.SUPPRESS, help="Path to a JSON/YAML settings file.")

    sub = parser.add_subparsers(dest="command", required=True)

    p_show = sub.add_parser("show", parents=[common], help="Summarize one artifact.")
    p_show.add_argument("artifact", type=Path, help="Path to a trait.<Name>.js artifact.")
    p_show.add_argument("--json", action="store_true", default=None, help="Print the table as JSON.")

    p_list = sub.add_parser("list", parents=[common], help="List artifacts under a trait.impl directory.")
    p_list.add_argument("root", nargs="?", type=Path, default=None, help="trait.impl directory.")
    p_list.add_argument("--crate", default=None, help="Only list traits defined in this crate.")
    return parser


def _load_settings(config: str | None) -> InspectSettings:
    if config is None:
        return InspectSettings()

    settings = load_inspect_settings(config)
    if settings.root is not None and not settings.root.is_absolute():
        # Relative roots are resolved against the settings file location.
        settings = InspectSettings(
            root=Path(config).parent / settings.root,
            crate=settings.crate,
            as_json=settings.as_json,
        )
    return settings


def _show(args: argparse.Namespace, settings: InspectSettings) -> int:
    table = read_artifact(args.artifact)
    as_json = settings.as_json if args.json is None else args.json
    if as_json:
        print(json.dumps(table, ensure_ascii=False, indent=2, sort_keys=True))
        return 0

    summary = summarize_table(table)
    for crate in summary.crates:
        print(f"{crate}\t{summary.crate_counts[crate]}")
    print(f"total: {summary.total} implementor(s) in {len(summary.crates)} crate(s)")
    return 0


def _list(args: argparse.Namespace, settings: InspectSettings, parser: argparse.ArgumentParser) -> int:
    root = args.root if args.root is not None else settings.root
    if root is None:
        parser.error("list requires ROOT or inspect.root in --config")
    crate = args.crate if args.crate is not None else settings.crate

    for record in discover_trait_artifacts(root, crate=crate):
        print(f"{record.trait_path}\t{record.path.relative_to(root).as_posix()}")
    return 0


def run_implementors_cli(argv: Sequence[str] | None = None) -> int:
    """Run the inspection CLI.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        CLI argument list. When ``None``, reads process args.

    Returns
    -------
    int
        Exit code (`0` on success, `1` on artifact or settings errors).
    """

    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        settings = _load_settings(args.config)
        if args.command == "show":
            return _show(args, settings)
        return _list(args, settings, parser)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


def main() -> None:
    """Execute the CLI and exit with its return code."""

    raise SystemExit(run_implementors_cli())


if __name__ == "__main__":
    main()


__all__ = ["main", "run_implementors_cli"]
