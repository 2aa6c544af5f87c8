"""CLI entrypoint for routeguard."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from routeguard import __version__
from routeguard.config import load_config
from routeguard.constants.branding import CLI_DESCRIPTION
from routeguard.constants.config import VALID_OUTPUT_FORMATS
from routeguard.exceptions import ConfigError, FieldError, ManifestParseError
from routeguard.io import load_route_file
from routeguard.model import Route
from routeguard.reporting import ReportWriter, format_json, format_text
from routeguard.validation import validate_route

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="routeguard",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate Route manifests")
    validate.add_argument(
        "-f",
        "--file",
        type=Path,
        action="append",
        required=True,
        help="Route manifest (YAML or JSON; repeat for multiple files)",
    )
    validate.add_argument(
        "-r",
        "--root",
        type=Path,
        default=Path("."),
        help="Directory searched for routeguard.yaml (default: current directory)",
    )
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")
    validate.add_argument(
        "--output-format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=None,
        help="Report format: text (default) or json",
    )
    validate.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Write one JSON report per route under this directory",
    )
    validate.add_argument(
        "--disallow-deprecated",
        action="store_true",
        help="Reject deprecated fields such as spec.generation",
    )
    validate.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command != "validate":
        parser.error(f"Unsupported command: {args.command}")

    return _handle_validate(args)


def _handle_validate(args: argparse.Namespace) -> int:
    """Validate every route in the given files and report the results."""
    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    ctx = config.validation_context()
    if args.disallow_deprecated:
        ctx = ctx.with_disallow_deprecated()

    try:
        routes = [route for path in args.file for route in load_route_file(path)]
    except ManifestParseError as exc:
        print(f"Manifest error: {exc}", file=sys.stderr)
        return 2

    results: list[tuple[Route, FieldError | None]] = [(route, validate_route(ctx, route)) for route in routes]

    if args.output_dir is not None:
        writer = ReportWriter(args.output_dir)
        for route, error in results:
            report_path = writer.write(route, error)
            logger.debug("Wrote report %s", report_path)

    print(_render(results, args.output_format or config.output_format))

    invalid = sum(1 for _, error in results if error is not None)
    if invalid:
        logger.debug("%d of %d route(s) failed validation", invalid, len(results))
        return 1
    return 0


def _render(results: list[tuple[Route, FieldError | None]], output_format: str) -> str:
    if output_format == "json":
        return format_json(results)
    return "\n".join(format_text(route, error) for route, error in results)


if __name__ == "__main__":
    raise SystemExit(main())
