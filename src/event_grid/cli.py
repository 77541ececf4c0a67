from __future__ import annotations

import argparse
import logging
import sys

import orjson

from .bootstrap import configure_logging
from .config import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Event Grid command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server for the calendar panel.")
    api_parser.add_argument("--host", default=None)
    api_parser.add_argument("--port", type=int, default=None)

    layout_parser = subparsers.add_parser("layout", help="Print the positioned event segments for a month as JSON.")
    layout_parser.add_argument("--month", required=True, help="Month to lay out, formatted YYYY-MM.")
    layout_parser.add_argument(
        "--hide",
        action="append",
        default=[],
        choices=["internal", "external", "foreign"],
        help="Hide a category (repeatable).",
    )
    layout_parser.add_argument("--industry", action="append", default=None, help="Only show this industry (repeatable).")
    layout_parser.add_argument("--country", action="append", default=None, help="Only show this country (repeatable).")
    layout_parser.add_argument("--layer-mode", choices=["per_row", "per_event"], default=None)

    return parser


def run_layout(args: argparse.Namespace) -> int:
    from .api import call_api

    try:
        result = call_api(
            "month_layout",
            month=args.month,
            internal="internal" not in args.hide,
            external="external" not in args.hide,
            foreign="foreign" not in args.hide,
            industries=args.industry,
            countries=args.country,
            layer_mode=args.layer_mode,
        )
    except ValueError as exc:
        logging.getLogger(__name__).error("Layout failed: %s", exc)
        return 2
    sys.stdout.buffer.write(orjson.dumps(result, option=orjson.OPT_INDENT_2) + b"\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    configure_logging(get_settings().log_level)
    logging.getLogger(__name__).info("Event Grid CLI starting")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
        return 0
    if args.command == "layout":
        return run_layout(args)
    parser.print_help()  # pragma: no cover - argparse enforces choices
    return 1


if __name__ == "__main__":
    sys.exit(main())
