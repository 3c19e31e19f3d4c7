from __future__ import annotations

import argparse
import json
import logging
from datetime import timedelta
from typing import Any

from npm_connector.config import DEFAULT_PACKAGE
from npm_connector.connector import ConnectorUserError, get_data, get_schema
from npm_connector.models import to_arrow_table
from npm_connector.utils.time import latest_completed_day


def _print(value: Any) -> None:
    print(json.dumps(value, indent=2, default=str))


def parse_args() -> argparse.Namespace:
    end_day = latest_completed_day()
    parser = argparse.ArgumentParser(
        description=(
            "Simple debug helper that runs the connector against the live npm "
            "downloads API."
        )
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("schema", help="Print the declared field schema")

    data = subparsers.add_parser("data", help="Fetch rows for one or more packages")
    data.add_argument(
        "--package",
        default=DEFAULT_PACKAGE,
        help="Package name or comma-separated names, e.g. left-pad,lodash",
    )
    data.add_argument(
        "--start-date",
        default=(end_day - timedelta(days=29)).isoformat(),
        help="YYYY-MM-DD (default: 30 days before the latest completed day)",
    )
    data.add_argument(
        "--end-date",
        default=end_day.isoformat(),
        help="YYYY-MM-DD (default: latest completed UTC day)",
    )
    data.add_argument(
        "--fields",
        default="packageName,day,downloads",
        help="Comma-separated field ids",
    )
    data.add_argument(
        "--table",
        action="store_true",
        help="Print the arrow table instead of the raw payload",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "schema":
        _print(get_schema())
        return

    if args.command == "data":
        request = {
            "configParams": {"package": args.package},
            "dateRange": {"startDate": args.start_date, "endDate": args.end_date},
            "fields": [{"name": name} for name in args.fields.split(",")],
        }
        try:
            result = get_data(request)
        except ConnectorUserError as exc:
            _print({"text": exc.text, "debugText": exc.debug_text})
            raise SystemExit(1) from exc
        if args.table:
            print(to_arrow_table(result))
            return
        _print(result)
        return

    raise RuntimeError(f"Unknown command: {args.command}")


if __name__ == "__main__":
    main()
