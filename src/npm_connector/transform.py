from __future__ import annotations

import json
from typing import Any, Callable, Sequence

from npm_connector.models import DailyDownload, FieldDescriptor
from npm_connector.utils.time import to_date_key

FieldExtractor = Callable[[str, DailyDownload], Any]

FIELD_EXTRACTORS: dict[str, FieldExtractor] = {
    "day": lambda package_name, daily: to_date_key(daily.day),
    "downloads": lambda package_name, daily: daily.downloads,
    "packageName": lambda package_name, daily: package_name,
}


def normalize_response(packages: Sequence[str], response_text: str) -> dict[str, Any]:
    """Parse the API body and key it by package name.

    The range endpoint answers a single-package query with that package's
    object and a multi-package query with a mapping keyed by package name.
    Which shape arrived is decided from the number of requested packages,
    never from the keys of the payload.
    """
    response = json.loads(response_text)
    if len(packages) == 1:
        return {packages[0]: response}
    return response


def _daily_downloads(package_name: str, payload: Any) -> list[DailyDownload]:
    if not isinstance(payload, dict) or not isinstance(payload.get("downloads"), list):
        raise ValueError(f"No download data for package {package_name!r}")
    return [
        DailyDownload(day=str(row["day"]), downloads=int(row["downloads"]))
        for row in payload["downloads"]
    ]


def format_row(
    requested_fields: Sequence[FieldDescriptor], package_name: str, daily: DailyDownload
) -> list[Any]:
    row: list[Any] = []
    for field in requested_fields:
        extractor = FIELD_EXTRACTORS.get(field.id)
        row.append("" if extractor is None else extractor(package_name, daily))
    return row


def format_rows(
    normalized: dict[str, Any], requested_fields: Sequence[FieldDescriptor]
) -> list[list[Any]]:
    rows: list[list[Any]] = []
    for package_name, payload in normalized.items():
        for daily in _daily_downloads(package_name, payload):
            rows.append(format_row(requested_fields, package_name, daily))
    return rows
