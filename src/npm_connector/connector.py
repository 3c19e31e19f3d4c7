from __future__ import annotations

import logging
from typing import Any, Mapping

from npm_connector.config import AUTH_HELP_URL, DEFAULT_PACKAGE
from npm_connector.models import FIELDS, DateRange, fields_for_ids
from npm_connector.request_config import package_list, resolve_config
from npm_connector.sources.npm_client import NpmDownloadsClient
from npm_connector.transform import format_rows, normalize_response

logger = logging.getLogger(__name__)

USER_ERROR_TEXT = (
    "The connector has encountered an unrecoverable error. Please try again "
    "later, or file an issue if this error persists."
)


class ConnectorUserError(Exception):
    """Failure reported to the host; ``debug_text`` is meant for admins only."""

    def __init__(self, text: str, debug_text: str | None = None):
        super().__init__(text)
        self.text = text
        self.debug_text = debug_text


def get_config(request: Mapping[str, Any] | None = None) -> dict[str, Any]:
    return {
        "configParams": [
            {
                "type": "INFO",
                "name": "instructions",
                "text": (
                    "Enter npm package names to fetch their download count. An "
                    "invalid or blank entry will revert to the default value."
                ),
            },
            {
                "type": "TEXTINPUT",
                "name": "package",
                "displayName": (
                    "Enter a single package name or multiple names separated "
                    "by commas (no spaces!)"
                ),
                "helpText": 'e.g. "googleapis" or "package,somepackage,anotherpackage"',
                "placeholder": DEFAULT_PACKAGE,
                "parameterControl": {"allowOverride": True},
            },
        ],
        "dateRangeRequired": True,
    }


def get_auth_type() -> dict[str, str]:
    # Declared only; no credentials are sent to the downloads API.
    return {"type": "USER_PASS", "helpUrl": AUTH_HELP_URL}


def get_schema(request: Mapping[str, Any] | None = None) -> dict[str, Any]:
    return {"schema": [field.to_payload() for field in FIELDS]}


def is_admin_user() -> bool:
    return True


def _requested_field_ids(request: Mapping[str, Any]) -> list[str]:
    ids: list[str] = []
    for item in request.get("fields") or []:
        ids.append(str(item["name"]) if isinstance(item, Mapping) else str(item))
    return ids


def _date_range(request: Mapping[str, Any]) -> DateRange:
    raw = request.get("dateRange") or {}
    return DateRange(start_date=str(raw["startDate"]), end_date=str(raw["endDate"]))


def get_data(request: Mapping[str, Any]) -> dict[str, Any]:
    config_params = resolve_config(request.get("configParams"))
    packages = package_list(config_params)
    requested_fields = fields_for_ids(_requested_field_ids(request))

    try:
        date_range = _date_range(request)
        client = NpmDownloadsClient()
        response_text = client.fetch_range(
            packages, date_range.start_date, date_range.end_date
        )
        normalized = normalize_response(packages, response_text)
        rows = format_rows(normalized, requested_fields)
    except Exception as exc:
        logger.exception("get_data failed packages=%s", config_params["package"])
        raise ConnectorUserError(
            USER_ERROR_TEXT,
            debug_text=f"Error fetching data from API. Exception details: {exc!r}",
        ) from exc

    logger.info(
        "get_data complete packages=%d fields=%d rows=%d",
        len(packages),
        len(requested_fields),
        len(rows),
    )
    return {
        "schema": [field.to_payload() for field in requested_fields],
        "rows": rows,
    }
