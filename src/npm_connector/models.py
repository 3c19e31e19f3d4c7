from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

import pyarrow as pa


class FieldType(str, Enum):
    TEXT = "TEXT"
    YEAR_MONTH_DAY = "YEAR_MONTH_DAY"
    NUMBER = "NUMBER"


class ConceptType(str, Enum):
    DIMENSION = "DIMENSION"
    METRIC = "METRIC"


class AggregationType(str, Enum):
    SUM = "SUM"


@dataclass(frozen=True)
class FieldDescriptor:
    id: str
    name: str
    field_type: FieldType
    concept_type: ConceptType
    aggregation: AggregationType | None = None

    @property
    def data_type(self) -> str:
        return "NUMBER" if self.field_type is FieldType.NUMBER else "STRING"

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.id,
            "label": self.name,
            "dataType": self.data_type,
            "semantics": {
                "conceptType": self.concept_type.value,
                "semanticType": self.field_type.value,
            },
        }
        if self.aggregation is not None:
            payload["defaultAggregationType"] = self.aggregation.value
        return payload


@dataclass(frozen=True)
class DateRange:
    start_date: str
    end_date: str


@dataclass(frozen=True)
class DailyDownload:
    day: str
    downloads: int


FIELDS: list[FieldDescriptor] = [
    FieldDescriptor(
        id="packageName",
        name="Package",
        field_type=FieldType.TEXT,
        concept_type=ConceptType.DIMENSION,
    ),
    FieldDescriptor(
        id="day",
        name="Date",
        field_type=FieldType.YEAR_MONTH_DAY,
        concept_type=ConceptType.DIMENSION,
    ),
    FieldDescriptor(
        id="downloads",
        name="Downloads",
        field_type=FieldType.NUMBER,
        concept_type=ConceptType.METRIC,
        aggregation=AggregationType.SUM,
    ),
]

FIELDS_BY_ID: dict[str, FieldDescriptor] = {field.id: field for field in FIELDS}


def fields_for_ids(field_ids: Sequence[str]) -> list[FieldDescriptor]:
    """Return the declared fields matching ``field_ids`` in request order.

    Ids that are not part of the schema are skipped.
    """
    return [
        FIELDS_BY_ID[field_id] for field_id in field_ids if field_id in FIELDS_BY_ID
    ]


_ARROW_TYPES = {
    FieldType.TEXT: pa.string(),
    FieldType.YEAR_MONTH_DAY: pa.string(),
    FieldType.NUMBER: pa.int64(),
}


def arrow_schema(fields: Sequence[FieldDescriptor]) -> pa.Schema:
    return pa.schema(
        [pa.field(field.id, _ARROW_TYPES[field.field_type]) for field in fields]
    )


def to_arrow_table(result: dict[str, Any]) -> pa.Table:
    """Build a pyarrow table from a ``get_data`` result.

    The schema payloads in ``result["schema"]`` decide column names and types;
    rows are positional, so column ``i`` is read from ``row[i]``.
    """
    fields = [FIELDS_BY_ID[item["name"]] for item in result.get("schema", [])]
    schema = arrow_schema(fields)
    rows = result.get("rows", [])
    columns = {
        field.id: [row[index] for row in rows] for index, field in enumerate(fields)
    }
    return pa.Table.from_pydict(columns, schema=schema)
