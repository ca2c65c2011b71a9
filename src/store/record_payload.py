"""Shared JSONL serialization for CompositeRecord payloads.

This module centralizes CompositeRecord JSON serialization logic.
Structured label values are written in their string form.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np

from core.types import AssociationKind, CompositeRecord


def composite_record_to_payload(record: CompositeRecord) -> dict[str, object]:
    """Serialize CompositeRecord into JSON-safe payload.

    Args:
        record: Composite record instance.

    Returns:
        Dictionary payload for JSON encoding.
    """
    return {
        "record_id": record.record_id,
        "representations": [
            [float(value) for value in representation]
            for representation in record.representations
        ],
        "associations": {
            AssociationKind(kind).value: str(value)
            for kind, value in record.associations.items()
        },
    }


def composite_record_from_payload(payload: dict[str, Any]) -> CompositeRecord:
    """Deserialize JSON payload into CompositeRecord.

    Args:
        payload: Serialized record payload.

    Returns:
        Parsed CompositeRecord.

    Raises:
        ValueError: If an association kind is unknown.
    """
    associations_payload = payload.get("associations", {})
    associations_dict = associations_payload if isinstance(associations_payload, dict) else {}
    return CompositeRecord(
        record_id=str(payload.get("record_id", "")),
        representations=tuple(
            np.asarray(values, dtype=float) for values in payload.get("representations", [])
        ),
        associations={
            AssociationKind(str(kind)): str(value) for kind, value in associations_dict.items()
        },
    )


def write_composite_records_jsonl(records_path: Path, records: list[CompositeRecord]) -> None:
    """Write CompositeRecord list to JSONL file.

    Args:
        records_path: Output JSONL file path.
        records: Records to serialize.
    """
    lines = [
        json.dumps(composite_record_to_payload(record), sort_keys=True) for record in records
    ]
    records_path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")


def read_composite_records_jsonl(records_path: Path) -> list[CompositeRecord]:
    """Read CompositeRecord list from JSONL file.

    Args:
        records_path: Input JSONL file path.

    Returns:
        Parsed records.

    Raises:
        ValueError: If JSONL rows are invalid.
    """
    parsed_records: list[CompositeRecord] = []
    for line_number, line in enumerate(records_path.read_text(encoding="utf-8").splitlines(), 1):
        if not line.strip():
            continue
        payload = _parse_payload_line(line, line_number)
        parsed_records.append(composite_record_from_payload(payload))
    return parsed_records


def _parse_payload_line(line: str, line_number: int) -> dict[str, Any]:
    """Parse and validate one JSONL payload row.

    Args:
        line: Raw JSONL line.
        line_number: One-based line number.

    Returns:
        Parsed payload dictionary.

    Raises:
        ValueError: If JSON row is invalid.
    """
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as error:
        raise ValueError(f"Invalid JSON at line {line_number}: {error.msg}") from error
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid payload at line {line_number}: expected JSON object")
    return payload
