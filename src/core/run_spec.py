"""Typed run-spec parsing for declarative ingest runs.

This module loads and validates YAML run-spec files used by the CLI.
One strict schema describes the sources, parsers, normalizations, and
label type of a single ingest run.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence, cast

import yaml

from core.constants import RUN_SPEC_VERSION
from core.errors import FacetConfigError, FacetRunSpecError
from core.registry import split_identifiers
from core.types import IngestOptions

_ALLOWED_ROOT_KEYS = {
    "version",
    "dataset",
    "data_root",
    "sources",
    "parsers",
    "normalizations",
    "label_type",
    "normalize",
}


@dataclass(frozen=True)
class RunSpec:
    """Validated run-spec root object."""

    version: int
    data_root: str | None
    options: IngestOptions


def load_run_spec(spec_path: str) -> RunSpec:
    """Load and validate a YAML run-spec from disk.

    Relative source paths and data_root are resolved against the run-spec
    file's directory.

    Args:
        spec_path: File path to YAML run-spec.

    Returns:
        Fully validated run-spec object.

    Raises:
        FacetRunSpecError: If file is invalid or schema checks fail.
    """
    spec_file = Path(spec_path).expanduser().resolve()
    payload = _load_yaml_payload(spec_file)
    root_mapping = _expect_mapping(payload, "run spec root")
    _validate_root_keys(root_mapping)
    version = _parse_version(root_mapping)
    dataset_name = _optional_string(root_mapping, "dataset")
    if dataset_name is None:
        raise FacetRunSpecError("Run spec missing required field 'dataset'.")
    options = IngestOptions(
        dataset_name=dataset_name,
        sources=_parse_sources(root_mapping, spec_file.parent),
        parsers=_parse_identifier_list(root_mapping, "parsers"),
        normalizations=_parse_identifier_list(root_mapping, "normalizations"),
        label_type=_optional_string(root_mapping, "label_type"),
        normalize=_parse_normalize_flag(root_mapping),
    )
    return RunSpec(
        version=version,
        data_root=_parse_data_root(root_mapping, spec_file.parent),
        options=options,
    )


def _load_yaml_payload(spec_file: Path) -> object:
    if not spec_file.exists():
        raise FacetRunSpecError(
            f"Run spec file does not exist at {spec_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(spec_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise FacetRunSpecError(
            f"Failed to read run spec at {spec_file}: {error}. Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise FacetRunSpecError(
            f"Failed to parse YAML run spec at {spec_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise FacetRunSpecError(
            f"Run spec at {spec_file} is empty. Define 'version', 'dataset', and 'sources'."
        )
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise FacetRunSpecError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise FacetRunSpecError(
        f"Invalid {context}: expected object mapping, got {type(value).__name__}."
    )


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise FacetRunSpecError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def _parse_version(root_mapping: Mapping[str, object]) -> int:
    raw_version = root_mapping.get("version")
    if not isinstance(raw_version, int) or isinstance(raw_version, bool):
        raise FacetRunSpecError(
            f"Run spec field 'version' must be an integer. Set version: {RUN_SPEC_VERSION}."
        )
    if raw_version != RUN_SPEC_VERSION:
        raise FacetRunSpecError(
            f"Unsupported run spec version {raw_version}. Use version: {RUN_SPEC_VERSION}."
        )
    return raw_version


def _parse_sources(root_mapping: Mapping[str, object], base_dir: Path) -> tuple[str, ...]:
    raw_sources = root_mapping.get("sources")
    if raw_sources is None:
        raise FacetRunSpecError("Run spec missing required field 'sources'.")
    rows = _expect_sequence(raw_sources, "run spec sources")
    if not rows:
        raise FacetRunSpecError("Run spec field 'sources' must include at least one path.")
    sources: list[str] = []
    for index, row in enumerate(rows):
        if not isinstance(row, str) or not row.strip():
            raise FacetRunSpecError(f"Run spec source #{index + 1} must be a non-empty string.")
        sources.append(_resolve_path(row.strip(), base_dir))
    return tuple(sources)


def _parse_data_root(root_mapping: Mapping[str, object], base_dir: Path) -> str | None:
    data_root = _optional_string(root_mapping, "data_root")
    if data_root is None:
        return None
    return _resolve_path(data_root, base_dir)


def _resolve_path(raw_path: str, base_dir: Path) -> str:
    path = Path(raw_path).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return str(path)


def _parse_identifier_list(
    root_mapping: Mapping[str, object],
    field_name: str,
) -> tuple[str, ...] | None:
    raw_value = root_mapping.get(field_name)
    if raw_value is None:
        return None
    if isinstance(raw_value, str):
        try:
            return split_identifiers(raw_value, field_name)
        except FacetConfigError as error:
            raise FacetRunSpecError(f"Run spec field '{field_name}': {error}") from error
    rows = _expect_sequence(raw_value, f"run spec {field_name}")
    if not rows or not all(isinstance(row, str) and row.strip() for row in rows):
        raise FacetRunSpecError(
            f"Run spec field '{field_name}' must be a non-empty list of identifiers."
        )
    return tuple(cast(str, row).strip() for row in rows)


def _parse_normalize_flag(root_mapping: Mapping[str, object]) -> bool:
    raw_value = root_mapping.get("normalize", True)
    if not isinstance(raw_value, bool):
        raise FacetRunSpecError("Run spec field 'normalize' must be true or false.")
    return raw_value


def _optional_string(mapping: Mapping[str, object], field_name: str) -> str | None:
    raw_value = mapping.get(field_name)
    if raw_value is None:
        return None
    if isinstance(raw_value, str):
        normalized_value = raw_value.strip()
        return normalized_value if normalized_value else None
    raise FacetRunSpecError(f"Run spec field '{field_name}' must be a string when provided.")


def _validate_root_keys(root_mapping: Mapping[str, object]) -> None:
    unknown_keys = sorted(set(root_mapping) - _ALLOWED_ROOT_KEYS)
    if unknown_keys:
        raise FacetRunSpecError(
            f"Run spec contains unknown root fields: {', '.join(unknown_keys)}."
        )
