"""JSONL dataset store.

This module persists one ingested dataset per directory under the data
root. Records and manifest are written into a staging directory that is
renamed into place, so a failed insert leaves no partial dataset behind.
"""

from __future__ import annotations

import json
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Sequence

from core.config import FacetConfig
from core.constants import DATASETS_DIR_NAME, MANIFEST_FILE_NAME, RECORDS_FILE_NAME
from core.errors import FacetStoreError
from core.logging_config import get_logger
from core.types import CompositeRecord
from store.record_payload import read_composite_records_jsonl, write_composite_records_jsonl
from store.sink import Associations, attach_associations, check_insert_lengths

_LOGGER = get_logger(__name__)


class JsonlDatasetStore:
    """Filesystem-backed sink for one named dataset."""

    def __init__(self, config: FacetConfig, dataset_name: str) -> None:
        """Initialize the store for a dataset.

        Args:
            config: Runtime configuration.
            dataset_name: Dataset directory name.

        Raises:
            FacetStoreError: If the dataset name is not a plain directory name.
        """
        if not _is_plain_name(dataset_name):
            raise FacetStoreError(
                f"Invalid dataset name '{dataset_name}'. Use a plain name without path separators."
            )
        self._dataset_name = dataset_name
        self._datasets_root = config.data_root / DATASETS_DIR_NAME
        self._dataset_dir = self._datasets_root / dataset_name

    @property
    def dataset_dir(self) -> Path:
        return self._dataset_dir

    def exists(self) -> bool:
        """Return whether the dataset has been written."""
        return (self._dataset_dir / MANIFEST_FILE_NAME).exists()

    def insert(
        self,
        records: Sequence[CompositeRecord],
        associations: Sequence[Associations],
    ) -> None:
        """Persist records with their associations.

        Args:
            records: Final composite records.
            associations: One association set per record.

        Raises:
            FacetStoreError: If lengths differ, the dataset exists, or writing fails.
        """
        check_insert_lengths(records, associations)
        if self._dataset_dir.exists():
            raise FacetStoreError(
                f"Dataset '{self._dataset_name}' already exists at {self._dataset_dir}. "
                "Choose a new dataset name."
            )
        stored = attach_associations(records, associations)
        staging_dir = self._datasets_root / f".{self._dataset_name}.staging"
        try:
            self._datasets_root.mkdir(parents=True, exist_ok=True)
            shutil.rmtree(staging_dir, ignore_errors=True)
            staging_dir.mkdir()
            write_composite_records_jsonl(staging_dir / RECORDS_FILE_NAME, stored)
            _write_manifest(staging_dir / MANIFEST_FILE_NAME, self._dataset_name, stored)
            staging_dir.rename(self._dataset_dir)
        except OSError as error:
            shutil.rmtree(staging_dir, ignore_errors=True)
            raise FacetStoreError(
                f"Failed to write dataset '{self._dataset_name}' to {self._dataset_dir}: {error}"
            ) from error
        _LOGGER.info(
            "dataset_written",
            dataset_name=self._dataset_name,
            record_count=len(stored),
            path=str(self._dataset_dir),
        )

    def load_records(self) -> list[CompositeRecord]:
        """Load stored records in insertion order.

        Raises:
            FacetStoreError: If the dataset is missing or unreadable.
        """
        records_path = self._dataset_dir / RECORDS_FILE_NAME
        if not records_path.exists():
            raise FacetStoreError(
                f"Dataset '{self._dataset_name}' not found at {self._dataset_dir}. "
                "Run ingest first."
            )
        try:
            return read_composite_records_jsonl(records_path)
        except ValueError as error:
            raise FacetStoreError(
                f"Dataset '{self._dataset_name}' has corrupt records: {error}"
            ) from error

    def read_manifest(self) -> dict[str, Any]:
        """Read the dataset manifest.

        Raises:
            FacetStoreError: If the manifest is missing or invalid JSON.
        """
        manifest_path = self._dataset_dir / MANIFEST_FILE_NAME
        if not manifest_path.exists():
            raise FacetStoreError(
                f"Dataset '{self._dataset_name}' not found at {self._dataset_dir}. "
                "Run ingest first."
            )
        try:
            payload = json.loads(manifest_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as error:
            raise FacetStoreError(
                f"Dataset manifest at {manifest_path} is invalid JSON: {error.msg}"
            ) from error
        if not isinstance(payload, dict):
            raise FacetStoreError(f"Dataset manifest at {manifest_path} must be a JSON object.")
        return payload


def _is_plain_name(dataset_name: str) -> bool:
    if not dataset_name or dataset_name.startswith("."):
        return False
    return Path(dataset_name).name == dataset_name


def _write_manifest(
    manifest_path: Path,
    dataset_name: str,
    records: list[CompositeRecord],
) -> None:
    first = records[0] if records else None
    association_kinds = sorted({kind.value for record in records for kind in record.associations})
    manifest = {
        "dataset_name": dataset_name,
        "record_count": len(records),
        "representation_count": first.number_of_representations if first else 0,
        "dimensionalities": (
            [int(len(representation)) for representation in first.representations]
            if first
            else []
        ),
        "association_kinds": association_kinds,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    manifest_path.write_text(json.dumps(manifest, indent=2, sort_keys=True) + "\n", encoding="utf-8")
