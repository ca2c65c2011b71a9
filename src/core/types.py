"""Shared typed models.

This module defines immutable data models used by the reader, assembler,
normalization chain, label binder, and sinks to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

import numpy as np

Representation = np.ndarray


class AssociationKind(str, Enum):
    """Association keys attached to composite records."""

    LABEL = "label"
    CLASS = "class"


@dataclass(frozen=True, eq=False)
class SourceVector:
    """One parsed representation and the identity of its source row.

    Attributes:
        record_id: Stable identity of the source row.
        values: One-dimensional float vector.
    """

    record_id: str
    values: Representation


@dataclass(frozen=True, eq=False)
class ParseResult:
    """Parser output for one source.

    Attributes:
        source_name: Source path or name the result was parsed from.
        objects: Ordered parsed vectors.
        labels: Label strings parallel to ``objects``.
    """

    source_name: str
    objects: tuple[SourceVector, ...]
    labels: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.objects)


@dataclass(frozen=True, eq=False)
class CompositeRecord:
    """A record built from one representation per source.

    Attributes:
        record_id: Identity assigned at assembly, never regenerated.
        representations: Ordered representation vectors.
        associations: Optional association values keyed by kind.
    """

    record_id: str
    representations: tuple[Representation, ...]
    associations: Mapping[AssociationKind, object] = field(default_factory=dict)

    @property
    def number_of_representations(self) -> int:
        """Return the number of representation slots."""
        return len(self.representations)


@dataclass(frozen=True, eq=False)
class AssembledBatch:
    """Assembler output consumed by normalization and label binding.

    Attributes:
        records: Composite records in source row order.
        labels: Merged label strings parallel to ``records``.
    """

    records: tuple[CompositeRecord, ...]
    labels: tuple[str, ...]


@dataclass(frozen=True)
class IngestOptions:
    """Ingest command options.

    Attributes:
        dataset_name: Dataset name handed to the sink.
        sources: Ordered source file paths, one per representation.
        parsers: Optional parser identifiers, one per source.
        normalizations: Optional normalization identifiers, one per representation.
        label_type: Optional structured label type identifier.
        normalize: Whether to run the normalization chain.
    """

    dataset_name: str
    sources: tuple[str, ...]
    parsers: tuple[str, ...] | None = None
    normalizations: tuple[str, ...] | None = None
    label_type: str | None = None
    normalize: bool = True


@dataclass(frozen=True)
class IngestResult:
    """Summary of one completed ingest run.

    Attributes:
        dataset_name: Dataset name handed to the sink.
        record_count: Number of inserted composite records.
        representation_count: Representations per record.
        normalization_description: Fitted chain description, when normalized.
    """

    dataset_name: str
    record_count: int
    representation_count: int
    normalization_description: str | None
