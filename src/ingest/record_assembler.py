"""Composite record assembly from aligned parse results."""

from __future__ import annotations

from typing import Iterable, Sequence

from core.constants import LABEL_CONCATENATION
from core.errors import FacetAlignmentError
from core.types import AssembledBatch, CompositeRecord, ParseResult


def assemble_composite_records(results: Sequence[ParseResult]) -> AssembledBatch:
    """Zip per-representation objects row-wise into composite records.

    Args:
        results: One parse result per representation, in representation order.

    Returns:
        Composite records with merged labels, in row order.

    Raises:
        FacetAlignmentError: If results are missing or differ in length.
    """
    if not results:
        raise FacetAlignmentError("No parse results to assemble. Provide at least one source.")
    number_of_objects = len(results[0])
    for result in results:
        if len(result.objects) != number_of_objects or len(result.labels) != number_of_objects:
            raise FacetAlignmentError(
                f"Source {result.source_name} has {len(result.objects)} objects and "
                f"{len(result.labels)} labels, expected {number_of_objects}."
            )
    records: list[CompositeRecord] = []
    labels: list[str] = []
    for row in range(number_of_objects):
        representations = tuple(result.objects[row].values for result in results)
        records.append(
            CompositeRecord(
                record_id=results[0].objects[row].record_id,
                representations=representations,
            )
        )
        labels.append(merge_labels(result.labels[row] for result in results))
    return AssembledBatch(records=tuple(records), labels=tuple(labels))


def merge_labels(segments: Iterable[str]) -> str:
    """Join non-empty label segments with a single separator.

    Empty segments are skipped and no leading separator is written,
    so ``["a", "", "c"]`` merges to ``"a c"``.
    """
    return LABEL_CONCATENATION.join(segment for segment in segments if segment)
