"""Sink interface and in-memory implementation."""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping, Protocol, Sequence

from core.errors import FacetStoreError
from core.types import AssociationKind, CompositeRecord

Associations = Mapping[AssociationKind, object]


class Sink(Protocol):
    """Receives the final records of an ingest run."""

    def insert(
        self,
        records: Sequence[CompositeRecord],
        associations: Sequence[Associations],
    ) -> None:
        """Insert records, ``associations[i]`` belonging to ``records[i]``."""
        ...


class InMemorySink:
    """Sink that keeps inserted records with their associations attached."""

    def __init__(self) -> None:
        self._records: list[CompositeRecord] = []

    @property
    def records(self) -> tuple[CompositeRecord, ...]:
        return tuple(self._records)

    def insert(
        self,
        records: Sequence[CompositeRecord],
        associations: Sequence[Associations],
    ) -> None:
        """Attach associations to records and keep them.

        Raises:
            FacetStoreError: If records and associations differ in length.
        """
        check_insert_lengths(records, associations)
        self._records.extend(attach_associations(records, associations))


def check_insert_lengths(
    records: Sequence[CompositeRecord],
    associations: Sequence[Associations],
) -> None:
    """Fail when records and associations are not parallel."""
    if len(records) != len(associations):
        raise FacetStoreError(
            f"Cannot insert {len(records)} records with {len(associations)} association "
            "sets. Provide exactly one association set per record."
        )


def attach_associations(
    records: Sequence[CompositeRecord],
    associations: Sequence[Associations],
) -> list[CompositeRecord]:
    """Return records carrying their association sets."""
    return [
        replace(record, associations={**record.associations, **association_set})
        for record, association_set in zip(records, associations)
    ]
