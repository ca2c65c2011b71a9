"""Normalization chain over composite records.

This module owns one normalization per representation slot. The chain is
fit by its first non-empty ``normalize`` call and then stays fixed for the
rest of the dataset run; it must not be shared across runs.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from core.constants import DEFAULT_NORMALIZATION
from core.errors import FacetConfigError, FacetSchemaError, FacetUnsupportedOperationError
from core.logging_config import get_logger
from core.types import CompositeRecord, Representation
from normalization.base import Normalization, stack_column
from normalization.registry import NORMALIZATIONS

_LOGGER = get_logger(__name__)


class NormalizationChain:
    """Applies and undoes one normalization per representation.

    Args:
        normalizations: Optional explicit identifiers, one per representation.
            When omitted the default identifier is replicated to match the
            representation count of the first normalized batch.
        default_normalization: Identifier replicated when no explicit list is set.

    Raises:
        FacetConfigError: If the explicit list is empty or names unknown identifiers.
    """

    def __init__(
        self,
        normalizations: Sequence[str] | None = None,
        default_normalization: str = DEFAULT_NORMALIZATION,
    ) -> None:
        if normalizations is not None and not normalizations:
            raise FacetConfigError(
                "Empty normalization list. Provide one identifier per representation "
                "or omit the option to use the default."
            )
        self._configured: tuple[str, ...] | None = (
            tuple(NORMALIZATIONS.require(name) for name in normalizations)
            if normalizations is not None
            else None
        )
        self._default = NORMALIZATIONS.require(default_normalization)
        self._identifiers: tuple[str, ...] = ()
        self._normalizations: tuple[Normalization, ...] = ()

    @property
    def is_fitted(self) -> bool:
        """Return whether the chain was established by a normalize call."""
        return bool(self._normalizations)

    @property
    def size(self) -> int | None:
        """Return the chain length, or None before the first fit."""
        return len(self._normalizations) if self._normalizations else None

    def settings(self) -> tuple[str, ...]:
        """Return the identifiers of the established chain."""
        return self._identifiers

    def normalize(self, records: Sequence[CompositeRecord]) -> list[CompositeRecord]:
        """Normalize every representation of every record.

        Args:
            records: Composite records of one batch.

        Returns:
            New records with normalized representations and unchanged identities.

        Raises:
            FacetSchemaError: If any record's representation count differs from
                the chain length, or a normalization rejects a column.
        """
        if not records:
            return []
        identifiers = self._identifiers or self._resolve_identifiers(
            records[0].number_of_representations
        )
        # fresh instances are committed only after every column succeeds
        normalizations = self._normalizations or tuple(
            NORMALIZATIONS.create(name) for name in identifiers
        )
        _check_records(records, len(normalizations))
        for index in range(len(normalizations)):
            stack_column(_column(records, index))
        columns = [
            normalization.normalize(_column(records, index))
            for index, normalization in enumerate(normalizations)
        ]
        normalized = _reassemble(records, columns)
        if not self.is_fitted:
            self._establish(identifiers, normalizations)
        return normalized

    def restore(self, records: Sequence[CompositeRecord]) -> list[CompositeRecord]:
        """Map normalized records back to their original space.

        Raises:
            FacetSchemaError: If the chain was never fit or counts differ.
        """
        self._require_fitted()
        if not records:
            return []
        _check_records(records, len(self._normalizations))
        columns = [
            normalization.restore(_column(records, index))
            for index, normalization in enumerate(self._normalizations)
        ]
        return _reassemble(records, columns)

    def restore_record(self, record: CompositeRecord) -> CompositeRecord:
        """Map one normalized record back to its original space.

        Raises:
            FacetSchemaError: If the chain was never fit or counts differ.
        """
        self._require_fitted()
        _check_records([record], len(self._normalizations))
        restored = tuple(
            normalization.restore_vector(vector)
            for normalization, vector in zip(self._normalizations, record.representations)
        )
        return replace(record, representations=restored)

    def transform(self, matrix: object) -> object:
        """Reject cross-representation linear-dependency remapping.

        Raises:
            FacetUnsupportedOperationError: Always.
        """
        raise FacetUnsupportedOperationError(
            "Transforming linear-dependency matrices is not supported for "
            "multi-representation normalization."
        )

    def describe(self, prefix: str = "") -> str:
        """Describe every fitted normalization in chain order.

        Raises:
            FacetSchemaError: If the chain was never fit.
        """
        self._require_fitted()
        sections = [
            f"{prefix}representation {index} ({identifier}):\n"
            + normalization.describe(prefix + "  ")
            for index, (identifier, normalization) in enumerate(
                zip(self._identifiers, self._normalizations)
            )
        ]
        return "".join(sections)

    def _resolve_identifiers(self, representation_count: int) -> tuple[str, ...]:
        return self._configured or (self._default,) * representation_count

    def _establish(
        self,
        identifiers: tuple[str, ...],
        normalizations: tuple[Normalization, ...],
    ) -> None:
        self._normalizations = normalizations
        self._identifiers = identifiers
        _LOGGER.info(
            "normalization_chain_established",
            size=len(identifiers),
            normalizations=list(identifiers),
            explicit=self._configured is not None,
        )

    def _require_fitted(self) -> None:
        if not self.is_fitted:
            raise FacetSchemaError(
                "Normalization chain has not been fit. Call normalize on a non-empty "
                "batch before restore."
            )


def _check_records(records: Sequence[CompositeRecord], expected: int) -> None:
    for record in records:
        if record.number_of_representations != expected:
            raise FacetSchemaError(
                f"Record {record.record_id} has {record.number_of_representations} "
                f"representations, but the normalization chain has {expected}."
            )


def _column(records: Sequence[CompositeRecord], index: int) -> list[Representation]:
    return [record.representations[index] for record in records]


def _reassemble(
    records: Sequence[CompositeRecord],
    columns: list[list[Representation]],
) -> list[CompositeRecord]:
    for column in columns:
        if len(column) != len(records):
            raise FacetSchemaError(
                f"Normalization returned {len(column)} vectors for {len(records)} records."
            )
    return [
        replace(record, representations=tuple(column[row] for column in columns))
        for row, record in enumerate(records)
    ]
