"""Label to association binding.

This module turns merged label strings into one association mapping per
record, either keeping the raw string or building a structured label.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from core.errors import FacetInstantiationError
from core.types import AssociationKind
from labels.registry import LABEL_TYPES


class LabelAssociationBinder:
    """Builds association mappings from label strings.

    Args:
        label_type: Optional registered label type identifier. Without one,
            labels are kept as raw strings under ``AssociationKind.LABEL``.

    Raises:
        FacetConfigError: If the label type identifier is unknown.
    """

    def __init__(self, label_type: str | None = None) -> None:
        self._label_type = LABEL_TYPES.require(label_type) if label_type is not None else None

    @property
    def association_kind(self) -> AssociationKind:
        """Return the single key every produced mapping carries."""
        if self._label_type is None:
            return AssociationKind.LABEL
        return AssociationKind.CLASS

    def bind(self, labels: Sequence[str]) -> list[Mapping[AssociationKind, object]]:
        """Build one association mapping per label, in order.

        Raises:
            FacetInstantiationError: If a structured label cannot be built.
        """
        kind = self.association_kind
        return [{kind: self._association_value(label)} for label in labels]

    def _association_value(self, label: str) -> object:
        if self._label_type is None:
            return label
        value = LABEL_TYPES.create(self._label_type)
        try:
            value.init(label)
        except FacetInstantiationError:
            raise
        except Exception as error:
            raise FacetInstantiationError(
                f"Failed to initialize label type '{self._label_type}' from '{label}': {error}"
            ) from error
        return value
