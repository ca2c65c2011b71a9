"""Attribute-wise min-max normalization into the unit range."""

from __future__ import annotations

import numpy as np

from normalization.base import FittedNormalization, format_attribute_values


class AttributeWiseNormalization(FittedNormalization):
    """Scales each attribute by its fitted minimum and range.

    Constant attributes fall back to dividing by the maximum when positive,
    otherwise by one, so restore stays well defined.
    """

    def __init__(self) -> None:
        super().__init__()
        self._minima = np.empty(0)
        self._factors = np.empty(0)

    def _fit(self, matrix: np.ndarray) -> None:
        minima = matrix.min(axis=0)
        maxima = matrix.max(axis=0)
        self._minima = minima
        self._factors = np.where(
            maxima > minima,
            maxima - minima,
            np.where(maxima > 0, maxima, 1.0),
        )

    def _forward(self, matrix: np.ndarray) -> np.ndarray:
        return (matrix - self._minima) / self._factors

    def _inverse(self, matrix: np.ndarray) -> np.ndarray:
        return matrix * self._factors + self._minima

    def describe(self, prefix: str) -> str:
        self._require_fitted()
        return (
            f"{prefix}normalization class: {type(self).__name__}\n"
            f"{prefix}normalization minima: {format_attribute_values(self._minima)}\n"
            f"{prefix}normalization factors: {format_attribute_values(self._factors)}\n"
        )
