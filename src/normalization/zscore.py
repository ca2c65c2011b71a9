"""Attribute-wise standardization to zero mean and unit variance."""

from __future__ import annotations

import numpy as np

from normalization.base import FittedNormalization, format_attribute_values


class ZScoreNormalization(FittedNormalization):
    """Centers each attribute on its mean and scales by its standard deviation."""

    def __init__(self) -> None:
        super().__init__()
        self._means = np.empty(0)
        self._deviations = np.empty(0)

    def _fit(self, matrix: np.ndarray) -> None:
        self._means = matrix.mean(axis=0)
        deviations = matrix.std(axis=0)
        # constant attributes keep their offset only
        self._deviations = np.where(deviations > 0, deviations, 1.0)

    def _forward(self, matrix: np.ndarray) -> np.ndarray:
        return (matrix - self._means) / self._deviations

    def _inverse(self, matrix: np.ndarray) -> np.ndarray:
        return matrix * self._deviations + self._means

    def describe(self, prefix: str) -> str:
        self._require_fitted()
        return (
            f"{prefix}normalization class: {type(self).__name__}\n"
            f"{prefix}normalization means: {format_attribute_values(self._means)}\n"
            f"{prefix}normalization deviations: {format_attribute_values(self._deviations)}\n"
        )
