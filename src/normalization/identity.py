"""No-op normalization with an exact round trip."""

from __future__ import annotations

import numpy as np

from normalization.base import FittedNormalization


class IdentityNormalization(FittedNormalization):
    """Returns copies of the input vectors unchanged."""

    def _fit(self, matrix: np.ndarray) -> None:
        return None

    def _forward(self, matrix: np.ndarray) -> np.ndarray:
        return matrix.copy()

    def _inverse(self, matrix: np.ndarray) -> np.ndarray:
        return matrix.copy()

    def describe(self, prefix: str) -> str:
        self._require_fitted()
        return f"{prefix}normalization class: {type(self).__name__}\n"
