"""Normalization capability interface and shared column handling.

Built-in normalizations fit their parameters on the first ``normalize`` call
and reuse them for every later ``normalize`` and ``restore`` call, so matched
pairs always run against the same fitted instance.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, Sequence

import numpy as np

from core.errors import FacetSchemaError
from core.types import Representation


class Normalization(Protocol):
    """Invertible transform over one representation column."""

    def normalize(self, column: Sequence[Representation]) -> list[Representation]:
        """Fit on first use and return the transformed column."""
        ...

    def restore(self, column: Sequence[Representation]) -> list[Representation]:
        """Map a normalized column back to the original space."""
        ...

    def restore_vector(self, vector: Representation) -> Representation:
        """Map one normalized vector back to the original space."""
        ...

    def describe(self, prefix: str) -> str:
        """Describe fitted parameters, one line per entry, each starting with prefix."""
        ...


class FittedNormalization(ABC):
    """Column normalization with attribute-wise parameters fit once."""

    def __init__(self) -> None:
        self._dimensionality: int | None = None

    @property
    def is_fitted(self) -> bool:
        """Return whether parameters were fit."""
        return self._dimensionality is not None

    def normalize(self, column: Sequence[Representation]) -> list[Representation]:
        """Fit on first use and return the transformed column.

        Args:
            column: Vectors of one representation, all of one dimensionality.

        Returns:
            Transformed vectors in input order.

        Raises:
            FacetSchemaError: If vectors are ragged, non-finite, or do not match
                the fitted dimensionality.
        """
        if not column:
            return []
        matrix = stack_column(column)
        if self._dimensionality is None:
            self._fit(matrix)
            self._dimensionality = matrix.shape[1]
        self._check_dimensionality(matrix.shape[1])
        return list(self._forward(matrix))

    def restore(self, column: Sequence[Representation]) -> list[Representation]:
        """Map a normalized column back to the original space."""
        self._require_fitted()
        if not column:
            return []
        matrix = stack_column(column)
        self._check_dimensionality(matrix.shape[1])
        return list(self._inverse(matrix))

    def restore_vector(self, vector: Representation) -> Representation:
        """Map one normalized vector back to the original space."""
        return self.restore([vector])[0]

    def _require_fitted(self) -> None:
        if self._dimensionality is None:
            raise FacetSchemaError(
                f"{type(self).__name__} has not been fit. Call normalize before restore."
            )

    def _check_dimensionality(self, dimensionality: int) -> None:
        if dimensionality != self._dimensionality:
            raise FacetSchemaError(
                f"{type(self).__name__} was fit on {self._dimensionality}-dimensional "
                f"vectors, got {dimensionality}."
            )

    @abstractmethod
    def _fit(self, matrix: np.ndarray) -> None:
        """Fit parameters from a (rows, attributes) matrix."""

    @abstractmethod
    def _forward(self, matrix: np.ndarray) -> np.ndarray:
        """Apply the fitted transform."""

    @abstractmethod
    def _inverse(self, matrix: np.ndarray) -> np.ndarray:
        """Undo the fitted transform."""

    @abstractmethod
    def describe(self, prefix: str) -> str:
        """Describe fitted parameters."""


def stack_column(column: Sequence[Representation]) -> np.ndarray:
    """Stack one representation column into a float matrix.

    Args:
        column: Non-empty sequence of one-dimensional vectors.

    Returns:
        Matrix of shape (len(column), dimensionality).

    Raises:
        FacetSchemaError: If vectors differ in length or hold non-finite values.
    """
    dimensionalities = {np.asarray(vector).shape for vector in column}
    if len(dimensionalities) != 1:
        shapes = ", ".join(str(shape) for shape in sorted(dimensionalities))
        raise FacetSchemaError(f"Vectors in one representation differ in shape: {shapes}.")
    matrix = np.vstack([np.asarray(vector, dtype=float) for vector in column])
    if not np.all(np.isfinite(matrix)):
        raise FacetSchemaError("Normalization requires finite numeric values.")
    return matrix


def format_attribute_values(values: np.ndarray) -> str:
    """Render per-attribute parameters as a bracketed list."""
    return "[" + ", ".join(repr(float(value)) for value in values) + "]"
