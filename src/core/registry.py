"""Capability registration tables.

This module maps stable string identifiers to factories.
Parsers, normalizations, and label types register themselves at import
time so the pipeline never resolves classes by runtime name lookup.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from core.constants import IDENTIFIER_SEPARATOR
from core.errors import FacetConfigError, FacetInstantiationError

T = TypeVar("T")


class CapabilityRegistry(Generic[T]):
    """Identifier to factory table for one capability interface."""

    def __init__(self, capability: str) -> None:
        self._capability = capability
        self._factories: dict[str, Callable[[], T]] = {}

    def register(self, identifier: str, factory: Callable[[], T]) -> None:
        """Register a factory under a unique identifier.

        Args:
            identifier: Stable lower-case identifier.
            factory: Zero-argument callable returning a fresh instance.

        Raises:
            FacetConfigError: If the identifier is already registered.
        """
        key = _normalize_identifier(identifier)
        if key in self._factories:
            raise FacetConfigError(
                f"Duplicate {self._capability} identifier '{identifier}'. "
                "Register each identifier exactly once."
            )
        self._factories[key] = factory

    def require(self, identifier: str) -> str:
        """Return the normalized identifier or fail when it is unknown."""
        key = _normalize_identifier(identifier)
        if key not in self._factories:
            supported = ", ".join(self.identifiers())
            raise FacetConfigError(
                f"Unknown {self._capability} '{identifier}'. Choose one of: {supported}."
            )
        return key

    def create(self, identifier: str) -> T:
        """Instantiate a registered capability.

        Args:
            identifier: Registered identifier.

        Returns:
            A fresh capability instance.

        Raises:
            FacetConfigError: If the identifier is unknown.
            FacetInstantiationError: If the factory fails.
        """
        key = self.require(identifier)
        try:
            return self._factories[key]()
        except Exception as error:
            raise FacetInstantiationError(
                f"Failed to instantiate {self._capability} '{key}': {error}"
            ) from error

    def identifiers(self) -> tuple[str, ...]:
        """Return registered identifiers in sorted order."""
        return tuple(sorted(self._factories))


def split_identifiers(raw_value: str, option: str) -> tuple[str, ...]:
    """Split a comma-delimited identifier list.

    Args:
        raw_value: Raw option value such as ``"a,b,c"``.
        option: Option name for error context.

    Returns:
        Ordered, stripped identifiers.

    Raises:
        FacetConfigError: If the list is empty or has blank entries.
    """
    parts = tuple(part.strip() for part in raw_value.split(IDENTIFIER_SEPARATOR))
    if not raw_value.strip() or any(not part for part in parts):
        raise FacetConfigError(
            f"Invalid {option} list '{raw_value}': expected comma-separated identifiers "
            "without blank entries."
        )
    return parts


def _normalize_identifier(identifier: str) -> str:
    return identifier.strip().lower()
