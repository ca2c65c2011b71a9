"""Label type capability interface."""

from __future__ import annotations

from typing import Protocol


class LabelType(Protocol):
    """Structured label built from a raw label string."""

    def init(self, label: str) -> None:
        """Initialize a fresh instance from a raw label string."""
        ...
