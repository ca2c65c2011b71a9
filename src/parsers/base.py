"""Parser capability interface."""

from __future__ import annotations

from typing import Protocol, TextIO

from core.types import ParseResult


class Parser(Protocol):
    """Turns one source stream into a ParseResult."""

    def parse(self, stream: TextIO, source_name: str) -> ParseResult:
        """Parse every object in a stream."""
        ...
