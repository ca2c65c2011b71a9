"""Parallel source reading.

This module opens N aligned sources, runs each through its own parser,
and checks that every source yields the same number of objects.
"""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import Sequence, TextIO

from core.constants import DEFAULT_PARSER
from core.errors import FacetAlignmentError, FacetConfigError, FacetError, FacetParseError
from core.logging_config import get_logger
from core.types import ParseResult
from parsers.base import Parser
from parsers.registry import PARSERS

_LOGGER = get_logger(__name__)


class ParallelSourceReader:
    """Reads aligned sources, one parser per source.

    Args:
        sources: Ordered source file paths, one per representation.
        parsers: Optional parser identifiers, one per source.
        default_parser: Identifier replicated per source when ``parsers`` is omitted.

    Raises:
        FacetConfigError: If sources are missing or the parser count does not
            match the source count.
    """

    def __init__(
        self,
        sources: Sequence[str],
        parsers: Sequence[str] | None = None,
        default_parser: str = DEFAULT_PARSER,
    ) -> None:
        if not sources:
            raise FacetConfigError("No input sources specified. Provide at least one source file.")
        if parsers is not None and len(parsers) != len(sources):
            raise FacetConfigError(
                f"Number of parsers ({len(parsers)}) and input sources ({len(sources)}) "
                "does not match. Provide one parser per source or omit the parser list."
            )
        identifiers = tuple(parsers) if parsers is not None else (default_parser,) * len(sources)
        self._sources = tuple(Path(source).expanduser() for source in sources)
        self._parser_names = tuple(PARSERS.require(name) for name in identifiers)
        self._parsers: tuple[Parser, ...] = tuple(
            PARSERS.create(name) for name in self._parser_names
        )

    @property
    def parser_names(self) -> tuple[str, ...]:
        """Return parser identifiers in source order."""
        return self._parser_names

    def read(self) -> list[ParseResult]:
        """Parse every source and validate alignment.

        Returns:
            One parse result per source, in source order.

        Raises:
            FacetConfigError: If a source file does not exist.
            FacetParseError: If a parser rejects a source.
            FacetAlignmentError: If object counts differ across sources.
        """
        _check_sources_exist(self._sources)
        results: list[ParseResult] = []
        with ExitStack() as stack:
            streams = [_open_source(stack, source) for source in self._sources]
            for source, parser, stream in zip(self._sources, self._parsers, streams):
                result = _parse_source(parser, stream, str(source))
                _check_alignment(results, result)
                results.append(result)
                _LOGGER.info("source_parsed", source=str(source), object_count=len(result))
        return results


def _open_source(stack: ExitStack, source: Path) -> TextIO:
    try:
        return stack.enter_context(source.open(encoding="utf-8"))
    except OSError as error:
        raise FacetConfigError(f"Failed to open input source {source}: {error}") from error


def _parse_source(parser: Parser, stream: TextIO, source_name: str) -> ParseResult:
    try:
        result = parser.parse(stream, source_name)
    except FacetError:
        raise
    except Exception as error:
        raise FacetParseError(f"Failed to parse source {source_name}: {error}") from error
    if len(result.objects) != len(result.labels):
        raise FacetParseError(
            f"Parser returned {len(result.objects)} objects but {len(result.labels)} "
            f"labels for source {source_name}."
        )
    return result


def _check_alignment(previous: list[ParseResult], result: ParseResult) -> None:
    if not previous:
        return
    expected = len(previous[0])
    if len(result) != expected:
        raise FacetAlignmentError(
            f"Different numbers of objects in the representations: "
            f"{previous[0].source_name} has {expected}, "
            f"{result.source_name} has {len(result)}."
        )


def _check_sources_exist(sources: Sequence[Path]) -> None:
    for source in sources:
        if not source.is_file():
            raise FacetConfigError(
                f"Input source {source} does not exist. Provide an existing file path."
            )
