"""Default dense vector parser.

Each non-blank, non-comment line holds one object. Numeric tokens form the
vector; every other token is joined into the row label.
"""

from __future__ import annotations

import math
import re
from typing import TextIO

import numpy as np

from core.constants import COMMENT_PREFIX, LABEL_CONCATENATION
from core.types import ParseResult, SourceVector

_TOKEN_SPLIT = re.compile(r"[\s,]+")


class DoubleVectorLabelParser:
    """Parser for whitespace or comma separated numeric rows with labels.

    All rows of one source must share the same dimensionality.
    """

    def parse(self, stream: TextIO, source_name: str) -> ParseResult:
        """Parse dense rows from a text stream.

        Args:
            stream: Open text stream.
            source_name: Source path used for record ids and errors.

        Returns:
            Parsed vectors with parallel labels.

        Raises:
            ValueError: If a row has no numeric values or the wrong dimensionality.
        """
        objects: list[SourceVector] = []
        labels: list[str] = []
        dimensionality: int | None = None
        for line_number, line in enumerate(stream, 1):
            content = line.strip()
            if not content or content.startswith(COMMENT_PREFIX):
                continue
            values, label = _split_row(content)
            if not values:
                raise ValueError(f"line {line_number} has no numeric values")
            if dimensionality is None:
                dimensionality = len(values)
            elif len(values) != dimensionality:
                raise ValueError(
                    f"line {line_number} has {len(values)} values, expected {dimensionality}"
                )
            record_id = f"{source_name}:{line_number}"
            objects.append(SourceVector(record_id=record_id, values=np.asarray(values, dtype=float)))
            labels.append(label)
        return ParseResult(source_name=source_name, objects=tuple(objects), labels=tuple(labels))


def _split_row(content: str) -> tuple[list[float], str]:
    values: list[float] = []
    label_tokens: list[str] = []
    for token in _TOKEN_SPLIT.split(content):
        if not token:
            continue
        number = _parse_number(token)
        if number is None:
            label_tokens.append(token)
        else:
            values.append(number)
    return values, LABEL_CONCATENATION.join(label_tokens)


def _parse_number(token: str) -> float | None:
    try:
        number = float(token)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number
