"""Unit tests for the default dense vector parser."""

from __future__ import annotations

import io

import numpy as np
import pytest

from parsers.double_vector_label import DoubleVectorLabelParser
from parsers.registry import PARSERS


def test_parse_splits_values_and_labels() -> None:
    """Numeric tokens should form the vector and the rest the label."""
    stream = io.StringIO("1.0 2.5 cat big\n3,4 dog\n")

    result = DoubleVectorLabelParser().parse(stream, "views.txt")

    np.testing.assert_array_equal(result.objects[1].values, [3.0, 4.0])
    assert result.labels == ("cat big", "dog")


def test_parse_skips_comments_and_blank_lines() -> None:
    """Comments and blank lines should not produce objects."""
    stream = io.StringIO("# header\n\n1 2\n")

    result = DoubleVectorLabelParser().parse(stream, "views.txt")

    assert len(result) == 1 and result.labels == ("",)


def test_parse_assigns_line_based_record_ids() -> None:
    """Record ids should combine the source name and line number."""
    stream = io.StringIO("# header\n1 2\n\n3 4\n")

    result = DoubleVectorLabelParser().parse(stream, "views.txt")

    assert [item.record_id for item in result.objects] == ["views.txt:2", "views.txt:4"]


def test_parse_rejects_rows_without_values() -> None:
    """A row of only labels is not a vector."""
    with pytest.raises(ValueError):
        DoubleVectorLabelParser().parse(io.StringIO("only labels\n"), "views.txt")


def test_parse_rejects_ragged_rows() -> None:
    """All rows of one source must share a dimensionality."""
    with pytest.raises(ValueError):
        DoubleVectorLabelParser().parse(io.StringIO("1 2\n1 2 3\n"), "views.txt")


def test_default_parser_is_registered() -> None:
    """The default identifier should resolve to the dense parser."""
    assert isinstance(PARSERS.create("double-vector-label"), DoubleVectorLabelParser)
