"""Integration tests for end-to-end multi-representation ingest."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import numpy as np
import pytest

from core.config import FacetConfig
from core.errors import FacetAlignmentError
from core.types import AssociationKind, IngestOptions
from ingest.pipeline import IngestPipelineRunner, ingest_dataset
from ingest.record_assembler import assemble_composite_records
from ingest.source_reader import ParallelSourceReader
from store.dataset_store import JsonlDatasetStore
from store.sink import InMemorySink
from tests.fixture_paths import view_paths

_VIEWS = view_paths("colors.txt", "shapes.txt", "textures.txt")


def _config(tmp_path: Path) -> FacetConfig:
    return replace(FacetConfig.from_env(), data_root=tmp_path)


def test_ingest_aligned_views_into_memory(tmp_path: Path) -> None:
    """Three aligned views should produce five labelled composite records."""
    sink = InMemorySink()
    options = IngestOptions(dataset_name="views", sources=_VIEWS)

    result = ingest_dataset(options, sink, _config(tmp_path))

    assert result.record_count == 5 and result.representation_count == 3
    assert [record.associations[AssociationKind.LABEL] for record in sink.records] == [
        "red square rough",
        "red",
        "blue circle smooth",
        "circle smooth",
        "green triangle",
    ]


def test_ingest_keeps_identity_through_normalize_and_restore(tmp_path: Path) -> None:
    """Record ids and values should survive normalize and restore."""
    sink = InMemorySink()
    options = IngestOptions(dataset_name="views", sources=_VIEWS)
    runner = IngestPipelineRunner(options, sink, _config(tmp_path))
    original = assemble_composite_records(ParallelSourceReader(_VIEWS).read()).records

    runner.run()
    restored = runner.chain.restore(list(sink.records))

    assert [record.record_id for record in restored] == [record.record_id for record in original]
    assert restored[0].record_id.endswith("colors.txt:2")
    for before, after in zip(original, restored):
        for expected, actual in zip(before.representations, after.representations):
            np.testing.assert_allclose(actual, expected)


def test_ingest_misaligned_views_inserts_nothing(tmp_path: Path) -> None:
    """A misaligned source should abort the run before the sink is touched."""
    sink = InMemorySink()
    options = IngestOptions(
        dataset_name="views",
        sources=view_paths("colors.txt", "short.txt", "textures.txt"),
    )

    with pytest.raises(FacetAlignmentError):
        ingest_dataset(options, sink, _config(tmp_path))

    assert sink.records == ()


def test_ingest_with_blank_structured_label_stores_unlabeled_record(tmp_path: Path) -> None:
    """Rows without a label should bind as unlabeled classes and still be stored."""
    config = _config(tmp_path)
    store = JsonlDatasetStore(config, "views")
    options = IngestOptions(
        dataset_name="views",
        sources=view_paths("shapes.txt"),
        label_type="simple",
    )

    result = ingest_dataset(options, store, config)
    loaded = store.load_records()

    assert result.record_count == 5 and len(loaded) == 5
    assert [record.associations[AssociationKind.CLASS] for record in loaded] == [
        "square",
        "",
        "circle",
        "circle",
        "triangle",
    ]


def test_ingest_without_normalization_stores_raw_values(tmp_path: Path) -> None:
    """Disabling normalization should store parsed values unchanged."""
    config = _config(tmp_path)
    store = JsonlDatasetStore(config, "raw-views")
    options = IngestOptions(dataset_name="raw-views", sources=_VIEWS, normalize=False)

    result = ingest_dataset(options, store, config)
    loaded = store.load_records()

    assert result.normalization_description is None
    np.testing.assert_array_equal(loaded[0].representations[1], [4.0, 2.0])
