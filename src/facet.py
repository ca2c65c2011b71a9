"""Public SDK surface for Facet.

This module provides a stable import path for pipeline users.
It re-exports the pipeline entry point, sinks, and typed option models.
"""

from __future__ import annotations

from core.config import FacetConfig
from core.types import (
    AssociationKind,
    CompositeRecord,
    IngestOptions,
    IngestResult,
    ParseResult,
    SourceVector,
)
from ingest.label_binding import LabelAssociationBinder
from ingest.pipeline import IngestPipelineRunner, ingest_dataset
from ingest.record_assembler import assemble_composite_records
from ingest.source_reader import ParallelSourceReader
from labels.registry import LABEL_TYPES
from normalization.chain import NormalizationChain
from normalization.registry import NORMALIZATIONS
from parsers.registry import PARSERS
from store.dataset_store import JsonlDatasetStore
from store.sink import InMemorySink, Sink

__all__ = [
    "AssociationKind",
    "CompositeRecord",
    "FacetConfig",
    "InMemorySink",
    "IngestOptions",
    "IngestPipelineRunner",
    "IngestResult",
    "JsonlDatasetStore",
    "LABEL_TYPES",
    "LabelAssociationBinder",
    "NORMALIZATIONS",
    "NormalizationChain",
    "PARSERS",
    "ParallelSourceReader",
    "ParseResult",
    "Sink",
    "SourceVector",
    "assemble_composite_records",
    "ingest_dataset",
]
