"""Ingest orchestration for multi-representation datasets.

This module runs the pipeline stages strictly in order: read all sources,
assemble composite records, normalize, bind label associations, and only
then hand the complete batch to the sink.
"""

from __future__ import annotations

from core.config import FacetConfig
from core.logging_config import get_logger
from core.types import IngestOptions, IngestResult
from ingest.label_binding import LabelAssociationBinder
from ingest.record_assembler import assemble_composite_records
from ingest.source_reader import ParallelSourceReader
from normalization.chain import NormalizationChain
from store.sink import Sink

_LOGGER = get_logger(__name__)


class IngestPipelineRunner:
    """Runner for one synchronous ingest run.

    Collaborators are built at construction so configuration errors surface
    before any source is opened. A runner owns its normalization chain and
    must not be reused for another dataset.
    """

    def __init__(self, options: IngestOptions, sink: Sink, config: FacetConfig) -> None:
        self._options = options
        self._sink = sink
        self._reader = ParallelSourceReader(
            options.sources,
            parsers=options.parsers,
            default_parser=config.default_parser,
        )
        self._chain = (
            NormalizationChain(
                options.normalizations,
                default_normalization=config.default_normalization,
            )
            if options.normalize
            else None
        )
        self._binder = LabelAssociationBinder(options.label_type)

    @property
    def chain(self) -> NormalizationChain | None:
        """Return the run's normalization chain, if normalization is enabled."""
        return self._chain

    def run(self) -> IngestResult:
        """Execute the pipeline and insert the result into the sink."""
        _LOGGER.info(
            "ingest_started",
            dataset_name=self._options.dataset_name,
            sources=list(self._options.sources),
            parsers=list(self._reader.parser_names),
        )
        parse_results = self._reader.read()
        batch = assemble_composite_records(parse_results)
        records = list(batch.records)
        description: str | None = None
        if self._chain is not None:
            records = self._chain.normalize(records)
            description = self._chain.describe() if self._chain.is_fitted else None
        associations = self._binder.bind(batch.labels)
        self._sink.insert(records, associations)
        result = IngestResult(
            dataset_name=self._options.dataset_name,
            record_count=len(records),
            representation_count=len(parse_results),
            normalization_description=description,
        )
        _LOGGER.info(
            "ingest_completed",
            dataset_name=result.dataset_name,
            record_count=result.record_count,
            representation_count=result.representation_count,
            normalized=description is not None,
        )
        return result


def ingest_dataset(options: IngestOptions, sink: Sink, config: FacetConfig) -> IngestResult:
    """Run the multi-representation ingest pipeline into a sink.

    Args:
        options: Ingest request options.
        sink: Destination for the final records and associations.
        config: Runtime configuration.

    Returns:
        Summary of the completed run.

    Raises:
        FacetConfigError: If options are inconsistent or name unknown capabilities.
        FacetParseError: If a source cannot be parsed.
        FacetAlignmentError: If sources differ in object count.
        FacetSchemaError: If normalization rejects the records.
        FacetInstantiationError: If a structured label cannot be built.
        FacetStoreError: If the sink rejects the batch.
    """
    runner = IngestPipelineRunner(options, sink, config)
    return runner.run()
