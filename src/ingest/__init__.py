"""Multi-representation ingest pipeline.

This package reads aligned sources, assembles composite records, binds
label associations, and hands normalized batches to a sink.
"""
