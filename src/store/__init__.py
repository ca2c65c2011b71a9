"""Storage layer.

This package holds the sink interface that receives ingested records
and the in-memory and JSONL-backed implementations of it.
"""
