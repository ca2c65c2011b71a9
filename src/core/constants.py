"""Core constants used across Facet modules.

This module centralizes identifiers and file names.
Keeping values here avoids magic literals in pipeline logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".facet")
DATASETS_DIR_NAME = "datasets"
RECORDS_FILE_NAME = "records.jsonl"
MANIFEST_FILE_NAME = "manifest.json"
DEFAULT_PARSER = "double-vector-label"
DEFAULT_NORMALIZATION = "attribute-wise"
IDENTIFIER_SEPARATOR = ","
LABEL_CONCATENATION = " "
COMMENT_PREFIX = "#"
RUN_SPEC_VERSION = 1
