"""Facet exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class FacetError(Exception):
    """Base exception for all Facet failures."""


class FacetConfigError(FacetError):
    """Raised for missing or malformed configuration and option counts."""


class FacetAlignmentError(FacetError):
    """Raised when parallel sources or rows differ in object count."""


class FacetSchemaError(FacetError):
    """Raised when records do not match an established normalization chain."""


class FacetUnsupportedOperationError(FacetError):
    """Raised for operations the pipeline deliberately does not provide."""


class FacetInstantiationError(FacetError):
    """Raised when a registered capability cannot be constructed or initialized."""


class FacetParseError(FacetError):
    """Raised when a parser rejects source content."""


class FacetStoreError(FacetError):
    """Raised for sink and dataset store failures."""


class FacetRunSpecError(FacetError):
    """Raised for invalid or unsupported run-spec files."""
