"""Registered parser identifiers."""

from __future__ import annotations

from core.constants import DEFAULT_PARSER
from core.registry import CapabilityRegistry
from parsers.base import Parser
from parsers.double_vector_label import DoubleVectorLabelParser

PARSERS: CapabilityRegistry[Parser] = CapabilityRegistry("parser")
PARSERS.register(DEFAULT_PARSER, DoubleVectorLabelParser)
