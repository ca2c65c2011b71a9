"""Registered label type identifiers."""

from __future__ import annotations

from core.registry import CapabilityRegistry
from labels.base import LabelType
from labels.class_labels import HierarchicalClassLabel, SimpleClassLabel

LABEL_TYPES: CapabilityRegistry[LabelType] = CapabilityRegistry("label type")
LABEL_TYPES.register("simple", SimpleClassLabel)
LABEL_TYPES.register("hierarchical", HierarchicalClassLabel)
