"""Registered normalization identifiers."""

from __future__ import annotations

from core.constants import DEFAULT_NORMALIZATION
from core.registry import CapabilityRegistry
from normalization.attribute_wise import AttributeWiseNormalization
from normalization.base import Normalization
from normalization.identity import IdentityNormalization
from normalization.zscore import ZScoreNormalization

NORMALIZATIONS: CapabilityRegistry[Normalization] = CapabilityRegistry("normalization")
NORMALIZATIONS.register(DEFAULT_NORMALIZATION, AttributeWiseNormalization)
NORMALIZATIONS.register("zscore", ZScoreNormalization)
NORMALIZATIONS.register("identity", IdentityNormalization)
