"""Runtime configuration model for Facet.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATA_ROOT, DEFAULT_NORMALIZATION, DEFAULT_PARSER
from core.errors import FacetConfigError


@dataclass(frozen=True)
class FacetConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local root directory for the JSONL dataset store.
        default_parser: Parser identifier replicated once per source.
        default_normalization: Normalization identifier replicated per representation.
    """

    data_root: Path
    default_parser: str = DEFAULT_PARSER
    default_normalization: str = DEFAULT_NORMALIZATION

    @classmethod
    def from_env(cls) -> "FacetConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            FacetConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("FACET_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        default_parser = _parse_identifier(
            "FACET_DEFAULT_PARSER", os.getenv("FACET_DEFAULT_PARSER", DEFAULT_PARSER)
        )
        default_normalization = _parse_identifier(
            "FACET_DEFAULT_NORMALIZATION",
            os.getenv("FACET_DEFAULT_NORMALIZATION", DEFAULT_NORMALIZATION),
        )
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            default_parser=default_parser,
            default_normalization=default_normalization,
        )


def _parse_identifier(variable: str, raw_value: str) -> str:
    """Validate a capability identifier read from the environment.

    Args:
        variable: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Stripped identifier.

    Raises:
        FacetConfigError: If the identifier is blank or a list.
    """
    identifier = raw_value.strip()
    if not identifier or "," in identifier:
        raise FacetConfigError(
            f"Invalid {variable} value: expected one capability identifier, "
            f"got '{raw_value}'. Run 'facet capabilities' to list identifiers."
        )
    return identifier
