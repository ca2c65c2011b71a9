"""Facet CLI entry points.
This module exposes the ingest, run-spec, and capabilities commands.
It maps argparse commands onto the ingest pipeline.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Any, Sequence

from core.config import FacetConfig
from core.errors import FacetError
from core.registry import split_identifiers
from core.run_spec import load_run_spec
from core.types import IngestOptions, IngestResult
from ingest.pipeline import ingest_dataset
from labels.registry import LABEL_TYPES
from normalization.registry import NORMALIZATIONS
from parsers.registry import PARSERS
from store.dataset_store import JsonlDatasetStore


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="facet", description="Facet multi-representation ingest")
    parser.add_argument("--data-root", help="Override FACET_DATA_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_ingest_command(subparsers)
    _add_run_spec_command(subparsers)
    subparsers.add_parser("capabilities", help="List registered capability identifiers")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Facet CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "ingest":
            return _run_ingest_command(args)
        if args.command == "run-spec":
            return _run_spec_command(args)
        if args.command == "capabilities":
            return _run_capabilities_command()
    except FacetError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(data_root: str | None) -> FacetConfig:
    """Build config with optional data-root override.

    Args:
        data_root: Optional override path.

    Returns:
        Runtime configuration.
    """
    config = FacetConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    return config


def _run_ingest_command(args: argparse.Namespace) -> int:
    """Handle ingest command.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = IngestOptions(
        dataset_name=args.dataset,
        sources=tuple(args.sources),
        parsers=split_identifiers(args.parsers, "parsers") if args.parsers else None,
        normalizations=(
            split_identifiers(args.normalizations, "normalizations")
            if args.normalizations
            else None
        ),
        label_type=args.label_type,
        normalize=not args.no_normalize,
    )
    return _ingest(options, _build_config(args.data_root))


def _run_spec_command(args: argparse.Namespace) -> int:
    """Handle run-spec command.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    spec = load_run_spec(args.spec_file)
    return _ingest(spec.options, _build_config(args.data_root or spec.data_root))


def _run_capabilities_command() -> int:
    """Print registered identifiers per capability."""
    for capability, registry in (
        ("parsers", PARSERS),
        ("normalizations", NORMALIZATIONS),
        ("label-types", LABEL_TYPES),
    ):
        print(f"{capability}: {', '.join(registry.identifiers())}")
    return 0


def _ingest(options: IngestOptions, config: FacetConfig) -> int:
    store = JsonlDatasetStore(config, options.dataset_name)
    result = ingest_dataset(options, store, config)
    _print_result(result, store.dataset_dir)
    return 0


def _print_result(result: IngestResult, dataset_dir: Path) -> None:
    print(f"dataset={result.dataset_name}")
    print(f"records={result.record_count}")
    print(f"representations={result.representation_count}")
    print(f"path={dataset_dir}")


def _add_ingest_command(subparsers: Any) -> None:
    """Register ingest subcommand."""
    parser = subparsers.add_parser("ingest", help="Ingest aligned representation files")
    parser.add_argument("sources", nargs="+", help="Source files, one per representation")
    parser.add_argument("--dataset", required=True, help="Dataset name")
    parser.add_argument("--parsers", help="Comma-separated parser identifiers, one per source")
    parser.add_argument(
        "--normalizations",
        help="Comma-separated normalization identifiers, one per representation",
    )
    parser.add_argument("--label-type", help="Structured label type identifier")
    parser.add_argument(
        "--no-normalize",
        action="store_true",
        help="Store records without normalization",
    )


def _add_run_spec_command(subparsers: Any) -> None:
    """Register run-spec subcommand."""
    parser = subparsers.add_parser("run-spec", help="Run an ingest described by a YAML file")
    parser.add_argument("spec_file", help="Path to the YAML run spec")
