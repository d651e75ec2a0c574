"""
interfaces/cli.py
──────────────────────────────────────────────────────────────────────────────
Command-line interface for the taxonomy option-list generator.

Usage:
  # Regenerate both files from GRAPHQL_URL / GRAPHQL_QUERY in .env
  python -m taxonomy_codegen.interfaces.cli

  # Query from a file, Python output, custom targets
  python -m taxonomy_codegen.interfaces.cli --query-file taxonomy.graphql \\
      --language python \\
      --conditions-path app/conditions.py --requirements-path app/requirements.py

  # Machine-readable report
  taxonomy-codegen --json

Typical wiring as a pre-build step, e.g. in package.json:
  "prebuild": "taxonomy-codegen"

Exit codes:
  0 — success (both files written)
  1 — fatal error (transport, payload shape, escaping, write)
  2 — configuration / argument error
"""
from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from taxonomy_codegen.config.settings import Settings, get_settings
from taxonomy_codegen.domain.exceptions import ConfigurationError, TaxonomyCodegenError
from taxonomy_codegen.domain.models import GenerationReport
from taxonomy_codegen.services.container import build_pipeline
from taxonomy_codegen.services.generator import SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

# Report labels for the two output slots, in write order.
_GROUP_LABELS = ("conditions", "requirements")


# ── Argument parser ────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="taxonomy-codegen",
        description="Generate read-only option lists from a GraphQL taxonomy.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--conditions-path",
        metavar="FILE",
        type=Path,
        help="Output file for the conditions list. (env: CONDITIONS_PATH)",
    )
    p.add_argument(
        "--requirements-path",
        metavar="FILE",
        type=Path,
        help="Output file for the requirements list. (env: REQUIREMENTS_PATH)",
    )
    p.add_argument(
        "--language", "-l",
        choices=SUPPORTED_LANGUAGES,
        help="Generated source language. (env: OUTPUT_LANGUAGE)",
    )
    p.add_argument(
        "--query-file",
        metavar="FILE",
        type=Path,
        help="Read the GraphQL query from FILE instead of GRAPHQL_QUERY.",
    )
    p.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Print the generation report as JSON.",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return p


# ── Settings / reporting helpers ───────────────────────────────────────────

def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Return a copy of ``settings`` with CLI flags layered on top."""
    overrides: dict = {}
    if args.conditions_path:
        overrides["conditions_path"] = args.conditions_path
    if args.requirements_path:
        overrides["requirements_path"] = args.requirements_path
    if args.language:
        overrides["output_language"] = args.language
    if args.query_file:
        # An explicit file beats a query coming from the environment.
        overrides["graphql_query"] = ""
        overrides["graphql_query_file"] = str(args.query_file)
    return dataclasses.replace(settings, **overrides) if overrides else settings


def _print_report_text(report: GenerationReport) -> None:
    for label, module in zip(_GROUP_LABELS, report.modules):
        print(
            f"Created {label} file: {module.path} "
            f"({module.record_count} options)"
        )


def _print_report_json(report: GenerationReport) -> None:
    print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))


# ── Main logic ─────────────────────────────────────────────────────────────

def run(args: argparse.Namespace, settings: Settings | None = None) -> int:
    """Execute one generation run for the given arguments.

    Returns:
        Exit code (0 = success, 1 = runtime error, 2 = configuration error).
    """
    printer = _print_report_json if args.json_output else _print_report_text

    try:
        settings = _apply_overrides(settings or get_settings(), args)
        pipeline = build_pipeline(settings)
        report = pipeline.run()
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    except TaxonomyCodegenError as exc:
        logger.debug("Generation failed", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    printer(report)
    return 0


def main() -> None:
    """Entry point for the taxonomy-codegen console script."""
    parser = _build_parser()
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    sys.exit(run(args))


if __name__ == "__main__":
    main()
