"""
services/container.py
──────────────────────────────────────────────────────────────────────────────
Dependency Injection container.

THIS IS THE ONLY FILE THAT NAMES CONCRETE ADAPTER CLASSES.

  TaxonomySourcePort → GraphQLTaxonomySource  (requests)
  WriterPort         → LocalFileWriter        (filesystem)

Unlike a long-lived service there is no cached singleton here: the CLI
builds one pipeline per run, usually from settings adjusted by flags.
"""
from __future__ import annotations

import logging

from taxonomy_codegen.adapters.file_writer import LocalFileWriter
from taxonomy_codegen.adapters.graphql_source import GraphQLTaxonomySource
from taxonomy_codegen.config.settings import Settings, get_settings
from taxonomy_codegen.services.pipeline import GenerationPipeline

logger = logging.getLogger(__name__)


def build_pipeline(settings: Settings | None = None) -> GenerationPipeline:
    """Build a fully wired GenerationPipeline.

    Args:
        settings: Explicit settings; defaults to the environment singleton.

    Raises:
        ConfigurationError: If GRAPHQL_URL is missing.
    """
    settings = settings or get_settings()
    logger.info(
        "Building GenerationPipeline | url=%s language=%s",
        settings.graphql_url,
        settings.output_language,
    )

    source = GraphQLTaxonomySource(settings)
    writer = LocalFileWriter(create_parent_dirs=settings.create_parent_dirs)

    return GenerationPipeline(source=source, writer=writer, settings=settings)
