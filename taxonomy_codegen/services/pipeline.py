"""
services/pipeline.py
──────────────────────────────────────────────────────────────────────────────
Pipeline orchestrator: fetch → partition → render both groups → write both.

  FETCHING → PARTITIONING → GENERATING_A → GENERATING_B
           → WRITING_A → WRITING_B → DONE
  (any stage) → FAILED

Both modules are rendered and held in memory before either file is touched,
so a bad taxonomy entry never leaves one file regenerated and the other
stale.  A failure while writing the second file still leaves the first one
updated; the run is reported as failed either way.

It knows nothing about infrastructure and only speaks to Ports.
"""
from __future__ import annotations

import logging
from pathlib import Path

from taxonomy_codegen.config.settings import Settings
from taxonomy_codegen.domain.exceptions import ConfigurationError
from taxonomy_codegen.domain.models import (
    GeneratedModule,
    GenerationReport,
    PipelineStage,
    TaxonomyEntry,
)
from taxonomy_codegen.ports.taxonomy_source_port import TaxonomySourcePort
from taxonomy_codegen.ports.writer_port import WriterPort
from taxonomy_codegen.services.generator import normalize_language, render_option_list
from taxonomy_codegen.services.partitioner import parse_taxonomy, partition_taxonomy

logger = logging.getLogger(__name__)


def resolve_query(settings: Settings) -> str:
    """Return the query text from GRAPHQL_QUERY, falling back to GRAPHQL_QUERY_FILE."""
    if settings.graphql_query.strip():
        return settings.graphql_query
    if settings.graphql_query_file:
        path = Path(settings.graphql_query_file)
        try:
            query = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(
                f"Cannot read GRAPHQL_QUERY_FILE {path}: {exc.strerror or exc}"
            ) from exc
        if query.strip():
            return query
        raise ConfigurationError(f"GRAPHQL_QUERY_FILE {path} is empty")
    raise ConfigurationError(
        "No GraphQL query configured. Set GRAPHQL_QUERY or GRAPHQL_QUERY_FILE."
    )


class GenerationPipeline:
    """Single-shot taxonomy → option-list generator.

    Inject via services/container.py — do not instantiate directly in
    application code.

    Args:
        source:   Any object satisfying TaxonomySourcePort.
        writer:   Any object satisfying WriterPort.
        settings: Query, output paths, constant names and language.
    """

    def __init__(
        self,
        source: TaxonomySourcePort,
        writer: WriterPort,
        settings: Settings,
    ) -> None:
        self._source = source
        self._writer = writer
        self._settings = settings
        self._stage: PipelineStage | None = None

    @property
    def stage(self) -> PipelineStage | None:
        """Current stage; ``None`` before run(), DONE or FAILED after."""
        return self._stage

    # ── Public API ─────────────────────────────────────────────────────────

    def run(self) -> GenerationReport:
        """Execute one full generation run.

        Returns:
            GenerationReport describing both written modules.

        Raises:
            TaxonomyCodegenError: Any failure; the stage is left at FAILED.
        """
        try:
            return self._run()
        except Exception as exc:
            failed_at = self._stage
            self._stage = PipelineStage.FAILED
            logger.error(
                "Generation failed | stage=%s error=%s",
                failed_at.value if failed_at else "init",
                exc,
            )
            raise

    # ── Private helpers ────────────────────────────────────────────────────

    def _advance(self, stage: PipelineStage) -> None:
        logger.debug("stage → %s", stage.value)
        self._stage = stage

    def _run(self) -> GenerationReport:
        s = self._settings

        self._advance(PipelineStage.FETCHING)
        query = resolve_query(s)
        data = self._source.fetch(query)

        self._advance(PipelineStage.PARTITIONING)
        entries = parse_taxonomy(data)
        partition = partition_taxonomy(entries)

        self._advance(PipelineStage.GENERATING_A)
        module_a = self._generate(
            partition.conditions, s.conditions_constant, s.conditions_path
        )
        self._advance(PipelineStage.GENERATING_B)
        module_b = self._generate(
            partition.requirements, s.requirements_constant, s.requirements_path
        )

        self._advance(PipelineStage.WRITING_A)
        self._writer.write(module_a.path, module_a.text)
        self._advance(PipelineStage.WRITING_B)
        self._writer.write(module_b.path, module_b.text)

        self._advance(PipelineStage.DONE)
        logger.info(
            "Generation done | source=%s entries=%d boundary=%d",
            self._source.endpoint,
            len(entries),
            partition.boundary,
        )
        return GenerationReport(
            boundary=partition.boundary,
            taxonomy_size=len(entries),
            output_language=normalize_language(s.output_language),
            modules=[module_a, module_b],
        )

    def _generate(
        self,
        group: tuple[TaxonomyEntry, ...],
        constant_name: str,
        path: Path,
    ) -> GeneratedModule:
        text = render_option_list(group, constant_name, self._settings.output_language)
        return GeneratedModule(
            path=path,
            constant_name=constant_name,
            record_count=len(group),
            text=text,
        )
