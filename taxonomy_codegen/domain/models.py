"""
domain/models.py
──────────────────────────────────────────────────────────────────────────────
Pure domain objects — Pydantic models with no imports from adapters or ports.

These models are the lingua franca of the entire system:
  • the taxonomy source produces raw payloads parsed into TaxonomyEntry
  • services partition and render them
  • the CLI serialises the GenerationReport

Order matters everywhere: the position of an entry in the taxonomy decides
both which group it lands in and where it appears in the generated list.
"""
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

# `type` value that opens the requirements group.
CONDITION_DISCRIMINATOR = "condition"


# ── Enums ──────────────────────────────────────────────────────────────────────

class PipelineStage(str, Enum):
    """States of one generation run, in execution order."""
    FETCHING      = "fetching"
    PARTITIONING  = "partitioning"
    GENERATING_A  = "generating_a"
    GENERATING_B  = "generating_b"
    WRITING_A     = "writing_a"
    WRITING_B     = "writing_b"
    DONE          = "done"
    FAILED        = "failed"


# ── Input ──────────────────────────────────────────────────────────────────────

class TaxonomyEntry(BaseModel):
    """A single labeled entry of the remote taxonomy."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    type: str


class TaxonomyPayload(BaseModel):
    """The ordered taxonomy as returned under ``data.taxonomy``."""

    taxonomy: list[TaxonomyEntry]


# ── Partitioning ───────────────────────────────────────────────────────────────

class TaxonomyPartition(BaseModel):
    """Two contiguous, non-overlapping slices of the taxonomy.

    ``conditions`` holds ``entries[:boundary]`` and ``requirements`` holds
    ``entries[boundary:]``; concatenated they reproduce the input exactly.
    """

    model_config = ConfigDict(frozen=True)

    conditions:   tuple[TaxonomyEntry, ...]
    requirements: tuple[TaxonomyEntry, ...]
    boundary:     int = Field(..., ge=0)


# ── Rendering ──────────────────────────────────────────────────────────────────

class OptionRecord(BaseModel):
    """One ``{type, label, value}`` element of a generated list."""

    model_config = ConfigDict(frozen=True)

    type:  str
    label: str
    value: str

    @classmethod
    def from_entry(cls, entry: TaxonomyEntry) -> OptionRecord:
        # label and value are both sourced from the entry name; the entry has
        # already been validated, so skip a second pass.
        return cls.model_construct(type=entry.type, label=entry.name, value=entry.name)


class GeneratedModule(BaseModel):
    """Rendered source text destined for a single output path."""

    path:          Path
    constant_name: str
    record_count:  int = Field(..., ge=0)
    text:          str = Field(..., exclude=True, repr=False)


# ── Pipeline output ────────────────────────────────────────────────────────────

class GenerationReport(BaseModel):
    """Outcome of a successful GenerationPipeline.run()."""

    boundary:        int
    taxonomy_size:   int
    output_language: str
    modules:         list[GeneratedModule]
    generated_at:    datetime = Field(
                         default_factory=lambda: datetime.now(timezone.utc)
                     )

    @field_validator("modules")
    @classmethod
    def modules_cover_taxonomy(
        cls, v: list[GeneratedModule], info: ValidationInfo
    ) -> list[GeneratedModule]:
        size = info.data.get("taxonomy_size")
        if size is not None and sum(m.record_count for m in v) != size:
            raise ValueError("generated modules must account for every taxonomy entry")
        return v

    def to_dict(self) -> dict:
        """Serialise to a plain dict (JSON-safe paths/datetimes)."""
        return self.model_dump(mode="json")
