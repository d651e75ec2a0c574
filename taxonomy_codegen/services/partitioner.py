"""
services/partitioner.py
──────────────────────────────────────────────────────────────────────────────
Taxonomy validation and partitioning.

Pure functions with no I/O.

The taxonomy arrives as one ordered list mixing two categories.  Everything
before the first entry whose `type` is "condition" is the conditions group;
everything from that entry onward is the requirements group:

  [A/x, B/condition, C/condition]  →  conditions=[A]  requirements=[B, C]

When no entry matches, the boundary is the list length: conditions holds the
whole taxonomy and requirements is empty (but still rendered).
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from taxonomy_codegen.domain.exceptions import ShapeError
from taxonomy_codegen.domain.models import (
    CONDITION_DISCRIMINATOR,
    TaxonomyEntry,
    TaxonomyPartition,
    TaxonomyPayload,
)

logger = logging.getLogger(__name__)


def parse_taxonomy(data: Any) -> list[TaxonomyEntry]:
    """Validate the fetched ``data`` object and return its ordered entries.

    Raises:
        ShapeError: If ``taxonomy`` is missing, not a list, or contains an
            entry without string ``name`` and ``type`` fields.
    """
    if not isinstance(data, Mapping):
        raise ShapeError(f"Expected a data object, got {type(data).__name__}")
    if "taxonomy" not in data:
        raise ShapeError("Response data has no 'taxonomy' field")
    if not isinstance(data["taxonomy"], list):
        raise ShapeError(
            f"'taxonomy' must be a list, got {type(data['taxonomy']).__name__}"
        )

    try:
        payload = TaxonomyPayload.model_validate({"taxonomy": data["taxonomy"]})
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ShapeError(f"Malformed taxonomy entry at {location}: {first['msg']}") from exc

    return payload.taxonomy


def find_boundary(
    entries: Sequence[TaxonomyEntry],
    discriminator: str = CONDITION_DISCRIMINATOR,
) -> int:
    """Index of the first entry typed ``discriminator``, else ``len(entries)``."""
    for index, entry in enumerate(entries):
        if entry.type == discriminator:
            return index
    return len(entries)


def partition_taxonomy(
    entries: Sequence[TaxonomyEntry],
    discriminator: str = CONDITION_DISCRIMINATOR,
) -> TaxonomyPartition:
    """Split ``entries`` into two contiguous groups at the boundary."""
    boundary = find_boundary(entries, discriminator)
    partition = TaxonomyPartition(
        conditions=tuple(entries[:boundary]),
        requirements=tuple(entries[boundary:]),
        boundary=boundary,
    )
    logger.info(
        "partition | size=%d boundary=%d conditions=%d requirements=%d",
        len(entries),
        boundary,
        len(partition.conditions),
        len(partition.requirements),
    )
    if boundary == len(entries):
        logger.warning(
            "No entry of type %r found; requirements group is empty",
            discriminator,
        )
    return partition
