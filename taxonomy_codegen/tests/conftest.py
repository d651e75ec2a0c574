"""
tests/conftest.py
──────────────────────────────────────────────────────────────────────────────
Shared pytest fixtures and mock adapter implementations.

Mock adapters implement the Port Protocols via structural subtyping — they do
NOT inherit from any base class.  pytest uses them to test the pipeline
without any network or filesystem access.

Fixture hierarchy:
  taxonomy_data    → raw `data` object as a GraphQL endpoint would return it
  mock_source      → implements TaxonomySourcePort (returns taxonomy_data)
  memory_writer    → implements WriterPort (records writes in a dict)
  settings         → Settings pointing at tmp_path outputs
  pipeline         → GenerationPipeline wired with both mocks
  parse_ts_options → parses generated TypeScript back into records
  make_source / make_writer → factories for one-off mock adapters
"""
from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import pytest

from taxonomy_codegen.config.settings import Settings
from taxonomy_codegen.domain.exceptions import WriteError
from taxonomy_codegen.services.pipeline import GenerationPipeline


# ── Fixture data ───────────────────────────────────────────────────────────

_TAXONOMY: list[dict[str, Any]] = [
    {"name": "Wheelchair access", "type": "facility"},
    {"name": "Quiet room", "type": "facility"},
    {"name": "Asthma", "type": "condition"},
    {"name": "Diabetes", "type": "condition"},
    {"name": "Step-free route", "type": "facility"},
]


@pytest.fixture
def taxonomy_data() -> dict[str, Any]:
    return {"taxonomy": [dict(e) for e in _TAXONOMY]}


# ── Settings fixture ───────────────────────────────────────────────────────

@pytest.fixture
def settings(tmp_path) -> Settings:
    """Return a Settings instance isolated from the real environment."""
    return Settings(
        graphql_url="https://taxonomy.example.test/graphql",
        graphql_query="{ taxonomy { name type } }",
        graphql_query_file="",
        graphql_token="",
        http_timeout=5,
        conditions_path=tmp_path / "conditions.ts",
        requirements_path=tmp_path / "requirements.ts",
        conditions_constant="CONDITIONS",
        requirements_constant="REQUIREMENTS",
        output_language="typescript",
        create_parent_dirs=False,
    )


# ── Mock adapters ──────────────────────────────────────────────────────────

class MockTaxonomySource:
    """Returns a canned `data` object and remembers the queries it saw."""

    endpoint = "mock://taxonomy"

    def __init__(self, data: Any) -> None:
        self._data = data
        self.queries: list[str] = []

    def fetch(self, query: str) -> dict[str, Any]:
        self.queries.append(query)
        return self._data


class MemoryWriter:
    """In-memory WriterPort; optionally fails for one path."""

    def __init__(self, fail_on: Path | None = None) -> None:
        self.files: dict[Path, str] = {}
        self._fail_on = fail_on

    def write(self, path: Path, content: str) -> None:
        if self._fail_on is not None and Path(path) == self._fail_on:
            raise WriteError(path, "simulated failure")
        self.files[Path(path)] = content


# ── pytest fixtures ────────────────────────────────────────────────────────

@pytest.fixture
def mock_source(taxonomy_data):
    return MockTaxonomySource(taxonomy_data)


@pytest.fixture
def memory_writer():
    return MemoryWriter()


@pytest.fixture
def pipeline(mock_source, memory_writer, settings):
    return GenerationPipeline(
        source=mock_source,
        writer=memory_writer,
        settings=settings,
    )


# ── Generated-code helpers ─────────────────────────────────────────────────

_STRING = r'"(?:[^"\\]|\\.)*"'
_TS_RECORD = re.compile(
    rf"^  \{{ type: ({_STRING}), label: ({_STRING}), value: ({_STRING}) \}},$"
)
_TS_OPEN = re.compile(r"^export const ([A-Za-z_$][\w$]*) = \[$")
_TS_EMPTY = re.compile(r"^export const ([A-Za-z_$][\w$]*) = \[\] as const;$")


def _parse_ts_options(text: str) -> tuple[str, list[dict[str, str]]]:
    """Parse a generated TypeScript module into (constant, records).

    Fails the test if any line deviates from the expected grammar.
    """
    lines = text.split("\n")
    assert lines[0] == "/* eslint-disable */"
    assert lines[1] == "/* This code was automatically generated. Please do not edit. */"
    assert lines[-1] == "", "module must end with exactly one newline"
    body = lines[2:-1]

    if len(body) == 1:
        m = _TS_EMPTY.match(body[0])
        assert m, f"unexpected declaration: {body[0]!r}"
        return m.group(1), []

    m = _TS_OPEN.match(body[0])
    assert m, f"unexpected declaration: {body[0]!r}"
    assert body[-1] == "] as const;"
    records = []
    for line in body[1:-1]:
        rec = _TS_RECORD.match(line)
        assert rec, f"unexpected record line: {line!r}"
        type_, label, value = (json.loads(g) for g in rec.groups())
        records.append({"type": type_, "label": label, "value": value})
    return m.group(1), records


@pytest.fixture
def parse_ts_options():
    return _parse_ts_options


@pytest.fixture
def make_source():
    """Factory for a MockTaxonomySource over an arbitrary `data` object."""
    return MockTaxonomySource


@pytest.fixture
def make_writer():
    """Factory for a MemoryWriter, optionally failing on one path."""
    return MemoryWriter
