"""
tests/unit/test_file_writer.py
──────────────────────────────────────────────────────────────────────────────
Unit tests for LocalFileWriter against pytest's tmp_path.
"""
from __future__ import annotations

import pytest

from taxonomy_codegen.adapters.file_writer import LocalFileWriter
from taxonomy_codegen.domain.exceptions import WriteError
from taxonomy_codegen.ports.writer_port import WriterPort


class TestLocalFileWriter:
    def test_satisfies_port(self):
        assert isinstance(LocalFileWriter(), WriterPort)

    def test_creates_missing_file(self, tmp_path):
        target = tmp_path / "conditions.ts"
        LocalFileWriter().write(target, "export const X = [] as const;\n")
        assert target.read_text(encoding="utf-8") == "export const X = [] as const;\n"

    def test_replaces_existing_content(self, tmp_path):
        target = tmp_path / "conditions.ts"
        target.write_text("old content that is much longer than the new one\n" * 20)
        LocalFileWriter().write(target, "new\n")
        assert target.read_text(encoding="utf-8") == "new\n"

    def test_writes_utf8_and_lf(self, tmp_path):
        target = tmp_path / "out.ts"
        LocalFileWriter().write(target, "Zöliakie\nline two\n")
        assert target.read_bytes() == "Zöliakie\nline two\n".encode("utf-8")

    def test_missing_parent_raises_write_error_with_path(self, tmp_path):
        target = tmp_path / "missing" / "dir" / "conditions.ts"
        with pytest.raises(WriteError) as exc_info:
            LocalFileWriter().write(target, "x")
        assert exc_info.value.path == target
        assert str(target) in str(exc_info.value)

    def test_create_parent_dirs(self, tmp_path):
        target = tmp_path / "src" / "helpers" / "conditions.ts"
        LocalFileWriter(create_parent_dirs=True).write(target, "x\n")
        assert target.read_text(encoding="utf-8") == "x\n"

    def test_directory_target_raises_write_error(self, tmp_path):
        with pytest.raises(WriteError, match="Error writing to the file"):
            LocalFileWriter().write(tmp_path, "x")
