"""
tests/unit/test_settings.py
──────────────────────────────────────────────────────────────────────────────
Unit tests for environment-driven Settings.
"""
from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from taxonomy_codegen.config.settings import Settings
from taxonomy_codegen.domain.exceptions import ConfigurationError


class TestSettingsFromEnvironment:
    def test_reads_env(self, monkeypatch):
        monkeypatch.setenv("GRAPHQL_URL", "https://api.example.test/graphql")
        monkeypatch.setenv("HTTP_TIMEOUT", "12")
        monkeypatch.setenv("CONDITIONS_PATH", "web/conditions.ts")
        monkeypatch.setenv("OUTPUT_LANGUAGE", "python")
        s = Settings()
        assert s.graphql_url == "https://api.example.test/graphql"
        assert s.http_timeout == 12
        assert s.conditions_path == Path("web/conditions.ts")
        assert s.output_language == "python"

    def test_defaults(self, monkeypatch):
        for key in (
            "REQUIREMENTS_PATH", "CONDITIONS_CONSTANT", "REQUIREMENTS_CONSTANT",
            "CREATE_PARENT_DIRS", "HTTP_TIMEOUT",
        ):
            monkeypatch.delenv(key, raising=False)
        s = Settings()
        assert s.requirements_path == Path("src/helpers/requirements.ts")
        assert s.conditions_constant == "CONDITIONS"
        assert s.requirements_constant == "REQUIREMENTS"
        assert s.create_parent_dirs is False
        assert s.http_timeout == 30

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("Yes", True),
                                              ("false", False), ("0", False), ("", False)])
    def test_bool_parsing(self, monkeypatch, raw, expected):
        monkeypatch.setenv("CREATE_PARENT_DIRS", raw)
        assert Settings().create_parent_dirs is expected

    def test_is_frozen(self, settings):
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.graphql_url = "https://other.test"  # type: ignore[misc]

    def test_malformed_int_raises_configuration_error(self, monkeypatch):
        monkeypatch.setenv("HTTP_TIMEOUT", "thirty")
        with pytest.raises(ConfigurationError, match="HTTP_TIMEOUT must be an integer"):
            Settings()
