"""
config/settings.py
──────────────────────────────────────────────────────────────────────────────
Single source of truth for all tuneable parameters.

All values can be overridden via environment variables or a .env file in the
current working directory.  The frozen dataclass ensures settings are never
mutated at runtime; the CLI derives per-run copies with dataclasses.replace().

  GRAPHQL_URL        → endpoint to query (required)
  GRAPHQL_QUERY      → query text (or GRAPHQL_QUERY_FILE for a file path)
  CONDITIONS_PATH    → output file for the conditions group
  REQUIREMENTS_PATH  → output file for the requirements group
  OUTPUT_LANGUAGE    → typescript | python
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from taxonomy_codegen.domain.exceptions import ConfigurationError

# The generator runs as a build step, so .env is looked up from the cwd.
load_dotenv(Path.cwd() / ".env")


def _env(key: str, default: str) -> str:
    return os.getenv(key, default)


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from None


def _env_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_path(key: str, default: Path) -> Path:
    return Path(os.getenv(key, str(default)))


@dataclass(frozen=True)
class Settings:
    """Immutable generator settings loaded from environment variables."""

    # ── Remote source ──────────────────────────────────────────────────────
    graphql_url: str = field(
        default_factory=lambda: _env("GRAPHQL_URL", "")
    )
    graphql_query: str = field(
        default_factory=lambda: _env("GRAPHQL_QUERY", "")
    )
    # Used only when GRAPHQL_QUERY is empty.
    graphql_query_file: str = field(
        default_factory=lambda: _env("GRAPHQL_QUERY_FILE", "")
    )
    graphql_token: str = field(
        default_factory=lambda: _env("GRAPHQL_TOKEN", "")
    )
    http_timeout: int = field(
        default_factory=lambda: _env_int("HTTP_TIMEOUT", 30)
    )

    # ── Output targets ─────────────────────────────────────────────────────
    conditions_path: Path = field(
        default_factory=lambda: _env_path(
            "CONDITIONS_PATH", Path("src/helpers/conditions.ts")
        )
    )
    requirements_path: Path = field(
        default_factory=lambda: _env_path(
            "REQUIREMENTS_PATH", Path("src/helpers/requirements.ts")
        )
    )
    conditions_constant: str = field(
        default_factory=lambda: _env("CONDITIONS_CONSTANT", "CONDITIONS")
    )
    requirements_constant: str = field(
        default_factory=lambda: _env("REQUIREMENTS_CONSTANT", "REQUIREMENTS")
    )

    # ── Rendering / writing ────────────────────────────────────────────────
    # Valid values: "typescript" | "python"
    output_language: str = field(
        default_factory=lambda: _env("OUTPUT_LANGUAGE", "typescript")
    )
    create_parent_dirs: bool = field(
        default_factory=lambda: _env_bool("CREATE_PARENT_DIRS", False)
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Returns a cached singleton Settings instance.

    Use this everywhere instead of instantiating Settings() directly;
    it guarantees a single object is shared across the entire process.
    """
    return Settings()
