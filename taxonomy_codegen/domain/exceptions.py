"""
domain/exceptions.py
──────────────────────────────────────────────────────────────────────────────
Custom exception hierarchy.

All exceptions are rooted at TaxonomyCodegenError so callers can catch
broadly (except TaxonomyCodegenError) or narrowly (except TransportError).

The CLI maps them to exit codes:
  ConfigurationError → 2
  everything else    → 1
"""
from __future__ import annotations

from pathlib import Path


class TaxonomyCodegenError(Exception):
    """Base exception for all generator errors."""


class ConfigurationError(TaxonomyCodegenError):
    """Raised when required configuration is missing or invalid."""


class TransportError(TaxonomyCodegenError):
    """Raised when the GraphQL request fails or returns a non-success response."""


class ShapeError(TaxonomyCodegenError):
    """Raised when the response lacks a usable ``taxonomy`` sequence."""


class EscapeError(TaxonomyCodegenError):
    """Raised when a value cannot be rendered as a safe source literal."""


class WriteError(TaxonomyCodegenError):
    """Raised when a generated file cannot be written."""

    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = Path(path)
        message = f"Error writing to the file: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
