"""
ports/taxonomy_source_port.py
──────────────────────────────────────────────────────────────────────────────
Abstract interface for the remote taxonomy source.

Current implementation: GraphQLTaxonomySource (requests, POST + JSON)
To swap (e.g. a REST endpoint or a fixture file): write a new adapter
implementing this Protocol and change ONE line in services/container.py.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TaxonomySourcePort(Protocol):
    """Contract for a single-shot query endpoint."""

    @property
    def endpoint(self) -> str:
        """Identifier (usually the URL) of the remote source."""
        ...

    def fetch(self, query: str) -> dict[str, Any]:
        """Execute ``query`` once and return the response's ``data`` object.

        The adapter validates transport-level success only; the shape of the
        returned mapping is checked by the partitioner.

        Args:
            query: Opaque query text forwarded to the endpoint.

        Returns:
            The ``data`` mapping of the response body.

        Raises:
            TransportError: On connection failure or any non-success response.
        """
        ...
