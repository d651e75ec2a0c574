"""
adapters/graphql_source.py
──────────────────────────────────────────────────────────────────────────────
Implements TaxonomySourcePort against a GraphQL endpoint.

Key behaviour:
  - Exactly one POST per fetch(): body {"query": ...}, JSON content type
  - Success requires BOTH status_code == 200 AND response.ok
  - No retries: one failed attempt ends the run
  - Returns the response's `data` object untouched (shape is checked later)

Required env vars:
  GRAPHQL_URL    — endpoint URL
Optional:
  GRAPHQL_TOKEN  — sent as "Authorization: Bearer <token>"
  HTTP_TIMEOUT   — seconds, default 30
"""
from __future__ import annotations

import logging
from typing import Any

import requests

from taxonomy_codegen.config.settings import Settings
from taxonomy_codegen.domain.exceptions import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

_SUCCESS_STATUS = 200


class GraphQLTaxonomySource:
    """Single-shot GraphQL client used by GenerationPipeline.

    Injected via services/container.py.
    """

    def __init__(self, settings: Settings) -> None:
        if not settings.graphql_url:
            raise ConfigurationError(
                "GRAPHQL_URL is not set. "
                "Add it to your .env file or environment."
            )
        self._url = settings.graphql_url
        self._timeout = settings.http_timeout
        self._headers = {"Content-Type": "application/json"}
        if settings.graphql_token:
            self._headers["Authorization"] = f"Bearer {settings.graphql_token}"
        logger.debug("GraphQLTaxonomySource ready | url=%s", self._url)

    # ── TaxonomySourcePort implementation ──────────────────────────────────

    @property
    def endpoint(self) -> str:
        return self._url

    def fetch(self, query: str) -> dict[str, Any]:
        """POST the query and return the ``data`` object of the response.

        Raises:
            TransportError: On connection failure, non-200 status, a
                response not flagged ok, or a body without a ``data`` object.
        """
        try:
            resp = requests.post(
                self._url,
                headers=self._headers,
                json={"query": query},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(
                f"Error fetching data from {self._url}: {exc}"
            ) from exc

        if resp.status_code != _SUCCESS_STATUS or not resp.ok:
            logger.error(
                "GraphQL HTTP %d: %s", resp.status_code, resp.text[:300],
            )
            raise TransportError(
                f"Error fetching data from {self._url}: HTTP {resp.status_code}"
            )

        return self._extract_data(resp)

    # ── Private helpers ────────────────────────────────────────────────────

    def _extract_data(self, resp: requests.Response) -> dict[str, Any]:
        """Pull the ``data`` object out of a GraphQL response body."""
        try:
            body = resp.json()
        except ValueError as exc:
            raise TransportError(
                f"Response from {self._url} is not valid JSON"
            ) from exc

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            errors = body.get("errors") if isinstance(body, dict) else None
            detail = ""
            if isinstance(errors, list) and errors:
                first = errors[0]
                message = first.get("message") if isinstance(first, dict) else None
                detail = f": {message if message is not None else first}"
            raise TransportError(
                f"Response from {self._url} carries no data object{detail}"
            )

        logger.info("Fetched GraphQL data | url=%s keys=%s", self._url, sorted(data))
        return data
