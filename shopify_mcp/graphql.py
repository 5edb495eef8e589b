"""
Shopify Admin GraphQL client — the single remote collaborator.

One long-lived httpx.AsyncClient, no per-request state, safe to share
across concurrent tool invocations. No retries: failures surface immediately.
"""

from typing import Any, Dict, List, Optional

import httpx

from .config import Config, Settings
from .logger import get_logger

log = get_logger("graphql")


class GraphQLError(Exception):
    """The API answered, but the payload carried an ``errors`` list."""

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        messages = [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]
        super().__init__("GraphQL error: " + "; ".join(messages))


class ShopifyGraphQLClient:
    """Thin async transport handle for the Shopify Admin GraphQL endpoint."""

    def __init__(
        self,
        domain: str,
        access_token: str,
        api_version: str = Config.API_VERSION,
        timeout: float = Config.REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = f"https://{domain}/admin/api/{api_version}/graphql.json"
        self._http = httpx.AsyncClient(
            headers={
                "X-Shopify-Access-Token": access_token,
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ShopifyGraphQLClient":
        return cls(
            settings.domain,
            settings.access_token,
            api_version=settings.api_version,
            timeout=settings.timeout,
        )

    async def request(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Execute a query or mutation and return its ``data`` object.

        Raises httpx.HTTPStatusError on non-2xx responses and GraphQLError
        when the response carries top-level ``errors``.
        """
        resp = await self._http.post(
            self.endpoint,
            json={"query": query, "variables": variables or {}},
        )
        resp.raise_for_status()

        payload = resp.json()
        errors = payload.get("errors")
        if errors:
            log.warning(f"GraphQL errors from {self.endpoint}: {errors}")
            raise GraphQLError(errors if isinstance(errors, list) else [errors])

        return payload.get("data") or {}

    async def aclose(self):
        await self._http.aclose()
