"""Store Client — fluent PostgREST query builder over httpx.

Invariants:
    - One client per request: carries the caller's Authorization header, never shared
    - Every query is exactly one HTTP call to {url}/rest/v1/{table}
    - Transport failures and non-2xx responses raise StoreError (core/errors.py)
    - No retries; no timeout unless one is configured

Design Decisions:
    - Builder mirrors the hosted client's surface (table().select().eq()) so the
      task repository reads like the queries it sends
    - Writes send Prefer: return=minimal: the store returns no rows for them
    - transport parameter exists for httpx.MockTransport in tests
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from restful_tasks.core.errors import StoreError, ErrorContext

logger = logging.getLogger(__name__)

CLIENT_INFO = "restful-tasks/1.0.0"

_METHOD_BY_ACTION = {
    "select": "GET",
    "insert": "POST",
    "update": "PATCH",
    "delete": "DELETE",
}


@dataclass
class QueryResult:
    """Rows returned by the store (None for minimal writes)."""
    data: Any
    status_code: int


class TableQuery:
    """One pending query against a named table. Chain, then await execute()."""

    def __init__(self, client: "StoreClient", table: str):
        self._client = client
        self._table = table
        self._action: str | None = None
        self._columns = "*"
        self._payload: dict | None = None
        self._filters: list[tuple[str, str]] = []

    def select(self, columns: str = "*") -> "TableQuery":
        self._action = "select"
        self._columns = columns
        return self

    def insert(self, row: dict) -> "TableQuery":
        self._action = "insert"
        self._payload = row
        return self

    def update(self, row: dict) -> "TableQuery":
        self._action = "update"
        self._payload = row
        return self

    def delete(self) -> "TableQuery":
        self._action = "delete"
        return self

    def eq(self, column: str, value: Any) -> "TableQuery":
        """Equality filter, sent as column=eq.value."""
        self._filters.append((column, f"eq.{value}"))
        return self

    def _params(self) -> list[tuple[str, str]]:
        params = list(self._filters)
        if self._action == "select":
            params.insert(0, ("select", self._columns))
        return params

    async def execute(self) -> QueryResult:
        if self._action is None:
            raise ValueError("No action set: call select/insert/update/delete first")
        method = _METHOD_BY_ACTION[self._action]
        headers = {}
        if self._action != "select":
            headers["Prefer"] = "return=minimal"
        return await self._client.request(
            method, self._table, self._action,
            params=self._params(), payload=self._payload, headers=headers,
        )


class StoreClient:
    """Thin PostgREST client bound to one caller's credentials."""

    def __init__(
        self,
        url: str,
        api_key: str,
        authorization: str = "",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url.rstrip("/")
        self.api_key = api_key
        self.authorization = authorization
        self.timeout = timeout
        self._transport = transport

    def table(self, name: str) -> TableQuery:
        return TableQuery(self, name)

    def _get_headers(self) -> dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": self.authorization,
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-Client-Info": CLIENT_INFO,
        }

    async def request(
        self,
        method: str,
        table: str,
        action: str,
        params: list[tuple[str, str]],
        payload: dict | None = None,
        headers: dict[str, str] | None = None,
    ) -> QueryResult:
        """Send one query. Raises StoreError on any failure."""
        context = ErrorContext(table=table, operation=action)
        request_headers = {**self._get_headers(), **(headers or {})}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport,
            ) as client:
                response = await client.request(
                    method,
                    f"{self.url}/rest/v1/{table}",
                    params=params,
                    json=payload,
                    headers=request_headers,
                )
        except httpx.HTTPError as e:
            logger.debug(f"Store request failed: {e!r}")
            raise StoreError(
                str(e) or type(e).__name__, context=context,
            ) from e

        if response.is_error:
            message, store_code = _parse_error(response)
            raise StoreError(
                message, status_code=response.status_code,
                store_code=store_code, context=context,
            )
        return QueryResult(
            data=response.json() if response.content else None,
            status_code=response.status_code,
        )


def _parse_error(response: httpx.Response) -> tuple[str, str | None]:
    """Extract PostgREST's {"message", "code"} body, falling back to raw text."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"]), body.get("code")
    text = response.text.strip()
    return text or f"Store responded with HTTP {response.status_code}", None
