from typing import Any

import httpx

from src.ports.datastore import DataStoreResponseError, DataStoreUnavailableError


class PostgrestClient:
    """
    Read-only client for a PostgREST-style REST endpoint.

    One GET per call, no retries: the caller decides what a failure means.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout: float = 3.0,
        rest_path: str = "/rest/v1",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base = base_url.rstrip("/")
        self._rest_path = "/" + rest_path.strip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }

    def table_url(self, table: str) -> str:
        return f"{self._base}{self._rest_path}/{table}"

    async def select(
        self,
        table: str,
        *,
        columns: str,
        filters: dict[str, str],
        limit: int = 1,
    ) -> list[dict[str, Any]]:
        params: dict[str, str] = {"select": columns}
        for column, value in filters.items():
            params[column] = f"eq.{value}"
        params["limit"] = str(limit)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                r = await client.get(self.table_url(table), params=params, headers=self._headers())
        except httpx.HTTPError as e:
            raise DataStoreUnavailableError(f"{table}: {e.__class__.__name__}: {e}") from e

        if r.is_error:
            raise DataStoreResponseError(
                f"{table}: HTTP {r.status_code}", status_code=r.status_code
            )

        try:
            data = r.json()
        except ValueError as e:
            raise DataStoreResponseError(f"{table}: response is not JSON") from e

        if not isinstance(data, list):
            raise DataStoreResponseError(f"{table}: expected a JSON array")
        return data
