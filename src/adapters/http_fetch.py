from urllib.parse import urlparse

import httpx

from src.ports.fetcher import FetchError


class HttpFetcher:
    """
    Upstream fetches for preview assets and the SPA shell.

    Only absolute http(s) URLs; bodies are capped at `max_bytes`.
    """

    def __init__(
        self,
        *,
        timeout: float = 5.0,
        max_bytes: int = 5_000_000,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._timeout = timeout
        self._max_bytes = max_bytes
        self._transport = transport

    def _check_url(self, url: str) -> None:
        try:
            parsed = urlparse(url)
        except ValueError as e:
            raise FetchError(url, f"malformed URL: {e}") from e
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise FetchError(url, "only absolute http(s) URLs can be fetched")

    async def _get(self, url: str) -> tuple[bytes, str]:
        self._check_url(url)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                async with client.stream("GET", url) as r:
                    if r.is_error:
                        raise FetchError(url, f"HTTP {r.status_code}")

                    chunks: list[bytes] = []
                    total = 0
                    async for chunk in r.aiter_bytes():
                        total += len(chunk)
                        if total > self._max_bytes:
                            raise FetchError(url, f"body exceeds {self._max_bytes} bytes")
                        chunks.append(chunk)
                    return b"".join(chunks), r.charset_encoding or "utf-8"
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(url, f"{e.__class__.__name__}: {e}") from e

    async def fetch_bytes(self, url: str) -> bytes:
        body, _ = await self._get(url)
        return body

    async def fetch_text(self, url: str) -> str:
        body, encoding = await self._get(url)
        try:
            return body.decode(encoding, errors="replace")
        except LookupError:
            return body.decode("utf-8", errors="replace")
