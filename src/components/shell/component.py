"""
Shell component - Single-page application root document for humans.

ShellCache is a single-entry cache owned by the serving process: return the
cached document if present (and fresh, when a TTL is set); otherwise fetch,
store and return it.

Invariants:
- At most one document is held
- No locking: concurrent first requests may both fetch and both store;
  the stored value is the same either way
- Fetch failures propagate and leave the cache untouched
"""

from __future__ import annotations

import logging

from src.ports.clock import ClockPort

from .models import CachedShell, ShellConfig
from .ports import ShellFetcherPort

logger = logging.getLogger(__name__)


class ShellCache:
    """Best-effort in-memory cache of the SPA shell."""

    def __init__(
        self,
        fetcher: ShellFetcherPort,
        clock: ClockPort,
        config: ShellConfig | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._clock = clock
        self._config = config or ShellConfig()
        self._entry: CachedShell | None = None

    def shell_url(self, origin: str) -> str:
        base = (self._config.origin_override or origin).rstrip("/")
        return f"{base}{self._config.path}"

    def _is_fresh(self, entry: CachedShell) -> bool:
        if self._config.ttl_seconds is None:
            return True
        return self._clock.monotonic() - entry.fetched_at < self._config.ttl_seconds

    async def get(self, origin: str) -> str:
        """
        Return the SPA shell document.

        Raises:
            FetchError: If the document is not cached and cannot be fetched.
        """
        entry = self._entry
        if entry is not None and self._is_fresh(entry):
            return entry.html

        url = self.shell_url(origin)
        html = await self._fetcher.fetch_text(url)
        self._entry = CachedShell(html=html, source_url=url, fetched_at=self._clock.monotonic())
        logger.info("Cached SPA shell from %s (%d bytes)", url, len(html))
        return html

    def clear(self) -> None:
        self._entry = None

    @property
    def cached(self) -> CachedShell | None:
        return self._entry
