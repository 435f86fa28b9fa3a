from __future__ import annotations

from typing import Callable, Any, Optional

from flask_caching import Cache


class CacheFacade:
    """Thin wrapper over Flask-Caching to make caching injectable and optional.

    When no cache is provided, `cached` is a no-op and returns the wrapped view.
    """

    def __init__(self, cache: Optional[Cache], timeout_seconds: int) -> None:
        self.cache = cache
        self.timeout_seconds = timeout_seconds

    def cached(self, timeout: Optional[int] = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Response cache for Flask views keyed by path and query string."""
        if self.cache is None:
            return lambda fn: fn
        return self.cache.cached(
            timeout=self.timeout_seconds if timeout is None else timeout,
            query_string=True,
        )
