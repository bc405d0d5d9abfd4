"""
View cache and navigation primitives.

Mutations never render anything themselves.  Instead they tell two
collaborators what happened:

* ``ViewCache`` keeps the last payload computed for a logical view
  (keyed by its path, e.g. ``/dashboard/invoices``).  ``invalidate``
  marks the entry stale so the next read recomputes it.
* ``Navigator`` ends the current request with a redirect by raising
  ``RedirectRequired``.  The application registers an exception handler
  that turns it into a ``303 See Other`` response.

Both are plain objects so services can receive test doubles instead.
"""

import logging
import threading
from typing import Any, Callable, Dict, NoReturn, Optional


logger = logging.getLogger(__name__)


class RedirectRequired(Exception):
    """Control‑flow signal: stop handling the request and redirect to ``url``."""

    def __init__(self, url: str) -> None:
        super().__init__(url)
        self.url = url


class ViewCache:
    """In‑process cache of computed views keyed by path."""

    def __init__(self) -> None:
        self._entries: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get_or_compute(self, path: str, compute: Callable[[], Any]) -> Any:
        """Return the cached payload for ``path``, computing it on a miss."""
        with self._lock:
            if path in self._entries:
                return self._entries[path]
        value = compute()
        with self._lock:
            self._entries[path] = value
        return value

    def get(self, path: str) -> Optional[Any]:
        with self._lock:
            return self._entries.get(path)

    def invalidate(self, path: str) -> None:
        """Mark the view at ``path`` as stale."""
        logger.debug("Invalidating view %s", path)
        with self._lock:
            self._entries.pop(path, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


class Navigator:
    """Issues redirects by raising ``RedirectRequired``."""

    def redirect(self, url: str) -> NoReturn:
        raise RedirectRequired(url)


# Shared instances used by the HTTP layer.
view_cache = ViewCache()
navigator = Navigator()
