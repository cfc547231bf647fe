import threading
import time
from collections import OrderedDict
from typing import Callable, List
from content_review.config import settings


class RateLimiter:
    """
    Sliding-window rate limiter keyed by client address.
    State lives in this process only: behind several workers each one enforces its own window.
    Use a shared store (e.g. Redis) if a global limit is ever required.
    The limit is best-effort once max_identifiers active clients are tracked: the least
    recently seen one is evicted and starts over with a fresh quota.
    """
    def __init__(
        self,
        limit: int = 15,
        window_seconds: float = 60,
        max_identifiers: int = 10000,
        prune_interval: float = 300,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.limit = limit
        self.window_seconds = window_seconds
        self.max_identifiers = max_identifiers
        self.prune_interval = prune_interval
        self._clock = clock
        # identifier -> admission timestamps, least recently seen first
        self._store: "OrderedDict[str, List[float]]" = OrderedDict()
        self._lock = threading.Lock()
        self._last_prune = clock()

    def _recent(self, identifier: str, now: float) -> List[float]:
        return [t for t in self._store.get(identifier, []) if now - t < self.window_seconds]

    def is_allowed(self, identifier: str) -> bool:
        """Returns True and records the request if the identifier is under its limit."""
        with self._lock:
            now = self._clock()
            if now - self._last_prune >= self.prune_interval:
                self._prune_locked(now)

            recent = self._recent(identifier, now)
            if len(recent) >= self.limit:
                return False

            recent.append(now)
            self._store[identifier] = recent
            self._store.move_to_end(identifier)

            if len(self._store) > self.max_identifiers:
                self._prune_locked(now)
            # Still full of active clients: evict the least recently seen
            while len(self._store) > self.max_identifiers:
                self._store.popitem(last=False)
            return True

    def remaining(self, identifier: str) -> int:
        """How many more requests the identifier may make in the current window."""
        with self._lock:
            return max(0, self.limit - len(self._recent(identifier, self._clock())))

    def prune(self) -> int:
        """Drops identifiers with no requests inside the window. Returns how many were dropped."""
        with self._lock:
            return self._prune_locked(self._clock())

    def _prune_locked(self, now: float) -> int:
        stale = [key for key, stamps in self._store.items()
                 if not stamps or now - stamps[-1] >= self.window_seconds]
        for key in stale:
            del self._store[key]
        self._last_prune = now
        return len(stale)

    def reset(self) -> None:
        with self._lock:
            self._store.clear()
            self._last_prune = self._clock()

    def __len__(self) -> int:
        return len(self._store)


rate_limiter = RateLimiter(
    limit=settings.RATE_LIMIT_REQUESTS,
    window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
    max_identifiers=settings.RATE_LIMIT_MAX_CLIENTS,
    prune_interval=settings.RATE_LIMIT_PRUNE_INTERVAL_SECONDS,
)
