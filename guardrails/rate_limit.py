"""
Rate Limiting Guardrail

Fixed-window request counter per client identity.

Rules:
- 10 requests per 60 second window per identity
- Window resets on the first request after it elapses
- Rejected requests do not increment the counter
- Boundary bursts (up to 2x limit across a window edge) are accepted

Identity comes from X-Forwarded-For. Callers without that header all
share the UNKNOWN_IDENTITY bucket, i.e. one global limit for
unidentified callers.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


WINDOW_MS = 60_000
MAX_REQUESTS = 10
UNKNOWN_IDENTITY = "unknown"
FORWARDED_FOR_HEADER = "x-forwarded-for"


class RateLimitExceeded(Exception):
    """Identity has used up its requests for the current window."""

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__("Rate limit exceeded")


@dataclass
class RateLimitRecord:
    """Counter state for one identity."""

    count: int
    window_reset_at: float  # epoch milliseconds


class RateLimiter:
    """
    In-memory fixed-window rate limiter.

    Owned by the application instance; the lock makes it safe to call
    from the event loop and from threadpool workers alike.
    """

    def __init__(
        self,
        max_requests: int = MAX_REQUESTS,
        window_ms: int = WINDOW_MS,
        clock: Optional[Callable[[], float]] = None,
        prune_threshold: int = 1024,
    ):
        """
        Args:
            max_requests: Requests allowed per window
            window_ms: Window length in milliseconds
            clock: Returns current time in epoch milliseconds
            prune_threshold: Map size that triggers an eviction sweep
        """
        self.max_requests = max_requests
        self.window_ms = window_ms
        self.prune_threshold = prune_threshold
        self._clock = clock or (lambda: time.time() * 1000)
        self._records: Dict[str, RateLimitRecord] = {}
        self._lock = threading.Lock()

    def allow(self, identity: str) -> bool:
        """
        Count a request for identity.

        Returns:
            True if the request is allowed, False if rejected
        """
        with self._lock:
            now = self._clock()

            if len(self._records) >= self.prune_threshold:
                self._prune_locked(now)

            record = self._records.get(identity)

            if record is None or now > record.window_reset_at:
                self._records[identity] = RateLimitRecord(
                    count=1,
                    window_reset_at=now + self.window_ms,
                )
                return True

            if record.count >= self.max_requests:
                return False

            record.count += 1
            return True

    def check(self, identity: str) -> None:
        """Like allow(), but raises RateLimitExceeded on rejection."""
        if not self.allow(identity):
            logger.warning(
                "Rate limit exceeded",
                extra={"identity": identity, "limit": self.max_requests},
            )
            raise RateLimitExceeded(identity)

    def get_record(self, identity: str) -> Optional[RateLimitRecord]:
        """Snapshot of the record for identity (None if unseen)."""
        with self._lock:
            record = self._records.get(identity)
            if record is None:
                return None
            return RateLimitRecord(record.count, record.window_reset_at)

    def prune_expired(self) -> int:
        """Drop records whose window has elapsed. Returns number removed."""
        with self._lock:
            return self._prune_locked(self._clock())

    def _prune_locked(self, now: float) -> int:
        expired = [
            identity
            for identity, record in self._records.items()
            if now > record.window_reset_at
        ]
        for identity in expired:
            del self._records[identity]
        if expired:
            logger.debug(f"Pruned {len(expired)} expired rate limit records")
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def client_identity(headers: Mapping[str, str]) -> str:
    """
    Derive the rate-limit identity from request headers.

    Uses the first X-Forwarded-For entry; falls back to UNKNOWN_IDENTITY.
    """
    forwarded = headers.get(FORWARDED_FOR_HEADER) or ""
    first = forwarded.split(",")[0].strip()
    return first or UNKNOWN_IDENTITY
