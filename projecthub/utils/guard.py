"""Client-side guard against submitting the same create twice.

A fingerprint moves through ``absent -> in flight -> grace period -> absent``.
While it is in flight or in its grace period any identical submission is
dropped. The grace period ends through a ``sched`` event driven by the
guard's own clock, so tests can advance a fake clock and call
``run_pending()`` instead of sleeping.
"""

import hashlib
import logging
import sched
import threading
import time
from contextlib import contextmanager
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Set

logger = logging.getLogger(__name__)


def make_fingerprint(fields: Mapping[str, Any], instant: Any) -> str:
    """Stable key for one logical submission: field values plus the instant it was made."""
    parts = [f"{key}={fields[key]!s}" for key in sorted(fields)]
    parts.append(f"@{instant!s}")
    return hashlib.sha256("\x1f".join(parts).encode("utf-8")).hexdigest()


class SubmissionGuard:
    def __init__(self, grace_period: float = 1.0, clock: Callable[[], float] = time.monotonic):
        self.grace_period = grace_period
        self._scheduler = sched.scheduler(clock, time.sleep)
        self._in_flight: Set[str] = set()
        self._grace: Dict[str, sched.Event] = {}
        # acquire/release run on request threads; the check-then-add must be atomic
        self._lock = threading.Lock()

    def __contains__(self, fingerprint: str) -> bool:
        self.run_pending()
        return fingerprint in self._in_flight or fingerprint in self._grace

    def __len__(self) -> int:
        self.run_pending()
        return len(self._in_flight) + len(self._grace)

    def acquire(self, fingerprint: str) -> bool:
        """Mark ``fingerprint`` in flight; False if it is already tracked."""
        with self._lock:
            if fingerprint in self:
                logger.debug("Dropping duplicate submission %s", fingerprint[:12])
                return False
            self._in_flight.add(fingerprint)
            return True

    def release(self, fingerprint: str) -> None:
        """Move an in-flight fingerprint into its grace period."""
        with self._lock:
            if fingerprint not in self._in_flight:
                return
            self._in_flight.discard(fingerprint)
            self._grace[fingerprint] = self._scheduler.enter(
                self.grace_period, 0, self._expire, (fingerprint,)
            )

    def _expire(self, fingerprint: str) -> None:
        self._grace.pop(fingerprint, None)

    def run_pending(self) -> None:
        self._scheduler.run(blocking=False)

    def flush(self) -> None:
        """End every grace period now."""
        for event in list(self._grace.values()):
            self._cancel(event)
        self._grace.clear()

    def close(self) -> None:
        self.flush()
        self._in_flight.clear()

    def _cancel(self, event: sched.Event) -> None:
        try:
            self._scheduler.cancel(event)
        except ValueError:
            # already ran
            pass

    @contextmanager
    def claim(self, fingerprint: str):
        """Yield True if this submission may go ahead, False if it is a duplicate."""
        acquired = self.acquire(fingerprint)
        try:
            yield acquired
        finally:
            if acquired:
                self.release(fingerprint)


async def submit_once(
    guard: SubmissionGuard,
    fingerprint: str,
    operation: Callable[[], Awaitable[Any]],
) -> Optional[Any]:
    """Await ``operation()`` unless ``fingerprint`` is already tracked.

    Duplicates resolve to None without raising. Failures of the operation
    propagate, and the grace period starts either way.
    """
    with guard.claim(fingerprint) as acquired:
        if not acquired:
            return None
        return await operation()
