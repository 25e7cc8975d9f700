import secrets
import string
import time
from datetime import datetime, timedelta, timezone
from threading import Lock

_ALPHABET = string.digits + string.ascii_lowercase

_last_issued = None
_lock = Lock()


def new_id(prefix: str) -> str:
    """Return an id like ``task_1705312800000_k3j9x0a2b``.

    Uniqueness is not guaranteed; callers that keep an index should retry on
    a clash.
    """
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(9))
    return f"{prefix}_{millis}_{suffix}"


def now() -> str:
    """Current UTC instant as ISO-8601 text, strictly increasing per process."""
    global _last_issued
    with _lock:
        current = datetime.now(timezone.utc)
        if _last_issued is not None and current <= _last_issued:
            current = _last_issued + timedelta(microseconds=1)
        _last_issued = current
    return current.isoformat(timespec="microseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    # fromisoformat only learned the "Z" suffix in 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
