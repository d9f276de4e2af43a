"""Process-global session id, stamped into every log line."""

from __future__ import annotations

import os
import threading
import uuid

# Module-level state: one session ID for the entire program lifetime.
# None means "not yet generated".
_session_id: str | None = None

_session_lock = threading.Lock()


# region seed_session_id
def seed_session_id(value: str) -> None:
    """
    Seed the process-global session ID before it is generated.

    Has no effect if the session ID is already set.
    Useful for testing or controlled initialization.

    Args:
        value: The session ID to set (should be short and unique, e.g., 8 hex chars).
    """
    global _session_id

    with _session_lock:
        if _session_id is None:
            _session_id = value


# endregion


# region get_session_id
def get_session_id() -> str:
    """
    Return the process-global session ID, generating it if necessary.

    Resolution order:
    1. Already-seeded value (via `seed_session_id()`).
    2. Environment variable `SLIDEHEADERS_SESSION_ID`, so tests and
       external tooling can correlate log lines with a known id.
    3. Fresh random 8-character hex string.

    Returns:
        str: The session ID for this process.
    """
    global _session_id

    # Fast path without the lock; re-check inside it.
    if _session_id is None:
        with _session_lock:
            if _session_id is None:
                _session_id = (
                    os.environ.get("SLIDEHEADERS_SESSION_ID") or uuid.uuid4().hex[:8]
                )
    return _session_id


# endregion


# region reset_session_id
def reset_session_id() -> None:
    """Forget the current session ID so the next call generates a new one (primarily for testing)."""
    global _session_id
    with _session_lock:
        _session_id = None


# endregion
