"""Record id and timestamp helpers."""

import time
import uuid
from datetime import datetime, timezone


def generate_id(prefix: str) -> str:
    """Time-based id with a random suffix, e.g. ``denial_1705312200000_4f1c2a9b0``.

    Uniqueness is best effort only.
    """
    return f"{prefix}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
