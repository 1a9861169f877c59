"""Explicit success/failure result for calls to external collaborators."""

from typing import Any, NamedTuple, Optional


class RemoteResult(NamedTuple):
    """Outcome of a remote call.

    Collaborators never raise for an unavailable backend; they return a
    failed result and the caller decides on the fallback.
    """

    ok: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any = None) -> "RemoteResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "RemoteResult":
        return cls(ok=False, error=error)
