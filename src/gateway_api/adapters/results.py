"""Outcome type shared by the vendor adapters."""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class AdapterResult(Generic[T]):
    """Either a value returned by a vendor or the message of the error it raised."""
    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "AdapterResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, message: str) -> "AdapterResult[T]":
        return cls(ok=False, error=message)


def error_message(exc: Exception) -> str:
    """Best human readable message for a vendor exception."""
    reason = getattr(exc, "reason", None)
    if isinstance(reason, str) and reason:
        return reason
    return str(exc) or exc.__class__.__name__
