"""Common error types and helpers for API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping


@dataclass(slots=True)
class AppError(Exception):
    """Base application error with a JSON friendly payload."""

    message: str
    code: str = "error"
    status_code: int = 400
    details: Mapping[str, Any] | list[Any] | None = None

    @classmethod
    def from_exception(cls, exc: Exception, *, code: str, **kwargs: Any) -> "AppError":
        """Wrap ``exc`` keeping its message and any ``details`` it carries."""

        details = kwargs.pop("details", None)
        if details is None:
            details = getattr(exc, "details", None)
        return cls(message=str(exc), code=code, details=details, **kwargs)

    def to_dict(self) -> Mapping[str, Any]:
        details: Any = self.details or {}
        payload: MutableMapping[str, Any] = {
            "code": self.code,
            "message": self.message,
            "details": list(details) if isinstance(details, list) else dict(details),
        }
        return payload


@dataclass(slots=True)
class ValidationAppError(AppError):
    """Error raised for invalid user input."""

    code: str = "validation_error"
    status_code: int = 400


@dataclass(slots=True)
class NotFoundAppError(AppError):
    """Error raised when a resource is missing."""

    code: str = "not_found"
    status_code: int = 404


@dataclass(slots=True)
class InternalAppError(AppError):
    """Generic internal error wrapper to avoid leaking implementation details."""

    code: str = "internal_error"
    status_code: int = 500


def ensure_app_error(error: AppError | Exception, *, fallback_code: str) -> AppError:
    """Coerce arbitrary exceptions into :class:`AppError` instances."""

    if isinstance(error, AppError):
        return error
    return InternalAppError(code=fallback_code, message="Internal server error")


__all__ = [
    "AppError",
    "ValidationAppError",
    "NotFoundAppError",
    "InternalAppError",
    "ensure_app_error",
]
