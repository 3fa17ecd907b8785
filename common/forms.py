"""Query-string and form value parsing helpers shared across plugins."""

from __future__ import annotations

from typing import Any, Mapping

from .validation import ValidationError

FormDataLike = Mapping[str, Any] | Any


def _lookup(data: FormDataLike, key: str) -> Any:
    if data is None:
        return None
    getter = getattr(data, "get", None)
    if callable(getter):
        return getter(key)
    return None


def get_str(data: FormDataLike, key: str, default: str | None = None) -> str | None:
    raw = _lookup(data, key)
    if raw is None:
        return default
    text = str(raw).strip()
    return text or default


def get_float(
    data: FormDataLike,
    key: str,
    default: float | None,
    *,
    field_name: str | None = None,
    minimum: float | None = None,
) -> float | None:
    """Extract a float from *data*.

    Missing or blank values fall back to ``default``; ``minimum`` is inclusive.
    """

    field_label = field_name or key
    raw = _lookup(data, key)
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        value = default
    else:
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid value for {field_label}") from exc

    if value is not None and minimum is not None and value < minimum:
        raise ValidationError(f"{field_label} must be ≥ {minimum}")
    return value


def get_bool(
    data: FormDataLike,
    key: str,
    default: bool = False,
    *,
    truthy: tuple[str, ...] = ("1", "true", "on", "yes"),
) -> bool:
    """Extract a boolean flag from *data*."""

    raw = _lookup(data, key)
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return bool(raw)
    if isinstance(raw, str):
        return raw.strip().lower() in truthy
    return default


__all__ = ["get_str", "get_float", "get_bool"]
