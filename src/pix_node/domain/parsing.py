"""Helpers that turn raw input values into typed form values."""

from datetime import datetime


def split_csv(raw: object, *, lower: bool = False) -> list[str]:
    """Parse a comma-separated input into trimmed, non-empty entries.

    Lists are accepted as already split. Duplicates keep their first
    position.
    """
    if raw is None:
        return []
    chunks = raw if isinstance(raw, list | tuple) else str(raw).split(",")
    entries: list[str] = []
    for chunk in chunks:
        value = str(chunk).strip()
        if lower:
            value = value.lower()
        if value and value not in entries:
            entries.append(value)
    return entries


def join_csv(entries: list[str] | None) -> str:
    """Render a list as the comma-separated text shown in an input."""
    return ", ".join(entries or [])


def parse_number(raw: object) -> float | int | str | None:
    """Coerce numeric input.

    Blank input becomes None; unparseable text is returned unchanged so a
    numeric rule can reject it.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        return raw
    cleaned = str(raw).strip()
    if not cleaned:
        return None
    try:
        number = float(cleaned)
    except ValueError:
        return cleaned
    if number != number:  # NaN
        return cleaned
    return int(number) if number.is_integer() else number


def parse_optional_number(raw: object) -> float | int | None:
    """Coerce numeric input, treating anything non-numeric as absent."""
    value = parse_number(raw)
    return value if isinstance(value, int | float) else None


def parse_bool(raw: object, *, default: bool) -> bool:
    """Coerce checkbox-style input."""
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    cleaned = str(raw).strip().lower()
    if not cleaned:
        return default
    return cleaned in {"1", "true", "on", "yes"}


def parse_date(raw: object, fallback: datetime) -> datetime:
    """Coerce a date input (ISO text or datetime), defaulting to ``fallback``."""
    if isinstance(raw, datetime):
        return raw
    if raw is None or not str(raw).strip():
        return fallback
    try:
        return datetime.fromisoformat(str(raw).strip())
    except ValueError:
        return fallback


def text(raw: object) -> str:
    """Coerce text input, mapping None to an empty string."""
    if raw is None:
        return ""
    return str(raw)
