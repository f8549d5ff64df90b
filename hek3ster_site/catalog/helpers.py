"""Utility helpers shared by the content catalog builders."""

from __future__ import annotations

import typing as typ

from .models import CatalogError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _literal_block(value: object | None) -> str | None:
    """Return multi-line text verbatim apart from the trailing newline."""
    if value is None:
        return None
    text = str(value).rstrip("\n")
    if not text.strip():
        return None
    return text


def _mapping_entries(entries: object | None) -> list[typ.Mapping[str, typ.Any]]:
    """Return the mapping items of a YAML list, skipping anything else."""
    match entries:
        case list() as items:
            return [item for item in items if isinstance(item, dict)]
        case _:
            return []


def _string_entries(entries: object | None) -> tuple[str, ...]:
    """Return the non-empty strings of a YAML list as a tuple."""
    match entries:
        case list() as items:
            pass
        case _:
            return ()
    normalized: list[str] = []
    for item in items:
        text = _optional_str(item)
        if text:
            normalized.append(text)
    return tuple(normalized)


def _as_mapping(payload: object | None, *, context: str) -> typ.Mapping[str, typ.Any]:
    """Return ``payload`` when it is a mapping, else raise ``CatalogError``."""
    match payload:
        case dict() as data:
            return data
        case _:
            msg = f"{context} must be a mapping."
            raise CatalogError(msg)


def _section_mapping(payload: object | None) -> typ.Mapping[str, typ.Any]:
    """Return a section payload as a mapping; anything else is an empty section."""
    match payload:
        case dict() as data:
            return data
        case _:
            return {}


def _as_count(value: object | None, *, default: int) -> int:
    """Parse a non-negative integer count, falling back to ``default``."""
    if value is None or isinstance(value, bool):
        return default
    try:
        count = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return count if count >= 0 else default


__all__ = [
    "_as_count",
    "_as_mapping",
    "_literal_block",
    "_mapping_entries",
    "_optional_str",
    "_section_mapping",
    "_string_entries",
]
