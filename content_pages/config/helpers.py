"""Utility helpers shared by the content configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from content_pages.collection import NEAR_DUPLICATE_POLICIES

from .models import DEFAULT_EXTENSIONS, ContentConfigError, SidebarEntry


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(value: object | None, *, base: Path, default: Path) -> Path:
    """Resolve ``value`` against ``base`` when it is a relative path."""
    text = _optional_str(value)
    path = Path(text) if text else default
    if path.is_absolute():
        return path
    return base / path


def _normalize_extensions(value: str | list[object] | None) -> tuple[str, ...]:
    """Normalize extension definitions into lowercase dotted suffixes."""
    if value is None:
        return DEFAULT_EXTENSIONS
    raw = value.split() if isinstance(value, str) else value
    if not isinstance(raw, list):
        msg = "'content.extensions' must be a list of file suffixes."
        raise ContentConfigError(msg)
    normalized: list[str] = []
    for segment in raw:
        text = str(segment).strip().lower()
        if not text:
            continue
        suffix = text if text.startswith(".") else f".{text}"
        if suffix not in normalized:
            normalized.append(suffix)
    if not normalized:
        msg = "'content.extensions' must name at least one file suffix."
        raise ContentConfigError(msg)
    return tuple(normalized)


def _parse_workers(value: object | None) -> int:
    """Return a positive worker count, defaulting to a single worker."""
    if value is None:
        return 1
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"'content.workers' must be a positive integer, got {value!r}."
        raise ContentConfigError(msg)
    return value


def _parse_policy(value: object | None) -> str:
    """Validate the near-duplicate slug policy."""
    policy = _optional_str(value) or "error"
    if policy not in NEAR_DUPLICATE_POLICIES:
        expected = ", ".join(NEAR_DUPLICATE_POLICIES)
        msg = f"'content.near_duplicates' must be one of: {expected}; got {policy!r}."
        raise ContentConfigError(msg)
    return policy


def _build_sidebar(payload: object | None, *, path: str = "sidebar") -> list[SidebarEntry]:
    """Build sidebar entries from the YAML list, recursing into ``items``."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        msg = f"'{path}' must be a list of entries."
        raise ContentConfigError(msg)
    return [
        _build_sidebar_entry(item, path=f"{path}[{index}]")
        for index, item in enumerate(payload)
    ]


def _build_sidebar_entry(payload: object, *, path: str) -> SidebarEntry:
    if not isinstance(payload, dict):
        msg = f"'{path}' must be a mapping."
        raise ContentConfigError(msg)
    entry: typ.Mapping[str, typ.Any] = payload
    label = _optional_str(entry.get("label"))
    if not label:
        msg = f"'{path}' is missing 'label'."
        raise ContentConfigError(msg)

    autogenerate = entry.get("autogenerate")
    directory = None
    if autogenerate is not None:
        if not isinstance(autogenerate, dict):
            msg = f"'{path}.autogenerate' must be a mapping."
            raise ContentConfigError(msg)
        directory = _optional_str(autogenerate.get("directory"))

    link = _optional_str(entry.get("link"))
    items = _build_sidebar(entry.get("items"), path=f"{path}.items")
    if not (link or directory or items):
        msg = f"Sidebar entry '{label}' needs 'link', 'autogenerate.directory' or 'items'."
        raise ContentConfigError(msg)

    return SidebarEntry(
        label=label,
        link=link,
        directory=directory,
        items=items,
        collapsed=bool(entry.get("collapsed", False)),
    )


__all__ = [
    "_build_sidebar",
    "_normalize_extensions",
    "_optional_str",
    "_parse_policy",
    "_parse_workers",
    "_resolve_path",
]
