"""Verify that configured sidebar entries point at real content.

The renderer builds its sidebar from explicit ``link`` entries and
``autogenerate`` directories. Both are plain strings in the configuration, so
a renamed slug silently leaves a dangling entry. :func:`check_sidebar` walks
the declared tree and reports every reference that no longer resolves.
"""

from __future__ import annotations

import typing as typ

from .models import UnknownSlugError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import SidebarEntry
    from .models import DocumentCollection


def unresolved_references(
    entries: cabc.Iterable[SidebarEntry], collection: DocumentCollection
) -> list[tuple[str, str]]:
    """Return ``(label, target)`` pairs for links and directories that do not resolve."""
    slugs = collection.slugs()
    prefixes = collection.prefixes()
    missing: list[tuple[str, str]] = []
    for entry in entries:
        if entry.link is not None and _normalize(entry.link) not in slugs:
            missing.append((entry.label, entry.link))
        if entry.directory is not None and not _has_directory(
            _normalize(entry.directory), prefixes
        ):
            missing.append((entry.label, entry.directory))
        missing.extend(unresolved_references(entry.items, collection))
    return missing


def check_sidebar(
    entries: cabc.Iterable[SidebarEntry], collection: DocumentCollection
) -> None:
    """Raise :class:`UnknownSlugError` when any sidebar reference dangles."""
    missing = unresolved_references(entries, collection)
    if missing:
        raise UnknownSlugError(missing)


def _normalize(target: str) -> str:
    return target.strip().strip("/")


def _has_directory(directory: str, prefixes: cabc.Iterable[str]) -> bool:
    return any(
        prefix == directory or prefix.startswith(f"{directory}/") for prefix in prefixes
    )


__all__ = ["check_sidebar", "unresolved_references"]
