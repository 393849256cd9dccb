"""Typed dataclasses describing the content tooling configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from content_pages.collection import NearDuplicatePolicy  # noqa: TC001 - used for runtime type metadata

DEFAULT_CONTENT_ROOT = Path("src/content/docs")
DEFAULT_EXTENSIONS: tuple[str, ...] = (".md", ".mdx")
DEFAULT_MANIFEST_OUTPUT = Path("public/content-manifest.json")


class ContentConfigError(ValueError):
    """Raised when the content configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SidebarEntry:
    """One sidebar item declared for the external renderer.

    Exactly one of ``link``, ``directory`` or ``items`` carries the target:
    a page slug, an autogenerated group prefix, or nested entries.
    """

    label: str
    link: str | None = None
    directory: str | None = None
    items: list[SidebarEntry] = dc.field(default_factory=list)
    collapsed: bool = False


@dc.dataclass(slots=True)
class ContentSettings:
    """Where content lives and how strictly it is validated."""

    root: Path = DEFAULT_CONTENT_ROOT
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    workers: int = 1
    near_duplicates: NearDuplicatePolicy = "error"


@dc.dataclass(slots=True)
class ProjectConfig:
    """Aggregate configuration loaded from ``content.yaml``."""

    content: ContentSettings = dc.field(default_factory=ContentSettings)
    manifest_output: Path = DEFAULT_MANIFEST_OUTPUT
    sidebar: list[SidebarEntry] = dc.field(default_factory=list)


__all__ = [
    "DEFAULT_CONTENT_ROOT",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_MANIFEST_OUTPUT",
    "ContentConfigError",
    "ContentSettings",
    "ProjectConfig",
    "SidebarEntry",
]
