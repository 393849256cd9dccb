"""Shared fixtures for content validation tests.

The ``write_page`` fixture writes a documentation page with a front-matter
block into a temporary content tree so loader, CLI and behaviour tests can
build realistic collections without repeating YAML boilerplate.
"""

from __future__ import annotations

import typing as typ

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path


class PageWriter(typ.Protocol):
    """Callable that writes one page below a content root."""

    def __call__(
        self,
        relative: str,
        *,
        title: str,
        slug: str,
        description: str | None = ...,
        order: int | None = ...,
        body: str = ...,
    ) -> Path: ...


def render_page(
    *,
    title: str,
    slug: str,
    description: str | None = None,
    order: int | None = None,
    body: str = "",
) -> str:
    """Return page text with a front-matter block for the given fields."""
    lines = ["---", f"title: {title}", f"slug: {slug}"]
    if description is not None:
        lines.append(f"description: {description}")
    if order is not None:
        lines.extend(["sidebar:", f"  order: {order}"])
    lines.append("---")
    return "\n".join(lines) + "\n" + body


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Return an empty content directory mirroring the site layout."""
    root = tmp_path / "src" / "content" / "docs"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def write_page(content_root: Path) -> PageWriter:
    """Return a helper writing pages below ``content_root``."""

    def _write(
        relative: str,
        *,
        title: str,
        slug: str,
        description: str | None = "Summary",
        order: int | None = None,
        body: str = "",
    ) -> Path:
        path = content_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            render_page(
                title=title,
                slug=slug,
                description=description,
                order=order,
                body=body,
            ),
            encoding="utf-8",
        )
        return path

    return _write
