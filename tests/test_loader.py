"""Tests for content discovery, batch validation and sidebar references.

A temporary ``src/content/docs`` tree is written with the ``write_page``
fixture from ``conftest.py``; the tests then run
:func:`content_pages.loader.load_collection` end to end and check that a
batch fails closed, that parallel parsing matches sequential parsing, and that
configured sidebar entries must resolve to real slugs or groups.
"""

from __future__ import annotations

import typing as typ

import pytest

from content_pages.config import ContentSettings, ProjectConfig, SidebarEntry
from content_pages.loader import (
    ContentRootError,
    discover_content,
    load_collection,
    parse_batch,
)
from content_pages.models import (
    ContentBatchError,
    DuplicateSlugError,
    InvalidOrderError,
    MalformedHeaderError,
    MissingFieldError,
    UnknownSlugError,
)
from content_pages.sidebar import check_sidebar, unresolved_references

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .conftest import PageWriter


@pytest.fixture
def basics_tree(write_page: PageWriter) -> None:
    """Write a small multi-section content tree."""
    write_page(
        "guides/basics/git-basic-commands.md",
        title="Git Basic Commands",
        slug="guides/basics/git-basic-commands",
        order=2,
    )
    write_page(
        "guides/basics/shell-commands.md",
        title="Shell Commands",
        slug="guides/basics/shell-commands",
        order=0,
    )
    write_page(
        "guides/basics/key-board-symbols.mdx",
        title="Keyboard Symbols",
        slug="guides/basics/key-board-symbols-with-names",
        order=1,
    )
    write_page(
        "guides/spring-boot/spring-data-jpa.md",
        title="Spring Data JPA",
        slug="guides/spring-boot/spring-data-jpa",
    )
    write_page("guides/courses.md", title="Courses", slug="guides/courses")


def _config(root: Path, **overrides: typ.Any) -> ProjectConfig:
    sidebar = overrides.pop("sidebar", [])
    return ProjectConfig(content=ContentSettings(root=root, **overrides), sidebar=sidebar)


@pytest.mark.usefixtures("basics_tree")
def test_discover_filters_and_sorts(content_root: Path) -> None:
    (content_root / "guides" / "notes.txt").write_text("ignored", encoding="utf-8")
    found = discover_content(content_root, (".md", ".mdx"))
    relative = [path.relative_to(content_root).as_posix() for path in found]
    assert relative == [
        "guides/basics/git-basic-commands.md",
        "guides/basics/key-board-symbols.mdx",
        "guides/basics/shell-commands.md",
        "guides/courses.md",
        "guides/spring-boot/spring-data-jpa.md",
    ]


def test_discover_requires_existing_root(tmp_path: Path) -> None:
    with pytest.raises(ContentRootError):
        discover_content(tmp_path / "missing", (".md",))


@pytest.mark.usefixtures("basics_tree")
def test_load_collection_groups_and_orders(content_root: Path) -> None:
    collection = load_collection(_config(content_root))
    assert collection.prefixes() == ["guides", "guides/basics", "guides/spring-boot"]
    assert collection.group("guides/basics").slugs() == [
        "guides/basics/shell-commands",
        "guides/basics/key-board-symbols-with-names",
        "guides/basics/git-basic-commands",
    ]
    doc = collection.get("guides/courses")
    assert doc.source == content_root / "guides" / "courses.md"


@pytest.mark.usefixtures("basics_tree")
def test_parallel_parsing_matches_sequential(content_root: Path) -> None:
    sequential = load_collection(_config(content_root))
    parallel = load_collection(_config(content_root, workers=4))
    assert parallel == sequential


def test_batch_reports_every_failure(content_root: Path, write_page: PageWriter) -> None:
    write_page("a.md", title="A", slug="a", description=None)
    write_page("b.md", title="B", slug="b")
    (content_root / "c.md").write_text("no front-matter here\n", encoding="utf-8")
    (content_root / "d.md").write_text(
        "---\ntitle: D\nslug: d\ndescription: d\nsidebar:\n  order: -3\n---\n",
        encoding="utf-8",
    )

    with pytest.raises(ContentBatchError) as excinfo:
        load_collection(_config(content_root))

    errors = excinfo.value.errors
    assert [type(error) for error in errors] == [
        MissingFieldError,
        MalformedHeaderError,
        InvalidOrderError,
    ]
    assert errors[0].source == content_root / "a.md"
    assert str(excinfo.value) == "3 documents failed validation"


def test_parse_batch_with_workers_keeps_input_order(
    content_root: Path, write_page: PageWriter
) -> None:
    paths = [
        write_page(f"p{index}.md", title=f"P{index}", slug=f"p{index}")
        for index in range(6)
    ]
    docs = parse_batch(paths, workers=3)
    assert [doc.slug for doc in docs] == [f"p{index}" for index in range(6)]


def test_duplicate_slugs_across_files_fail(
    content_root: Path, write_page: PageWriter
) -> None:
    write_page(
        "guides/basics/symbols.md",
        title="Keyboard Symbols",
        slug="guides/basics/key-board-symbols-with-names",
    )
    write_page(
        "guides/basics/symbols-with-names.md",
        title="Keyboard Symbols with Names",
        slug="guides/basics/key-board-symbols-with-names",
    )
    with pytest.raises(DuplicateSlugError) as excinfo:
        load_collection(_config(content_root))
    assert excinfo.value.sources == (
        str(content_root / "guides/basics/symbols-with-names.md"),
        str(content_root / "guides/basics/symbols.md"),
    )


def test_near_duplicate_policy_from_settings(
    content_root: Path, write_page: PageWriter
) -> None:
    write_page("one.md", title="One", slug="guides/basics/names")
    write_page("two.md", title="Two", slug="guides/basics/names.")
    with pytest.raises(DuplicateSlugError):
        load_collection(_config(content_root))
    collection = load_collection(_config(content_root, near_duplicates="allow"))
    assert len(collection) == 2


@pytest.mark.usefixtures("basics_tree")
def test_sidebar_references_resolve(content_root: Path) -> None:
    sidebar = [
        SidebarEntry(label="Courses", link="/guides/courses/"),
        SidebarEntry(label="Basics", directory="guides/basics", collapsed=True),
        SidebarEntry(label="Guides", directory="guides"),
        SidebarEntry(
            label="Java",
            items=[SidebarEntry(label="Spring", directory="guides/spring-boot")],
        ),
    ]
    collection = load_collection(_config(content_root, sidebar=sidebar))
    assert len(collection) == 5


@pytest.mark.usefixtures("basics_tree")
def test_sidebar_reports_dangling_entries(content_root: Path) -> None:
    sidebar = [
        SidebarEntry(label="Courses", link="guides/courses"),
        SidebarEntry(
            label="React",
            items=[
                SidebarEntry(label="Intro", link="guides/react/react-introduction"),
                SidebarEntry(label="Hooks", directory="guides/react/hooks"),
            ],
        ),
        SidebarEntry(label="Partial", directory="guides/bas"),
    ]
    with pytest.raises(UnknownSlugError) as excinfo:
        load_collection(_config(content_root, sidebar=sidebar))
    assert excinfo.value.references == (
        ("Intro", "guides/react/react-introduction"),
        ("Hooks", "guides/react/hooks"),
        ("Partial", "guides/bas"),
    )


@pytest.mark.usefixtures("basics_tree")
def test_check_sidebar_accepts_empty_tree(content_root: Path) -> None:
    collection = load_collection(_config(content_root))
    check_sidebar([], collection)
    assert unresolved_references([], collection) == []
