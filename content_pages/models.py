"""Typed dataclasses and validation errors for documentation content files.

The parser in :mod:`content_pages.frontmatter` produces :class:`ContentDocument`
instances; the checker in :mod:`content_pages.collection` arranges them into a
:class:`DocumentCollection` of :class:`DocumentGroup` entries that the external
site renderer consumes.

Example
-------
>>> doc = ContentDocument(
...     title="Git Basic Commands",
...     slug="guides/basics/git-basic-commands",
...     description="Git Basic Commands",
...     sidebar_order=2,
... )
>>> doc.group
'guides/basics'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def group_prefix(slug: str) -> str:
    """Return the navigation grouping derived from ``slug``.

    >>> group_prefix("guides/basics/git-basic-commands")
    'guides/basics'
    >>> group_prefix("index")
    ''
    """
    head, _, _ = slug.rpartition("/")
    return head


@dc.dataclass(frozen=True, slots=True)
class ContentDocument:
    """One documentation page described by its front-matter.

    Attributes
    ----------
    title : str
        Human-readable page title.
    slug : str
        Unique path identifying the page URL.
    description : str
        Summary shown by the renderer.
    sidebar_order : int or None
        Position among siblings; ``None`` sorts after ordered pages.
    body : str
        Opaque content following the front-matter block.
    source : Path or None
        File the document was read from. Not part of equality.
    """

    title: str
    slug: str
    description: str
    sidebar_order: int | None = None
    body: str = ""
    source: Path | None = dc.field(default=None, compare=False)

    @property
    def group(self) -> str:
        """Slug path prefix used to place the page in the navigation tree."""
        return group_prefix(self.slug)

    @property
    def label(self) -> str:
        """Identify the document in error messages."""
        if self.source is not None:
            return str(self.source)
        return f"{self.title!r} ({self.slug})"


@dc.dataclass(frozen=True, slots=True)
class DocumentGroup:
    """Sibling documents sharing a slug prefix, in navigation order."""

    prefix: str
    documents: tuple[ContentDocument, ...]

    def slugs(self) -> list[str]:
        """Return the slugs of the group in order."""
        return [doc.slug for doc in self.documents]


@dc.dataclass(frozen=True, slots=True)
class DocumentCollection:
    """Validated, grouped and sorted set of documents ready for rendering."""

    groups: tuple[DocumentGroup, ...]

    def __len__(self) -> int:
        """Return the number of documents across all groups."""
        return sum(len(group.documents) for group in self.groups)

    def documents(self) -> list[ContentDocument]:
        """Flatten the collection in group order."""
        return [doc for group in self.groups for doc in group.documents]

    def slugs(self) -> set[str]:
        """Return every slug in the collection."""
        return {doc.slug for doc in self.documents()}

    def prefixes(self) -> list[str]:
        """Return group prefixes in collection order."""
        return [group.prefix for group in self.groups]

    def get(self, slug: str) -> ContentDocument:
        """Return the document published at ``slug``."""
        for doc in self.documents():
            if doc.slug == slug:
                return doc
        msg = f"Unknown slug '{slug}'."
        raise KeyError(msg)

    def group(self, prefix: str) -> DocumentGroup:
        """Return the group stored under ``prefix``."""
        for group in self.groups:
            if group.prefix == prefix:
                return group
        available = ", ".join(repr(p) for p in self.prefixes())
        msg = f"Unknown group '{prefix}'. Known groups: {available}"
        raise KeyError(msg)


class ContentValidationError(ValueError):
    """Base class for authoring mistakes found in content files."""

    def __init__(self, message: str, *, source: Path | str | None = None) -> None:
        self.source = source
        self.reason = message
        text = f"{source}: {message}" if source else message
        super().__init__(text)


class MalformedHeaderError(ContentValidationError):
    """Raised when the front-matter block is missing, unterminated or unparsable."""


class MissingFieldError(ContentValidationError):
    """Raised when a required front-matter field is absent or empty."""

    def __init__(self, field: str, *, source: Path | str | None = None) -> None:
        self.field = field
        super().__init__(f"missing required field '{field}'", source=source)


class InvalidOrderError(ContentValidationError):
    """Raised when ``sidebar.order`` is not a non-negative integer."""

    def __init__(self, value: object, *, source: Path | str | None = None) -> None:
        self.field = "sidebar.order"
        self.value = value
        super().__init__(
            f"'sidebar.order' must be a non-negative integer, got {value!r}",
            source=source,
        )


class InvalidSlugError(ContentValidationError):
    """Raised when a slug is not lowercase ``/``-separated segments."""

    def __init__(self, value: str, *, source: Path | str | None = None) -> None:
        self.field = "slug"
        self.value = value
        super().__init__(
            f"slug {value!r} must be lowercase segments separated by '/'",
            source=source,
        )


class DuplicateSlugError(ContentValidationError):
    """Raised when several documents resolve to the same URL."""

    def __init__(
        self,
        slug: str,
        documents: cabc.Sequence[ContentDocument],
        *,
        near: bool = False,
    ) -> None:
        self.slug = slug
        self.documents = tuple(documents)
        self.near = near
        self.sources = tuple(doc.label for doc in self.documents)
        kind = "near-duplicate slugs" if near else "duplicate slug"
        declared = ", ".join(
            f"{doc.label} ({doc.slug!r})" if near else doc.label
            for doc in self.documents
        )
        super().__init__(f"{kind} '{slug}' declared by {declared}")


class UnknownSlugError(ContentValidationError):
    """Raised when sidebar entries reference pages or groups that do not exist."""

    def __init__(self, references: cabc.Sequence[tuple[str, str]]) -> None:
        self.references = tuple(references)
        listed = "; ".join(f"{label!r} -> {target!r}" for label, target in references)
        super().__init__(f"sidebar references unknown content: {listed}")


class ContentBatchError(ContentValidationError):
    """Raised when one or more files in a batch fail validation."""

    def __init__(self, errors: cabc.Sequence[ContentValidationError]) -> None:
        self.errors = tuple(errors)
        count = len(self.errors)
        noun = "document" if count == 1 else "documents"
        super().__init__(f"{count} {noun} failed validation")


__all__ = [
    "ContentBatchError",
    "ContentDocument",
    "ContentValidationError",
    "DocumentCollection",
    "DocumentGroup",
    "DuplicateSlugError",
    "InvalidOrderError",
    "InvalidSlugError",
    "MalformedHeaderError",
    "MissingFieldError",
    "UnknownSlugError",
    "group_prefix",
]
