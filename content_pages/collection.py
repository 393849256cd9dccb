"""Cross-document checks that turn parsed pages into a navigable collection.

:func:`build_collection` is the single place where slug uniqueness is enforced
and sibling order is computed. The result is deterministic: feeding the
flattened output back in yields an identical :class:`DocumentCollection`.

Example
-------
>>> from content_pages.models import ContentDocument
>>> docs = [
...     ContentDocument("B", "guides/b", "b", sidebar_order=1),
...     ContentDocument("A", "guides/a", "a", sidebar_order=0),
... ]
>>> build_collection(docs).group("guides").slugs()
['guides/a', 'guides/b']
"""

from __future__ import annotations

import collections
import logging
import typing as typ

from .models import (
    ContentDocument,
    DocumentCollection,
    DocumentGroup,
    DuplicateSlugError,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

NearDuplicatePolicy = typ.Literal["error", "warn", "allow"]
NEAR_DUPLICATE_POLICIES: tuple[str, ...] = typ.get_args(NearDuplicatePolicy)

_TRAILING_PUNCTUATION = ".-_"


def sort_key(document: ContentDocument) -> tuple[bool, int, str, str]:
    """Return the navigation sort key: order (unordered last), title, slug."""
    order = document.sidebar_order
    return (order is None, order or 0, document.title, document.slug)


def normalize_slug(slug: str) -> str:
    """Collapse trailing segment punctuation used to detect near-duplicates.

    >>> normalize_slug("guides/basics/key-board-symbols-with-names.")
    'guides/basics/key-board-symbols-with-names'
    """
    return "/".join(segment.rstrip(_TRAILING_PUNCTUATION) for segment in slug.split("/"))


def build_collection(
    documents: cabc.Iterable[ContentDocument],
    *,
    near_duplicates: NearDuplicatePolicy = "error",
) -> DocumentCollection:
    """Validate slugs across ``documents`` and group them for navigation.

    Parameters
    ----------
    documents : Iterable[ContentDocument]
        Parsed documents in discovery order; the order does not affect the
        result.
    near_duplicates : {"error", "warn", "allow"}, optional
        How to treat slugs differing only by trailing punctuation in a
        segment. ``"error"`` (default) raises, ``"warn"`` logs a warning and
        keeps both pages, ``"allow"`` keeps them silently.

    Returns
    -------
    DocumentCollection
        Groups ordered by prefix, each sorted by ``sidebar_order`` (unordered
        pages last), then title, then slug.

    Raises
    ------
    DuplicateSlugError
        If two or more documents declare the same slug, or near-duplicate
        slugs under the ``"error"`` policy.
    ValueError
        If ``near_duplicates`` is not a known policy.
    """
    if near_duplicates not in NEAR_DUPLICATE_POLICIES:
        msg = (
            f"Unknown near-duplicate policy '{near_duplicates}'. "
            f"Expected one of: {', '.join(NEAR_DUPLICATE_POLICIES)}"
        )
        raise ValueError(msg)

    batch = list(documents)
    _reject_duplicates(batch)
    _check_near_duplicates(batch, near_duplicates)

    grouped: dict[str, list[ContentDocument]] = collections.defaultdict(list)
    for document in batch:
        grouped[document.group].append(document)

    groups = tuple(
        DocumentGroup(prefix=prefix, documents=tuple(sorted(members, key=sort_key)))
        for prefix, members in sorted(grouped.items())
    )
    return DocumentCollection(groups=groups)


def _reject_duplicates(documents: cabc.Sequence[ContentDocument]) -> None:
    by_slug: dict[str, list[ContentDocument]] = collections.defaultdict(list)
    for document in documents:
        by_slug[document.slug].append(document)
    for slug in sorted(by_slug):
        owners = by_slug[slug]
        if len(owners) > 1:
            raise DuplicateSlugError(slug, _by_label(owners))


def _check_near_duplicates(
    documents: cabc.Sequence[ContentDocument], policy: NearDuplicatePolicy
) -> None:
    if policy == "allow":
        return
    by_key: dict[str, list[ContentDocument]] = collections.defaultdict(list)
    for document in documents:
        by_key[normalize_slug(document.slug)].append(document)
    for key in sorted(by_key):
        owners = by_key[key]
        if len(owners) < 2:
            continue
        error = DuplicateSlugError(key, _by_label(owners), near=True)
        if policy == "error":
            raise error
        logger.warning("%s", error)


def _by_label(documents: cabc.Iterable[ContentDocument]) -> list[ContentDocument]:
    return sorted(documents, key=lambda doc: (doc.label, doc.slug))


__all__ = [
    "NEAR_DUPLICATE_POLICIES",
    "NearDuplicatePolicy",
    "build_collection",
    "normalize_slug",
    "sort_key",
]
