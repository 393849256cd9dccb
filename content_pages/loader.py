"""Discover content files on disk and validate them as one batch.

Every file below the configured content root is parsed (optionally on a
thread pool), all per-file failures are gathered, and only a fully valid
batch is handed to :func:`~content_pages.collection.build_collection`. A
single bad page fails the whole run; no partial collection is returned.

Example
-------
>>> from pathlib import Path
>>> from content_pages.config import load_config
>>> from content_pages.loader import load_collection
>>> config = load_config(Path("config/content.yaml"))  # doctest: +SKIP
>>> collection = load_collection(config)  # doctest: +SKIP
>>> collection.prefixes()[:1]  # doctest: +SKIP
['guides/basics']
"""

from __future__ import annotations

import logging
import typing as typ
from concurrent.futures import ThreadPoolExecutor

from .collection import build_collection
from .frontmatter import parse_file
from .models import ContentBatchError, ContentValidationError
from .sidebar import check_sidebar

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import ProjectConfig
    from .models import ContentDocument, DocumentCollection

logger = logging.getLogger(__name__)


class ContentRootError(FileNotFoundError):
    """Raised when the configured content root is missing."""


def discover_content(root: Path, extensions: cabc.Iterable[str]) -> list[Path]:
    """Return content files below ``root`` sorted by relative POSIX path.

    Parameters
    ----------
    root : Path
        Directory holding the documentation pages.
    extensions : Iterable[str]
        Lowercase dotted suffixes to include (for example ``.md``).

    Raises
    ------
    ContentRootError
        If ``root`` is not an existing directory.
    """
    if not root.is_dir():
        msg = f"Content root '{root}' not found."
        raise ContentRootError(msg)
    suffixes = {suffix.lower() for suffix in extensions}
    found = [
        path
        for path in root.rglob("*")
        if path.is_file() and path.suffix.lower() in suffixes
    ]
    found.sort(key=lambda path: path.relative_to(root).as_posix())
    for path in found:
        logger.debug("discovered %s", path)
    return found


def parse_batch(paths: cabc.Sequence[Path], *, workers: int = 1) -> list[ContentDocument]:
    """Parse every path and return the documents in input order.

    All files are parsed before any error is reported, so one run surfaces
    every broken page.

    Raises
    ------
    ContentBatchError
        If at least one file fails validation; ``errors`` holds each failure
        in input order.
    """
    if workers > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(_parse_one, paths))
    else:
        results = [_parse_one(path) for path in paths]

    errors = [result for result in results if isinstance(result, ContentValidationError)]
    if errors:
        raise ContentBatchError(errors)
    return typ.cast("list[ContentDocument]", results)


def load_collection(config: ProjectConfig) -> DocumentCollection:
    """Discover, parse and cross-check the configured content collection.

    Raises
    ------
    ContentRootError
        If the content root does not exist.
    ContentBatchError
        If any file fails front-matter validation.
    DuplicateSlugError
        If slugs collide (or nearly collide under the strict policy).
    UnknownSlugError
        If the configured sidebar references missing pages or groups.
    """
    settings = config.content
    paths = discover_content(settings.root, settings.extensions)
    documents = parse_batch(paths, workers=settings.workers)
    collection = build_collection(documents, near_duplicates=settings.near_duplicates)
    check_sidebar(config.sidebar, collection)
    return collection


def _parse_one(path: Path) -> ContentDocument | ContentValidationError:
    try:
        return parse_file(path)
    except ContentValidationError as exc:
        return exc


__all__ = [
    "ContentRootError",
    "discover_content",
    "load_collection",
    "parse_batch",
]
