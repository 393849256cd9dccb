"""Validation tooling for Markdown documentation content.

This package checks the front-matter contract of every documentation page,
enforces unique slugs, orders sibling pages for navigation and exports the
validated collection for the external site renderer.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``parse_document``: Parse one page's text into a ``ContentDocument``.
- ``build_collection``: Check slugs and group documents for navigation.

Examples
--------
>>> from content_pages import build_collection, parse_document
>>> doc = parse_document("---\\ntitle: A\\nslug: a\\ndescription: A\\n---\\n")
>>> build_collection([doc]).prefixes()
['']
"""

from __future__ import annotations

from .cli import app, main
from .collection import build_collection
from .frontmatter import dump_document, parse_document, parse_file
from .models import (
    ContentBatchError,
    ContentDocument,
    ContentValidationError,
    DocumentCollection,
    DocumentGroup,
    DuplicateSlugError,
    InvalidOrderError,
    InvalidSlugError,
    MalformedHeaderError,
    MissingFieldError,
    UnknownSlugError,
)

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
    "app",
    "build_collection",
    "dump_document",
    "main",
    "parse_document",
    "parse_file",
]
