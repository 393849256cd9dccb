r"""Parse and validate the front-matter header of documentation pages.

Each content file starts with a YAML block fenced by ``---`` lines that names
the page title, slug, description and an optional ``sidebar.order``. This
module turns raw text into a :class:`~content_pages.models.ContentDocument`
or raises one of the validation errors from :mod:`content_pages.models`.

Example
-------
>>> from content_pages.frontmatter import parse_document
>>> doc = parse_document(
...     "---\ntitle: Git Basic Commands\n"
...     "slug: guides/basics/git-basic-commands\n"
...     "description: Git Basic Commands\nsidebar:\n  order: 2\n---\nBody\n"
... )
>>> (doc.group, doc.sidebar_order)
('guides/basics', 2)
"""

from __future__ import annotations

import io
import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError
from ruamel.yaml.scalarstring import DoubleQuotedScalarString

from .models import (
    ContentDocument,
    InvalidOrderError,
    InvalidSlugError,
    MalformedHeaderError,
    MissingFieldError,
)

DELIMITER = "---"
REQUIRED_FIELDS = ("title", "slug", "description")
SLUG_PATTERN = re.compile(r"^[a-z0-9][a-z0-9._-]*(?:/[a-z0-9][a-z0-9._-]*)*$")

_BOM = "\ufeff"
_LINE_END = re.compile(r"(?<=\n)")
_BREAK_CHARS = frozenset("\n\r\x85\u2028\u2029")


def parse_document(text: str, *, source: Path | str | None = None) -> ContentDocument:
    """Parse raw page text into a validated :class:`ContentDocument`.

    Parameters
    ----------
    text : str
        Full file contents, front-matter block first.
    source : Path or str, optional
        File identity attached to the document and to any raised error.

    Returns
    -------
    ContentDocument
        Header fields plus the untouched body text.

    Raises
    ------
    MalformedHeaderError
        If the header block is missing, unterminated, not valid YAML, not a
        mapping, or holds a non-string required field.
    MissingFieldError
        If ``title``, ``slug`` or ``description`` is absent or blank.
    InvalidSlugError
        If the slug is not lowercase ``/``-separated segments.
    InvalidOrderError
        If ``sidebar.order`` is present but not a non-negative integer.
    """
    header_text, body = _split_front_matter(text, source)
    header = _load_header(header_text, source)

    title, slug, description = (
        _require_text(header, field, source) for field in REQUIRED_FIELDS
    )
    if not SLUG_PATTERN.match(slug):
        raise InvalidSlugError(slug, source=source)

    return ContentDocument(
        title=title,
        slug=slug,
        description=description,
        sidebar_order=_parse_order(header, source),
        body=body,
        source=_as_path(source),
    )


def parse_file(path: Path) -> ContentDocument:
    """Read ``path`` as UTF-8 and parse it with :func:`parse_document`."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        msg = f"file is not valid UTF-8 ({exc.reason})"
        raise MalformedHeaderError(msg, source=path) from exc
    return parse_document(text, source=path)


def dump_document(document: ContentDocument) -> str:
    """Serialize ``document`` back into front-matter plus body text.

    Keys are written in canonical order (``title``, ``slug``,
    ``description``, ``sidebar.order``) so that parsing the result yields a
    document equal to ``document``.
    """
    header = CommentedMap()
    header["title"] = _scalar(document.title)
    header["slug"] = document.slug
    header["description"] = _scalar(document.description)
    if document.sidebar_order is not None:
        sidebar = CommentedMap()
        sidebar["order"] = document.sidebar_order
        header["sidebar"] = sidebar

    buffer = io.StringIO()
    _build_dump_yaml().dump(header, buffer)
    return f"{DELIMITER}\n{buffer.getvalue()}{DELIMITER}\n{document.body}"


def _build_dump_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 4096
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def _scalar(value: str) -> str:
    """Return ``value`` double-quoted when it holds a line-break character."""
    if _BREAK_CHARS.intersection(value):
        return DoubleQuotedScalarString(value)
    return value


def _split_front_matter(text: str, source: Path | str | None) -> tuple[str, str]:
    """Return the header text and the body that follows it.

    Only a line feed ends a line; other Unicode separators stay inside it.
    """
    text = text.removeprefix(_BOM)
    lines = [line for line in _LINE_END.split(text) if line]
    if not lines or not _is_delimiter(lines[0]):
        msg = "document does not start with a '---' front-matter block"
        raise MalformedHeaderError(msg, source=source)

    for index, line in enumerate(lines[1:], start=1):
        if _is_delimiter(line):
            return "".join(lines[1:index]), "".join(lines[index + 1 :])

    msg = "front-matter block is not terminated by '---'"
    raise MalformedHeaderError(msg, source=source)


def _is_delimiter(line: str) -> bool:
    return line.rstrip(" \t\r\n") == DELIMITER


def _load_header(header_text: str, source: Path | str | None) -> dict[str, typ.Any]:
    """Parse the header block as YAML 1.2 and require a mapping."""
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(header_text)
    except YAMLError as exc:
        msg = f"front-matter is not valid YAML: {exc}"
        raise MalformedHeaderError(msg, source=source) from exc

    match loaded:
        case None:
            return {}
        case dict():
            return dict(loaded)
        case _:
            msg = f"front-matter must be a mapping, got {type(loaded).__name__}"
            raise MalformedHeaderError(msg, source=source)


def _require_text(
    header: typ.Mapping[str, typ.Any], field: str, source: Path | str | None
) -> str:
    value = header.get(field)
    if value is None:
        raise MissingFieldError(field, source=source)
    if not isinstance(value, str):
        msg = f"field '{field}' must be a string, got {type(value).__name__} {value!r}"
        raise MalformedHeaderError(msg, source=source)
    text = value.strip()
    if not text:
        raise MissingFieldError(field, source=source)
    return text


def _parse_order(
    header: typ.Mapping[str, typ.Any], source: Path | str | None
) -> int | None:
    """Return ``sidebar.order`` or ``None`` when the page is unordered."""
    sidebar = header.get("sidebar")
    if sidebar is None:
        return None
    if not isinstance(sidebar, dict):
        msg = f"'sidebar' must be a mapping, got {type(sidebar).__name__}"
        raise MalformedHeaderError(msg, source=source)

    value = sidebar.get("order")
    match value:
        case None:
            return None
        case bool():
            raise InvalidOrderError(value, source=source)
        case int() if value >= 0:
            return value
        case _:
            raise InvalidOrderError(value, source=source)


def _as_path(source: Path | str | None) -> Path | None:
    if source is None:
        return None
    return Path(source)


__all__ = [
    "DELIMITER",
    "REQUIRED_FIELDS",
    "SLUG_PATTERN",
    "dump_document",
    "parse_document",
    "parse_file",
]
