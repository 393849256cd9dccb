"""Serialize a validated collection into the renderer hand-off manifest.

The manifest is a JSON array of ``{slug, title, description, sidebarOrder,
bodyPath}`` records in collection order (groups by prefix, siblings in
navigation order). ``bodyPath`` is relative to the content root.

Example
-------
>>> from content_pages.collection import build_collection
>>> from content_pages.models import ContentDocument
>>> collection = build_collection([ContentDocument("Intro", "intro", "Start")])
>>> encode_manifest(build_manifest(collection))
b'[{"slug":"intro","title":"Intro","description":"Start","sidebarOrder":null,"bodyPath":null}]'
"""

from __future__ import annotations

import typing as typ

import msgspec
import msgspec.json as msgspec_json

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import ContentDocument, DocumentCollection


class ManifestRecord(msgspec.Struct, rename="camel", frozen=True):
    """One page entry of the manifest."""

    slug: str
    title: str
    description: str
    sidebar_order: int | None
    body_path: str | None


def build_manifest(
    collection: DocumentCollection, *, content_root: Path | None = None
) -> list[ManifestRecord]:
    """Return manifest records for every document in collection order."""
    return [
        ManifestRecord(
            slug=doc.slug,
            title=doc.title,
            description=doc.description,
            sidebar_order=doc.sidebar_order,
            body_path=_body_path(doc, content_root),
        )
        for doc in collection.documents()
    ]


def encode_manifest(records: list[ManifestRecord], *, indent: int = 0) -> bytes:
    """Encode ``records`` as JSON bytes, pretty-printed when ``indent`` > 0."""
    payload = msgspec_json.encode(records)
    if indent:
        return msgspec_json.format(payload, indent=indent)
    return payload


def decode_manifest(payload: bytes | str) -> list[ManifestRecord]:
    """Decode manifest JSON back into typed records."""
    return msgspec_json.decode(payload, type=list[ManifestRecord])


def write_manifest(
    collection: DocumentCollection, path: Path, *, content_root: Path | None = None
) -> Path:
    """Write the manifest for ``collection`` to ``path`` and return the path."""
    records = build_manifest(collection, content_root=content_root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(encode_manifest(records, indent=2) + b"\n")
    return path


def _body_path(document: ContentDocument, content_root: Path | None) -> str | None:
    source = document.source
    if source is None:
        return None
    if content_root is not None:
        try:
            return source.relative_to(content_root).as_posix()
        except ValueError:  # pragma: no cover - source outside the content root
            return source.as_posix()
    return source.as_posix()


__all__ = [
    "ManifestRecord",
    "build_manifest",
    "decode_manifest",
    "encode_manifest",
    "write_manifest",
]
