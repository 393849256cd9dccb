"""Load content tooling configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_sidebar,
    _normalize_extensions,
    _parse_policy,
    _parse_workers,
    _resolve_path,
)
from .models import (
    DEFAULT_CONTENT_ROOT,
    DEFAULT_MANIFEST_OUTPUT,
    ContentConfigError,
    ContentSettings,
    ProjectConfig,
)


def load_config(path: Path) -> ProjectConfig:
    """Load the YAML configuration describing the content collection.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/content.yaml``). Relative paths inside the file resolve
        against the file's directory.

    Returns
    -------
    ProjectConfig
        Content location, validation policy, manifest output and the
        declared sidebar tree.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ContentConfigError
        If a section holds invalid values.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_config(Path("config/content.yaml"))  # doctest: +SKIP
    >>> config.content.extensions  # doctest: +SKIP
    ('.md', '.mdx')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base = path.parent

    content_raw = _section(raw, "content")
    manifest_raw = _section(raw, "manifest")

    content = ContentSettings(
        root=_resolve_path(
            content_raw.get("root"), base=base, default=DEFAULT_CONTENT_ROOT
        ),
        extensions=_normalize_extensions(content_raw.get("extensions")),
        workers=_parse_workers(content_raw.get("workers")),
        near_duplicates=_parse_policy(content_raw.get("near_duplicates")),
    )

    return ProjectConfig(
        content=content,
        manifest_output=_resolve_path(
            manifest_raw.get("output"), base=base, default=DEFAULT_MANIFEST_OUTPUT
        ),
        sidebar=_build_sidebar(raw.get("sidebar")),
    )


def default_config(base: Path) -> ProjectConfig:
    """Return the built-in configuration rooted at ``base``."""
    return ProjectConfig(
        content=ContentSettings(root=base / DEFAULT_CONTENT_ROOT),
        manifest_output=base / DEFAULT_MANIFEST_OUTPUT,
    )


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> dict[str, typ.Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{key}' must be a mapping."
        raise ContentConfigError(msg)
    return dict(value)


__all__ = ["default_config", "load_config"]
