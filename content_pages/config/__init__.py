"""Load and validate the content tooling configuration YAML.

This subpackage parses ``config/content.yaml``, resolves the content root and
manifest output relative to the file, checks the validation policy, and
returns typed dataclasses (:class:`ProjectConfig`, :class:`ContentSettings`,
:class:`SidebarEntry`) consumed by the loader and CLI. The primary entry point
is :func:`load_config`.

Examples
--------
>>> from pathlib import Path
>>> from content_pages.config import load_config
>>> config = load_config(Path("config/content.yaml"))  # doctest: +SKIP
>>> config.content.root  # doctest: +SKIP
PosixPath('config/src/content/docs')
"""

from .loader import default_config, load_config
from .models import (
    DEFAULT_CONTENT_ROOT,
    DEFAULT_EXTENSIONS,
    DEFAULT_MANIFEST_OUTPUT,
    ContentConfigError,
    ContentSettings,
    ProjectConfig,
    SidebarEntry,
)

__all__ = [
    "DEFAULT_CONTENT_ROOT",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_MANIFEST_OUTPUT",
    "ContentConfigError",
    "ContentSettings",
    "ProjectConfig",
    "SidebarEntry",
    "default_config",
    "load_config",
]
