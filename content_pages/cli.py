"""Cyclopts CLI entrypoint for validating documentation content files.

The ``content-pages`` console script defined here checks every page below the
content root against the front-matter contract, verifies slug uniqueness and
sidebar references, and can persist the validated collection as a JSON
manifest for the site renderer. Typical usage is running
``content-pages check`` locally or in CI before building the site.

Examples
--------
Validate the collection described by the default configuration:

>>> from content_pages.cli import main
>>> main()  # doctest: +SKIP

Write the manifest for a custom content directory:

>>> from content_pages.cli import app
>>> app(
...     ["manifest", "--root", "src/content/docs", "--output", "dist/pages.json"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from .config import ContentConfigError, ProjectConfig, default_config, load_config
from .loader import ContentRootError, load_collection
from .manifest import write_manifest
from .models import ContentBatchError, ContentValidationError

if typ.TYPE_CHECKING:
    from .models import DocumentCollection

DEFAULT_CONFIG = Path("config/content.yaml")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)

app = App(name="content-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("content_pages").setLevel(level)


def _resolve_config(config: Path, root: Path | None) -> ProjectConfig:
    """Load ``config`` when present, otherwise fall back to cwd defaults.

    An invalid configuration file is printed to stderr and
    exits with status 1.
    """
    if not config.exists():
        logger.debug("%s not found, using built-in defaults", config)
        project = default_config(Path.cwd())
    else:
        try:
            project = load_config(config)
        except (ContentConfigError, TypeError, YAMLError) as exc:
            print(f"error: {_format_path(config)}: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
        logger.debug("loaded configuration from %s", config)
    if root is not None:
        project = dc.replace(project, content=dc.replace(project.content, root=root))
    return project


def _load_or_exit(project: ProjectConfig) -> DocumentCollection:
    """Validate the collection, printing every failure and exiting on error."""
    try:
        return load_collection(project)
    except ContentBatchError as exc:
        for error in exc.errors:
            print(f"error: {error}", file=sys.stderr)
        print(f"error: {exc}", file=sys.stderr)
    except (ContentValidationError, ContentRootError) as exc:
        print(f"error: {exc}", file=sys.stderr)
    raise SystemExit(1)


@app.command(help="Validate front-matter, slugs and sidebar references.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to content config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    root: typ.Annotated[
        Path | None,
        Parameter(help="Override the content root", env_var="INPUT_ROOT"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log discovered files", env_var="INPUT_VERBOSE")
    ] = False,
) -> None:
    """Validate the content collection and print a per-group summary.

    Parameters
    ----------
    config : Path, optional
        Path to the ``content.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``). Built-in defaults apply when the file is absent.
    root : Path or None, optional
        Content directory overriding the configured root.
    verbose : bool, optional
        Emit debug logging for discovered files.

    Raises
    ------
    SystemExit
        With status 1 when any document fails validation.
    """
    _configure_logging(verbose=verbose)
    project = _resolve_config(config, root)
    collection = _load_or_exit(project)
    for group in collection.groups:
        label = group.prefix or "(root)"
        count = len(group.documents)
        noun = "page" if count == 1 else "pages"
        print(f"{label}: {count} {noun}")
    print(
        f"checked {len(collection)} documents in {len(collection.groups)} groups "
        f"under {_format_path(project.content.root)}"
    )


@app.command(help="Validate the collection and write the renderer manifest.")
def manifest(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to content config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    root: typ.Annotated[
        Path | None,
        Parameter(help="Override the content root", env_var="INPUT_ROOT"),
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the manifest path", env_var="INPUT_OUTPUT"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log discovered files", env_var="INPUT_VERBOSE")
    ] = False,
) -> None:
    """Validate the collection and persist it as a JSON manifest.

    The manifest lists ``{slug, title, description, sidebarOrder, bodyPath}``
    records in navigation order. Nothing is written when validation fails.
    """
    _configure_logging(verbose=verbose)
    project = _resolve_config(config, root)
    collection = _load_or_exit(project)
    target = output or project.manifest_output
    written = write_manifest(collection, target, content_root=project.content.root)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``content-pages`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
