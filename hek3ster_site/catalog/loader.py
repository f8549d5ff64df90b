"""Load the content catalog YAML into frozen dataclasses."""

from __future__ import annotations

import functools
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from hek3ster_site._constants import DEFAULT_CATALOG

from .builders import _build_catalog
from .models import CatalogError, ContentCatalog


def load_catalog(path: Path) -> ContentCatalog:
    """Load the YAML document describing every landing page section.

    Parameters
    ----------
    path : Path
        Filesystem path to the catalog file (for example, the packaged
        ``hek3ster_site/data/catalog.yaml``).

    Returns
    -------
    ContentCatalog
        Immutable catalog whose sequences keep the order they were authored
        in.

    Raises
    ------
    FileNotFoundError
        If the catalog file does not exist at ``path``.
    CatalogError
        If the top-level YAML structure is not a mapping.
    UnknownStatusError
        If a comparison cell carries a status other than ``good``, ``bad``
        or ``neutral``. Other malformed records are dropped from their
        section rather than failing the load.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from hek3ster_site.catalog import load_catalog
    >>> catalog = load_catalog(Path("catalog.yaml"))  # doctest: +SKIP
    >>> [step.number for step in catalog.onboarding.steps]  # doctest: +SKIP
    [1, 2, 3]
    """
    if not path.exists():
        msg = f"Catalog file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level catalog YAML structure must be a mapping."
        raise CatalogError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    return _build_catalog(raw)


@functools.cache
def default_catalog() -> ContentCatalog:
    """Return the packaged catalog, parsed once per process."""
    return load_catalog(DEFAULT_CATALOG)


__all__ = ["default_catalog", "load_catalog"]
