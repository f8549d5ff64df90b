"""Cyclopts CLI entrypoint for building and checking the hek3ster landing page.

The ``hek3ster-site`` console script defined here renders the landing page
from the content catalog, checks that every header navigation link resolves
to exactly one page section, lists the onboarding steps, and copies a step's
example block to the system clipboard. Typical usage involves running
``hek3ster-site generate`` locally or in CI and ``hek3ster-site check`` as a
pre-publish guard.

Examples
--------
Render the page with the packaged catalog:

>>> from hek3ster_site.cli import main
>>> main()  # doctest: +SKIP

Render into a custom location:

>>> from hek3ster_site.cli import app
>>> app(["generate", "--output", "dist/index.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import asyncio
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CATALOG, DEFAULT_OUTPUT, DEFAULT_PYGMENTS_STYLE
from .catalog import ContentCatalog, default_catalog, load_catalog
from .clipboard import copy_to_clipboard
from .page import LandingPageBuilder, navigation_problems

app = App(name="hek3ster-site", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

CatalogOption = typ.Annotated[
    Path, Parameter(help="Path to the content catalog", env_var="INPUT_CATALOG")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load(catalog: Path) -> ContentCatalog:
    """Return the cached packaged catalog or parse the one at ``catalog``."""
    if catalog == DEFAULT_CATALOG:
        return default_catalog()
    return load_catalog(catalog)


@app.command(help="Render the landing page HTML from the content catalog.")
def generate(
    *,
    catalog: CatalogOption = DEFAULT_CATALOG,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the page", env_var="INPUT_OUTPUT")
    ] = DEFAULT_OUTPUT,
    pygments_style: typ.Annotated[
        str,
        Parameter(
            help="Pygments style for example blocks",
            env_var="INPUT_PYGMENTS_STYLE",
        ),
    ] = DEFAULT_PYGMENTS_STYLE,
) -> None:
    """Render the landing page and report where it was written.

    Parameters
    ----------
    catalog : Path, optional
        Content catalog to render; defaults to the packaged catalog and can be
        overridden via ``INPUT_CATALOG``.
    output : Path, optional
        Destination HTML file, ``public/index.html`` by default.
    pygments_style : str, optional
        Pygments style applied to the onboarding example blocks.

    Returns
    -------
    None
        Writes the page and prints its path.
    """
    builder = LandingPageBuilder(
        _load(catalog), output=output, pygments_style=pygments_style
    )
    path = builder.run()
    print(f"wrote {_format_path(path)}")


@app.command(help="Check that every navigation link targets exactly one section.")
def check(*, catalog: CatalogOption = DEFAULT_CATALOG) -> None:
    """Report broken navigation anchors, exiting with status 1 if any exist."""
    problems = navigation_problems(_load(catalog))
    if problems:
        for problem in problems:
            print(problem)
        raise SystemExit(1)
    print("navigation ok")


@app.command(help="List the onboarding steps shown in the get-started section.")
def steps(*, catalog: CatalogOption = DEFAULT_CATALOG) -> None:
    """Print each onboarding step's number, title, and description."""
    for step in _load(catalog).onboarding.steps:
        line = f"{step.number}. {step.title}"
        if step.description:
            line = f"{line}: {step.description}"
        print(line)


@app.command(help="Copy a step's example block (or literal text) to the clipboard.")
def copy(
    step: typ.Annotated[
        int | None, Parameter(help="Onboarding step number to copy")
    ] = None,
    *,
    text: typ.Annotated[
        str | None, Parameter(help="Literal text to copy instead of a step")
    ] = None,
    catalog: CatalogOption = DEFAULT_CATALOG,
) -> None:
    """Copy example text to the system clipboard.

    Parameters
    ----------
    step : int or None, optional
        Number of the onboarding step whose example block is copied.
    text : str or None, optional
        Literal text to copy; mutually exclusive with ``step``.
    catalog : Path, optional
        Content catalog providing the steps.

    Raises
    ------
    ValueError
        If neither or both of ``step`` and ``text`` are given, or the chosen
        step has no example block.
    SystemExit
        With status 1 when the clipboard could not be written.
    """
    if (step is None) == (text is None):
        msg = "Pass exactly one of a step number or --text."
        raise ValueError(msg)
    if text is None:
        selected = _load(catalog).get_step(typ.cast(int, step))
        if not selected.code:
            msg = f"Step {selected.number} has no example to copy."
            raise ValueError(msg)
        text = selected.code
    result = asyncio.run(copy_to_clipboard(text))
    if not result.ok:
        raise SystemExit(1)


def main() -> None:
    """Invoke the Cyclopts application behind the ``hek3ster-site`` command.

    Returns
    -------
    None
        This function executes for its side effects of parsing CLI arguments
        and running the requested subcommand.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
