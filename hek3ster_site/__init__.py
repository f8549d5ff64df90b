"""Static landing page generator for the hek3ster cluster deployment tool.

This package renders the hek3ster marketing page from a YAML content catalog
and exposes the ``hek3ster-site`` CLI used to build the page, check its
navigation anchors, and copy onboarding examples to the clipboard.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from hek3ster_site import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
