"""Common literal values used across hek3ster_site.

These constants keep anchor identifiers, default paths, and template names
centralized so the page composition, templates, and tests import the same
values without drifting.

Examples
--------
>>> from hek3ster_site import _constants
>>> _constants.NAVIGABLE_ANCHORS
('architecture', 'features', 'comparison', 'pricing', 'docs')
>>> _constants.DEFAULT_OUTPUT.name
'index.html'
"""

from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent
DEFAULT_CATALOG = PACKAGE_ROOT / "data" / "catalog.yaml"
DEFAULT_TEMPLATES_DIR = PACKAGE_ROOT / "templates"
DEFAULT_OUTPUT = Path("public/index.html")
DEFAULT_PYGMENTS_STYLE = "monokai"

PAGE_TEMPLATE = "landing_page.jinja"
SECTION_TEMPLATE = "sections/{key}.jinja"

NAVIGABLE_ANCHORS = ("architecture", "features", "comparison", "pricing", "docs")

COPY_SUCCESS_MESSAGE = "Copied to clipboard!"
COPY_FAILURE_MESSAGE = "Could not copy to clipboard."
