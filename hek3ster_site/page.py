"""hek3ster landing page composition and rendering pipeline.

This module assembles the section renderers into the page's fixed top-to-bottom
order (Header, Hero, TrustBar, Architecture, Features, Comparison, Pricing,
GetStarted, Footer), wraps the navigable sections in anchored containers, and
writes the resulting ``index.html``. The main entry point is
``LandingPageBuilder``; :func:`compose_page` exposes the ordered, rendered
sections on their own so the anchor contract can be checked without touching
the filesystem.

Typical usage mirrors the build pipeline:

>>> from hek3ster_site.catalog import default_catalog
>>> builder = LandingPageBuilder(default_catalog())
>>> output_path = builder.run()  # doctest: +SKIP
>>> print(output_path)  # doctest: +SKIP
public/index.html

Rendering is pure: the same catalog always yields the same HTML, so the
builder embeds no timestamps. Side effects are limited to reading template
files and writing the rendered page.
"""

from __future__ import annotations

import collections
import dataclasses as dc
import typing as typ
from pathlib import Path

from markupsafe import Markup

from . import sections
from ._constants import (
    COPY_FAILURE_MESSAGE,
    COPY_SUCCESS_MESSAGE,
    DEFAULT_OUTPUT,
    DEFAULT_PYGMENTS_STYLE,
    PAGE_TEMPLATE,
)
from .renderer import CodeBlockRenderer

if typ.TYPE_CHECKING:
    from jinja2 import Environment

    from .catalog import ContentCatalog


class AnchorMismatchError(ValueError):
    """Raised when navigation links target anchors the page does not define."""


@dc.dataclass(frozen=True, slots=True)
class PageSection:
    """One slot of the page: its key, optional anchor, and renderer."""

    key: str
    region: str
    render: typ.Callable[[Environment, ContentCatalog], Markup]
    anchor: str | None = None


PAGE_SECTIONS: tuple[PageSection, ...] = (
    PageSection(
        "header",
        "header",
        lambda env, catalog: sections.render_header(
            env, catalog.nav_links, brand=catalog.brand
        ),
    ),
    PageSection(
        "hero", "main", lambda env, catalog: sections.render_hero(env, catalog.hero)
    ),
    PageSection(
        "trust_bar",
        "main",
        lambda env, catalog: sections.render_trust_bar(env, catalog.trust_items),
    ),
    PageSection(
        "architecture",
        "main",
        lambda env, catalog: sections.render_architecture(env, catalog.architecture),
        anchor="architecture",
    ),
    PageSection(
        "features",
        "main",
        lambda env, catalog: sections.render_features(env, catalog.features),
        anchor="features",
    ),
    PageSection(
        "comparison",
        "main",
        lambda env, catalog: sections.render_comparison(env, catalog.comparison),
        anchor="comparison",
    ),
    PageSection(
        "pricing",
        "main",
        lambda env, catalog: sections.render_pricing(env, catalog.pricing),
        anchor="pricing",
    ),
    PageSection(
        "get_started",
        "main",
        lambda env, catalog: sections.render_get_started(env, catalog.onboarding),
        anchor="docs",
    ),
    PageSection(
        "footer",
        "footer",
        lambda env, catalog: sections.render_footer(
            env, catalog.footer, brand=catalog.brand
        ),
    ),
)


@dc.dataclass(frozen=True, slots=True)
class RenderedSection:
    """HTML for one composed section together with its placement."""

    key: str
    region: str
    anchor: str | None
    html: Markup


@dc.dataclass(frozen=True, slots=True)
class ComposedPage:
    """Ordered sections ready to be placed into the page shell."""

    sections: tuple[RenderedSection, ...]

    @property
    def anchors(self) -> list[str]:
        """Return the anchor identifiers of the navigable sections, in order."""
        return [section.anchor for section in self.sections if section.anchor]

    def region(self, name: str) -> list[RenderedSection]:
        """Return the sections placed in ``name`` (header, main, or footer)."""
        return [section for section in self.sections if section.region == name]


def compose_page(
    catalog: ContentCatalog,
    env: Environment,
    *,
    layout: typ.Sequence[PageSection] = PAGE_SECTIONS,
) -> ComposedPage:
    """Render every section of ``layout`` in order and wrap anchored ones."""
    rendered: list[RenderedSection] = []
    for slot in layout:
        html = slot.render(env, catalog)
        if slot.anchor:
            html = Markup(
                '<section id="{}" class="page-section" data-section="{}">\n{}\n</section>'
            ).format(slot.anchor, slot.key, html)
        rendered.append(
            RenderedSection(
                key=slot.key, region=slot.region, anchor=slot.anchor, html=html
            )
        )
    return ComposedPage(sections=tuple(rendered))


def navigation_problems(
    catalog: ContentCatalog, *, layout: typ.Sequence[PageSection] = PAGE_SECTIONS
) -> list[str]:
    """Describe every navigation link whose anchor is missing or ambiguous.

    Parameters
    ----------
    catalog : ContentCatalog
        Catalog whose header navigation links are checked.
    layout : Sequence[PageSection], optional
        Page layout providing the section anchors; defaults to the standard
        landing page order.

    Returns
    -------
    list[str]
        Human-readable problems, empty when every in-page link resolves to
        exactly one element id. Section anchors and, when the layout includes
        the get-started section, its ``step-N`` anchors are navigable.
        External links are ignored.
    """
    counts = collections.Counter(slot.anchor for slot in layout if slot.anchor)
    if any(slot.key == "get_started" for slot in layout):
        counts.update(
            view.anchor for view in sections.step_views(catalog.onboarding.steps)
        )
    problems: list[str] = []
    for link in catalog.nav_links:
        anchor = link.anchor
        if anchor is None:
            continue
        found = counts.get(anchor, 0)
        if found == 0:
            problems.append(
                f"Navigation link '{link.label}' targets '#{anchor}', "
                "which no section defines."
            )
        elif found > 1:
            problems.append(
                f"Navigation link '{link.label}' targets '#{anchor}', "
                f"which {found} sections define."
            )
    return problems


def verify_navigation(
    catalog: ContentCatalog, *, layout: typ.Sequence[PageSection] = PAGE_SECTIONS
) -> None:
    """Raise ``AnchorMismatchError`` when any navigation link is broken."""
    problems = navigation_problems(catalog, layout=layout)
    if problems:
        msg = "Broken navigation anchors:\n" + "\n".join(problems)
        raise AnchorMismatchError(msg)


class LandingPageBuilder:
    """Render the landing page from the content catalog."""

    def __init__(
        self,
        catalog: ContentCatalog,
        *,
        output: Path = DEFAULT_OUTPUT,
        templates_dir: Path | None = None,
        pygments_style: str = DEFAULT_PYGMENTS_STYLE,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        catalog : ContentCatalog
            Content records for every section; the builder never mutates it.
        output : Path, optional
            Destination of the rendered HTML. Defaults to
            ``public/index.html``.
        templates_dir : Path, optional
            Directory containing the page and section templates. Defaults to
            ``hek3ster_site/templates``.
        pygments_style : str, optional
            Pygments style used for the onboarding example blocks.

        Notes
        -----
        Instantiating the builder configures a Jinja2 ``Environment``
        (autoescape, trimmed blocks) with the ``highlight`` filter and eagerly
        loads ``landing_page.jinja`` so ``run`` only handles rendering and the
        filesystem write.
        """
        self.catalog = catalog
        self.output = output
        self.env = sections.create_environment(
            templates_dir, code_renderer=CodeBlockRenderer(pygments_style)
        )
        self.template = self.env.get_template(PAGE_TEMPLATE)

    def compose(self) -> ComposedPage:
        """Return the ordered, rendered sections for the catalog."""
        return compose_page(self.catalog, self.env)

    def render(self) -> str:
        """Render the complete HTML document, ending with a newline."""
        page = self.compose()
        html = self.template.render(
            catalog=self.catalog,
            page=page,
            copy_success_message=COPY_SUCCESS_MESSAGE,
            copy_failure_message=COPY_FAILURE_MESSAGE,
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self) -> Path:
        """Render and write the landing page HTML, returning the output path.

        Returns
        -------
        Path
            Filesystem path to the rendered page.

        Notes
        -----
        Parent directories are created as needed and the page is written as
        UTF-8. Filesystem errors propagate to the caller.
        """
        output_path = self.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = [
    "PAGE_SECTIONS",
    "AnchorMismatchError",
    "ComposedPage",
    "LandingPageBuilder",
    "PageSection",
    "RenderedSection",
    "compose_page",
    "navigation_problems",
    "verify_navigation",
]
