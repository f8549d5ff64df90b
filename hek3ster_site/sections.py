"""Section renderers for the hek3ster landing page.

Each ``render_*`` function maps one slice of the content catalog to an HTML
block using the templates under ``hek3ster_site/templates/sections``. The
functions are stateless: they read the slice, never mutate it, and perform no
I/O beyond template lookup, so rendering the same slice twice yields the same
markup. Empty or missing slices produce an empty but well-formed container.

The small view helpers (:func:`comparison_rows`, :func:`plan_views`,
:func:`step_views`) hold the only decisions the templates depend on: which
marker a comparison status maps to, how a highlighted plan is styled, and
which steps draw a connector to the next one.

Examples
--------
>>> from hek3ster_site.catalog import CellStatus
>>> status_marker(CellStatus.GOOD).glyph
'✓'
>>> status_marker(CellStatus.NEUTRAL) is None
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from ._constants import DEFAULT_TEMPLATES_DIR, SECTION_TEMPLATE
from .catalog import (
    CellStatus,
    ComparisonTable,
    Competitor,
    FeaturesContent,
    OnboardingContent,
    PricingContent,
    UnknownStatusError,
)
from .renderer import CodeBlockRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .catalog import (
        ArchitectureContent,
        FooterContent,
        HeroContent,
        NavLink,
        PricingPlan,
        Step,
        TrustItem,
    )


@dc.dataclass(frozen=True, slots=True)
class StatusMarker:
    """Visual marker drawn beside a comparison value."""

    kind: str
    glyph: str
    label: str
    css_class: str


AFFIRMATIVE_MARKER = StatusMarker(
    kind="affirmative", glyph="✓", label="Yes", css_class="status-marker--good"
)
NEGATIVE_MARKER = StatusMarker(
    kind="negative", glyph="✗", label="No", css_class="status-marker--bad"
)


def status_marker(status: CellStatus | str) -> StatusMarker | None:
    """Return the marker for ``status``; neutral cells carry no marker.

    Raises
    ------
    UnknownStatusError
        If ``status`` is not one of ``good``, ``bad``, or ``neutral``.
    """
    match status:
        case CellStatus.GOOD:
            return AFFIRMATIVE_MARKER
        case CellStatus.BAD:
            return NEGATIVE_MARKER
        case CellStatus.NEUTRAL:
            return None
        case _:
            msg = f"Unrecognized comparison status {status!r}."
            raise UnknownStatusError(msg)


@dc.dataclass(frozen=True, slots=True)
class CellView:
    """Comparison cell prepared for the table template."""

    competitor: Competitor
    value: str | None
    marker: StatusMarker | None


@dc.dataclass(frozen=True, slots=True)
class RowView:
    """Comparison row with cells ordered by competitor column."""

    factor: str
    cells: tuple[CellView, ...]


def comparison_rows(table: ComparisonTable) -> list[RowView]:
    """Pair every row with the table's competitor columns, in order."""
    rows: list[RowView] = []
    for row in table.rows:
        cells: list[CellView] = []
        for competitor in table.competitors:
            cell = row.cell(competitor.key)
            if cell is None:
                cells.append(CellView(competitor=competitor, value=None, marker=None))
                continue
            cells.append(
                CellView(
                    competitor=competitor,
                    value=cell.value,
                    marker=status_marker(cell.status),
                )
            )
        rows.append(RowView(factor=row.factor, cells=tuple(cells)))
    return rows


@dc.dataclass(frozen=True, slots=True)
class PlanView:
    """Pricing plan with the classes that reflect its highlight flag."""

    plan: PricingPlan
    card_class: str
    badge_class: str
    price_class: str


def plan_views(plans: cabc.Sequence[PricingPlan]) -> list[PlanView]:
    """Return styling for each plan; highlighted plans get the accent badge."""
    views: list[PlanView] = []
    for plan in plans:
        if plan.highlighted:
            views.append(
                PlanView(
                    plan=plan,
                    card_class="plan-card plan-card--highlight",
                    badge_class="badge badge--highlight",
                    price_class="price price--emphasis",
                )
            )
        else:
            views.append(
                PlanView(
                    plan=plan,
                    card_class="plan-card",
                    badge_class="badge badge--neutral",
                    price_class="price",
                )
            )
    return views


@dc.dataclass(frozen=True, slots=True)
class StepView:
    """Onboarding step with its anchor and connector flag."""

    step: Step
    anchor: str
    has_connector: bool


def step_views(steps: cabc.Sequence[Step]) -> list[StepView]:
    """Return step views; every step except the last links to the next."""
    total = len(steps)
    return [
        StepView(
            step=step,
            anchor=f"step-{step.number}",
            has_connector=index < total,
        )
        for index, step in enumerate(steps, start=1)
    ]


def create_environment(
    templates_dir: Path | None = None, *, code_renderer: CodeBlockRenderer | None = None
) -> Environment:
    """Build the Jinja environment shared by the page and section templates.

    The environment autoescapes HTML, trims block whitespace, and registers
    the ``highlight`` filter backed by ``code_renderer`` so step examples are
    syntax highlighted without altering their text.
    """
    renderer = code_renderer or CodeBlockRenderer()
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )

    def _highlight(code: str, language: str | None = None) -> Markup:
        return Markup(renderer.code_block(code, language))  # noqa: S704

    env.filters["highlight"] = _highlight
    env.globals["pygments_css"] = Markup(renderer.stylesheet)  # noqa: S704
    return env


def _render(env: Environment, key: str, **context: object) -> Markup:
    template = env.get_template(SECTION_TEMPLATE.format(key=key))
    return Markup(template.render(**context))  # noqa: S704


def render_header(
    env: Environment, nav_links: cabc.Sequence[NavLink], *, brand: str
) -> Markup:
    """Render the fixed header with the brand mark and navigation list."""
    return _render(env, "header", brand=brand, nav_links=list(nav_links))


def render_hero(env: Environment, hero: HeroContent | None) -> Markup:
    """Render the hero headline, stats, and calls to action."""
    return _render(env, "hero", hero=hero)


def render_trust_bar(env: Environment, items: cabc.Sequence[TrustItem]) -> Markup:
    """Render the trust bar statements."""
    return _render(env, "trust_bar", items=list(items))


def render_architecture(
    env: Environment, architecture: ArchitectureContent | None
) -> Markup:
    """Render the cluster architecture diagram."""
    control_plane: list[int] = []
    workers: list[int] = []
    if architecture is not None:
        control_plane = list(range(1, architecture.control_plane_nodes + 1))
        workers = list(range(1, architecture.worker_nodes + 1))
    return _render(
        env,
        "architecture",
        architecture=architecture,
        control_plane=control_plane,
        workers=workers,
    )


def render_features(env: Environment, content: FeaturesContent | None) -> Markup:
    """Render the feature cards and the capabilities grid."""
    return _render(env, "features", content=content or FeaturesContent())


def render_comparison(env: Environment, table: ComparisonTable | None) -> Markup:
    """Render the comparison table; an empty table keeps its header row."""
    resolved = table or ComparisonTable()
    return _render(
        env, "comparison", table=resolved, rows=comparison_rows(resolved)
    )


def render_pricing(env: Environment, content: PricingContent | None) -> Markup:
    """Render the pricing cards and the technical data table."""
    resolved = content or PricingContent()
    return _render(env, "pricing", content=resolved, plans=plan_views(resolved.plans))


def render_get_started(
    env: Environment, content: OnboardingContent | None
) -> Markup:
    """Render the numbered onboarding steps with copyable example blocks."""
    resolved = content or OnboardingContent()
    return _render(env, "get_started", content=resolved, steps=step_views(resolved.steps))


def render_footer(env: Environment, footer: FooterContent | None, *, brand: str) -> Markup:
    """Render the closing call to action and footer links."""
    return _render(env, "footer", footer=footer, brand=brand)


__all__ = [
    "AFFIRMATIVE_MARKER",
    "NEGATIVE_MARKER",
    "CellView",
    "PlanView",
    "RowView",
    "StatusMarker",
    "StepView",
    "comparison_rows",
    "create_environment",
    "plan_views",
    "render_architecture",
    "render_comparison",
    "render_features",
    "render_footer",
    "render_get_started",
    "render_header",
    "render_hero",
    "render_pricing",
    "render_trust_bar",
    "status_marker",
]
