"""Builders turning raw catalog mappings into frozen content records.

A malformed record is dropped and its siblings are kept, so a single bad
entry only removes itself from the page. Unknown comparison statuses are the
exception: they raise ``UnknownStatusError`` because the marker for such a
cell cannot be decided.
"""

from __future__ import annotations

import types
import typing as typ

from .helpers import (
    _as_count,
    _as_mapping,
    _literal_block,
    _mapping_entries,
    _optional_str,
    _section_mapping,
    _string_entries,
)
from .models import (
    ArchitectureContent,
    CallToAction,
    CapabilityItem,
    CellStatus,
    ClusterSpecRow,
    ComparisonCell,
    ComparisonRow,
    ComparisonTable,
    Competitor,
    ContentCatalog,
    FeatureItem,
    FeaturesContent,
    FooterContent,
    HeroContent,
    HeroStat,
    NavLink,
    OnboardingContent,
    PlanFeature,
    PricingContent,
    PricingPlan,
    Step,
    TrustItem,
    UnknownStatusError,
)

DEFAULT_TITLE = "hek3ster"


def _build_catalog(payload: typ.Mapping[str, typ.Any]) -> ContentCatalog:
    """Build the full content catalog from the top-level mapping."""
    data = _as_mapping(payload, context="Catalog")
    title = _optional_str(data.get("title")) or DEFAULT_TITLE
    navigation = _section_mapping(data.get("navigation"))
    hero_raw = data.get("hero")
    architecture_raw = data.get("architecture")
    footer_raw = data.get("footer")
    return ContentCatalog(
        title=title,
        brand=_optional_str(data.get("brand")) or title,
        description=_optional_str(data.get("description")),
        nav_links=_build_nav_links(navigation.get("links")),
        hero=_build_hero(hero_raw) if hero_raw else None,
        trust_items=_build_trust_items(data.get("trust_bar")),
        architecture=_build_architecture(architecture_raw) if architecture_raw else None,
        features=_build_features(data.get("features")),
        comparison=_build_comparison(data.get("comparison")),
        pricing=_build_pricing(data.get("pricing")),
        onboarding=_build_onboarding(data.get("get_started")),
        footer=_build_footer(footer_raw) if footer_raw else None,
    )


def _build_nav_links(entries: object | None) -> tuple[NavLink, ...]:
    """Build header or footer links; entries without a label or href are dropped."""
    links: list[NavLink] = []
    for entry in _mapping_entries(entries):
        label = _optional_str(entry.get("label"))
        href = _optional_str(entry.get("href"))
        if label and href:
            links.append(NavLink(label=label, href=href))
    return tuple(links)


def _build_ctas(entries: object | None) -> tuple[CallToAction, ...]:
    """Build call-to-action buttons for the hero and footer."""
    buttons: list[CallToAction] = []
    for entry in _mapping_entries(entries):
        label = _optional_str(entry.get("label"))
        href = _optional_str(entry.get("href"))
        if not (label and href):
            continue
        buttons.append(
            CallToAction(
                label=label,
                href=href,
                variant=_optional_str(entry.get("variant")) or "primary",
                external=bool(entry.get("external", False)),
            )
        )
    return tuple(buttons)


def _build_hero(payload: object) -> HeroContent:
    """Build the hero content block."""
    data = _section_mapping(payload)
    stats: list[HeroStat] = []
    for entry in _mapping_entries(data.get("stats")):
        value = _optional_str(entry.get("value"))
        label = _optional_str(entry.get("label"))
        if value and label:
            stats.append(HeroStat(value=value, label=label))
    return HeroContent(
        eyebrow=_optional_str(data.get("eyebrow")),
        title_primary=_optional_str(data.get("title_primary")),
        title_secondary=_optional_str(data.get("title_secondary")),
        description=_optional_str(data.get("description")),
        stats=tuple(stats),
        ctas=_build_ctas(data.get("ctas")),
    )


def _build_trust_items(entries: object | None) -> tuple[TrustItem, ...]:
    """Build trust bar statements from strings or ``label`` mappings."""
    match entries:
        case list() as items:
            pass
        case _:
            return ()
    trust: list[TrustItem] = []
    for item in items:
        match item:
            case {"label": label}:
                text = _optional_str(label)
            case str() as label:
                text = _optional_str(label)
            case _:
                continue
        if text:
            trust.append(TrustItem(label=text))
    return tuple(trust)


def _build_architecture(payload: object) -> ArchitectureContent:
    """Build the architecture diagram copy and node counts."""
    data = _section_mapping(payload)
    return ArchitectureContent(
        heading=_optional_str(data.get("heading")),
        description=_optional_str(data.get("description")),
        control_plane_nodes=_as_count(data.get("control_plane_nodes"), default=3),
        worker_nodes=_as_count(data.get("worker_nodes"), default=3),
        legend=_string_entries(data.get("legend")),
    )


def _build_features(payload: object | None) -> FeaturesContent:
    """Build feature cards and the capabilities grid; untitled entries are dropped."""
    data = _section_mapping(payload)
    cards: list[FeatureItem] = []
    for entry in _mapping_entries(data.get("cards")):
        title = _optional_str(entry.get("title"))
        if title is None:
            continue
        cards.append(
            FeatureItem(
                title=title,
                description=_optional_str(entry.get("description")),
                highlights=_string_entries(entry.get("highlights")),
            )
        )
    capabilities: list[CapabilityItem] = []
    for entry in _mapping_entries(data.get("capabilities")):
        title = _optional_str(entry.get("title"))
        if title is None:
            continue
        capabilities.append(
            CapabilityItem(
                title=title, description=_optional_str(entry.get("description"))
            )
        )
    return FeaturesContent(
        features=tuple(cards),
        capabilities_heading=_optional_str(data.get("capabilities_heading")),
        capabilities_lede=_optional_str(data.get("capabilities_lede")),
        capabilities=tuple(capabilities),
    )


def _build_comparison(payload: object | None) -> ComparisonTable:
    """Build the comparison table.

    Competitors without a key and repeated keys are dropped, as are rows
    without a factor. A cell that is missing or lacks a value is left out of
    its row; the renderer draws it as an empty cell and the rest of the row
    is unaffected.

    Raises
    ------
    UnknownStatusError
        If a cell carries a status outside ``good``, ``bad``, ``neutral``.
    """
    data = _section_mapping(payload)
    competitors: list[Competitor] = []
    seen: set[str] = set()
    for entry in _mapping_entries(data.get("competitors")):
        key = _optional_str(entry.get("key"))
        if key is None or key in seen:
            continue
        seen.add(key)
        competitors.append(
            Competitor(
                key=key,
                label=_optional_str(entry.get("label")) or key,
                primary=bool(entry.get("primary", False)),
            )
        )

    rows: list[ComparisonRow] = []
    for entry in _mapping_entries(data.get("rows")):
        factor = _optional_str(entry.get("factor"))
        if factor is None:
            continue
        cells_raw = _section_mapping(entry.get("cells"))
        cells: dict[str, ComparisonCell] = {}
        for competitor in competitors:
            cell = _build_cell(
                cells_raw.get(competitor.key), factor=factor, key=competitor.key
            )
            if cell is not None:
                cells[competitor.key] = cell
        rows.append(ComparisonRow(factor=factor, cells=types.MappingProxyType(cells)))

    return ComparisonTable(
        heading=_optional_str(data.get("heading")),
        lede=_optional_str(data.get("lede")),
        competitors=tuple(competitors),
        rows=tuple(rows),
        footnote=_optional_str(data.get("footnote")),
    )


def _build_cell(payload: object, *, factor: str, key: str) -> ComparisonCell | None:
    """Build one comparison cell, or ``None`` when it has no value."""
    match payload:
        case {"value": value, **rest} if value is not None:
            status_raw = rest.get("status") or CellStatus.NEUTRAL.value
        case _:
            return None
    try:
        status = CellStatus(str(status_raw).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in CellStatus)
        msg = (
            f"Comparison cell '{factor}'/'{key}' has unknown status "
            f"{status_raw!r}; expected one of {allowed}."
        )
        raise UnknownStatusError(msg) from exc
    return ComparisonCell(value=str(value).strip(), status=status)


def _build_pricing(payload: object | None) -> PricingContent:
    """Build pricing cards and the technical data table.

    Plans without a name and spec rows without a label or configuration are
    dropped.
    """
    data = _section_mapping(payload)
    plans: list[PricingPlan] = []
    for entry in _mapping_entries(data.get("plans")):
        name = _optional_str(entry.get("name"))
        if name is None:
            continue
        features: list[PlanFeature] = []
        for feature in _mapping_entries(entry.get("features")):
            text = _optional_str(feature.get("text"))
            if text:
                features.append(
                    PlanFeature(text=text, included=bool(feature.get("included", False)))
                )
        plans.append(
            PricingPlan(
                name=name,
                badge=_optional_str(entry.get("badge")),
                price=_optional_str(entry.get("price")),
                subtitle=_optional_str(entry.get("subtitle")),
                features=tuple(features),
                highlighted=bool(entry.get("highlighted", False)),
                period=_optional_str(entry.get("period")) or "/month",
            )
        )
    spec_rows: list[ClusterSpecRow] = []
    for entry in _mapping_entries(data.get("spec_rows")):
        label = _optional_str(entry.get("label"))
        configuration = _optional_str(entry.get("configuration"))
        if label is None or configuration is None:
            continue
        spec_rows.append(
            ClusterSpecRow(
                label=label,
                configuration=configuration,
                description=_optional_str(entry.get("description")),
            )
        )
    return PricingContent(
        heading=_optional_str(data.get("heading")),
        lede=_optional_str(data.get("lede")),
        plans=tuple(plans),
        spec_title=_optional_str(data.get("spec_title")),
        spec_rows=tuple(spec_rows),
    )


def _build_onboarding(payload: object | None) -> OnboardingContent:
    """Build the onboarding steps.

    Steps without a title are dropped. The remaining steps keep their
    authored order and are numbered by position, so the displayed numbers
    always run 1..N even when an authored ``number`` disagrees.
    """
    data = _section_mapping(payload)
    steps: list[Step] = []
    for entry in _mapping_entries(data.get("steps")):
        title = _optional_str(entry.get("title"))
        if title is None:
            continue
        steps.append(
            Step(
                number=len(steps) + 1,
                title=title,
                description=_optional_str(entry.get("description")),
                code=_literal_block(entry.get("code")),
                language=_optional_str(entry.get("language")),
            )
        )
    return OnboardingContent(
        heading=_optional_str(data.get("heading")),
        lede=_optional_str(data.get("lede")),
        steps=tuple(steps),
    )


def _build_footer(payload: object) -> FooterContent:
    """Build the closing call to action and footer links."""
    data = _section_mapping(payload)
    return FooterContent(
        heading=_optional_str(data.get("heading")),
        lede=_optional_str(data.get("lede")),
        ctas=_build_ctas(data.get("ctas")),
        tagline=_optional_str(data.get("tagline")),
        social_links=_build_nav_links(data.get("social_links")),
    )


__all__ = [
    "_build_catalog",
    "_build_cell",
    "_build_comparison",
    "_build_ctas",
    "_build_features",
    "_build_footer",
    "_build_hero",
    "_build_nav_links",
    "_build_onboarding",
    "_build_pricing",
    "_build_trust_items",
]
