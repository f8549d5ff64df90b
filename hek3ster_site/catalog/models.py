"""Typed dataclasses describing the landing page content catalog."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ


class CatalogError(ValueError):
    """Raised when the content catalog is invalid or incomplete."""


class UnknownStatusError(CatalogError):
    """Raised when a comparison status falls outside ``CellStatus``."""


class CellStatus(enum.StrEnum):
    """Closed set of verdicts a comparison cell can carry."""

    GOOD = "good"
    BAD = "bad"
    NEUTRAL = "neutral"


@dc.dataclass(frozen=True, slots=True)
class NavLink:
    """Header navigation entry pointing at a page anchor or external URL."""

    label: str
    href: str

    @property
    def anchor(self) -> str | None:
        """Return the in-page anchor targeted by ``href``, if any."""
        if self.href.startswith("#") and len(self.href) > 1:
            return self.href[1:]
        return None


@dc.dataclass(frozen=True, slots=True)
class CallToAction:
    """Button-styled hyperlink used by the hero and footer."""

    label: str
    href: str
    variant: str = "primary"
    external: bool = False


@dc.dataclass(frozen=True, slots=True)
class HeroStat:
    """Headline figure shown beneath the hero copy."""

    value: str
    label: str


@dc.dataclass(frozen=True, slots=True)
class HeroContent:
    """Hero copy, headline stats, and calls to action."""

    eyebrow: str | None
    title_primary: str | None
    title_secondary: str | None
    description: str | None
    stats: tuple[HeroStat, ...] = ()
    ctas: tuple[CallToAction, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class TrustItem:
    """Single statement rendered in the trust bar."""

    label: str


@dc.dataclass(frozen=True, slots=True)
class ArchitectureContent:
    """Copy and node counts for the cluster architecture diagram."""

    heading: str | None
    description: str | None
    control_plane_nodes: int = 3
    worker_nodes: int = 3
    legend: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class FeatureItem:
    """Primary feature card with its highlight bullets."""

    title: str
    description: str | None
    highlights: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class CapabilityItem:
    """Installed tool or add-on shown in the capabilities grid."""

    title: str
    description: str | None


@dc.dataclass(frozen=True, slots=True)
class FeaturesContent:
    """Feature cards and the capabilities grid that follows them."""

    features: tuple[FeatureItem, ...] = ()
    capabilities_heading: str | None = None
    capabilities_lede: str | None = None
    capabilities: tuple[CapabilityItem, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class Competitor:
    """Column of the comparison table."""

    key: str
    label: str
    primary: bool = False


@dc.dataclass(frozen=True, slots=True)
class ComparisonCell:
    """Display value and verdict for one competitor on one factor."""

    value: str
    status: CellStatus


@dc.dataclass(frozen=True, slots=True)
class ComparisonRow:
    """One comparison factor with a cell per competitor key."""

    factor: str
    cells: typ.Mapping[str, ComparisonCell]

    def cell(self, key: str) -> ComparisonCell | None:
        """Return the cell recorded for ``key`` or ``None`` when missing."""
        return self.cells.get(key)


@dc.dataclass(frozen=True, slots=True)
class ComparisonTable:
    """Competitor columns and factor rows, in display order."""

    heading: str | None = None
    lede: str | None = None
    competitors: tuple[Competitor, ...] = ()
    rows: tuple[ComparisonRow, ...] = ()
    footnote: str | None = None


@dc.dataclass(frozen=True, slots=True)
class PlanFeature:
    """Bullet inside a pricing card."""

    text: str
    included: bool


@dc.dataclass(frozen=True, slots=True)
class PricingPlan:
    """Pricing card; ``price`` is displayed exactly as authored."""

    name: str
    badge: str | None = None
    price: str | None = None
    subtitle: str | None = None
    features: tuple[PlanFeature, ...] = ()
    highlighted: bool = False
    period: str = "/month"


@dc.dataclass(frozen=True, slots=True)
class ClusterSpecRow:
    """Row of the technical data table."""

    label: str
    configuration: str
    description: str | None


@dc.dataclass(frozen=True, slots=True)
class PricingContent:
    """Savings heading, pricing cards, and the technical data table."""

    heading: str | None = None
    lede: str | None = None
    plans: tuple[PricingPlan, ...] = ()
    spec_title: str | None = None
    spec_rows: tuple[ClusterSpecRow, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class Step:
    """Numbered onboarding step with a literal example block."""

    number: int
    title: str
    description: str | None = None
    code: str | None = None
    language: str | None = None


@dc.dataclass(frozen=True, slots=True)
class OnboardingContent:
    """Get-started heading and the ordered onboarding steps."""

    heading: str | None = None
    lede: str | None = None
    steps: tuple[Step, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class FooterContent:
    """Closing call to action, tagline, and social links."""

    heading: str | None = None
    lede: str | None = None
    ctas: tuple[CallToAction, ...] = ()
    tagline: str | None = None
    social_links: tuple[NavLink, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ContentCatalog:
    """Every content slice the landing page is rendered from."""

    title: str = "hek3ster"
    brand: str = "hek3ster"
    description: str | None = None
    nav_links: tuple[NavLink, ...] = ()
    hero: HeroContent | None = None
    trust_items: tuple[TrustItem, ...] = ()
    architecture: ArchitectureContent | None = None
    features: FeaturesContent = dc.field(default_factory=FeaturesContent)
    comparison: ComparisonTable = dc.field(default_factory=ComparisonTable)
    pricing: PricingContent = dc.field(default_factory=PricingContent)
    onboarding: OnboardingContent = dc.field(default_factory=OnboardingContent)
    footer: FooterContent | None = None

    def get_step(self, number: int) -> Step:
        """Return the onboarding step numbered ``number``."""
        for step in self.onboarding.steps:
            if step.number == number:
                return step
        available = ", ".join(str(step.number) for step in self.onboarding.steps)
        msg = f"Unknown step {number}. Known steps: {available or 'none'}"
        raise KeyError(msg)


__all__ = [
    "ArchitectureContent",
    "CallToAction",
    "CapabilityItem",
    "CatalogError",
    "CellStatus",
    "ClusterSpecRow",
    "ComparisonCell",
    "ComparisonRow",
    "ComparisonTable",
    "Competitor",
    "ContentCatalog",
    "FeatureItem",
    "FeaturesContent",
    "FooterContent",
    "HeroContent",
    "HeroStat",
    "NavLink",
    "OnboardingContent",
    "PlanFeature",
    "PricingContent",
    "PricingPlan",
    "Step",
    "TrustItem",
    "UnknownStatusError",
]
