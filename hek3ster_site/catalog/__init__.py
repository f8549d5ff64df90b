"""Content catalog for the hek3ster landing page.

This subpackage parses the catalog YAML (the packaged
``hek3ster_site/data/catalog.yaml`` by default) into frozen dataclasses that
the section renderers consume. Sequences keep their authored order; steps,
comparison rows, and technical data rows are displayed in that order. The
primary entry points are :func:`load_catalog` and :func:`default_catalog`,
the latter caching the packaged catalog for the lifetime of the process.

Examples
--------
>>> from hek3ster_site.catalog import default_catalog
>>> catalog = default_catalog()
>>> catalog.brand
'hek3ster'
>>> [link.anchor for link in catalog.nav_links]
['architecture', 'features', 'comparison', 'pricing', 'docs']
"""

from .loader import default_catalog, load_catalog
from .models import (
    ArchitectureContent,
    CallToAction,
    CapabilityItem,
    CatalogError,
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
    "default_catalog",
    "load_catalog",
]
