"""Tests for composing and writing the full landing page.

These tests drive ``hek3ster_site.page`` with the packaged catalog and with
small hand-built catalogs to check section order, the navigation anchor
contract, deterministic output, and the file written by
``LandingPageBuilder.run``.

Run with::

    pytest tests/test_page.py
"""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from markupsafe import Markup

from hek3ster_site import sections
from hek3ster_site._constants import (
    COPY_FAILURE_MESSAGE,
    COPY_SUCCESS_MESSAGE,
    NAVIGABLE_ANCHORS,
)
from hek3ster_site.catalog import (
    ContentCatalog,
    NavLink,
    default_catalog,
    load_catalog,
)
from hek3ster_site.page import (
    PAGE_SECTIONS,
    AnchorMismatchError,
    LandingPageBuilder,
    PageSection,
    compose_page,
    navigation_problems,
    verify_navigation,
)

EXPECTED_ORDER = [
    "header",
    "hero",
    "trust_bar",
    "architecture",
    "features",
    "comparison",
    "pricing",
    "get_started",
    "footer",
]


@pytest.fixture(scope="module")
def rendered_page(tmp_path_factory: pytest.TempPathFactory) -> BeautifulSoup:
    output = tmp_path_factory.mktemp("site") / "index.html"
    LandingPageBuilder(default_catalog(), output=output).run()
    return BeautifulSoup(output.read_text(encoding="utf-8"), "html.parser")


def test_sections_compose_in_fixed_order() -> None:
    page = compose_page(default_catalog(), sections.create_environment())
    assert [section.key for section in page.sections] == EXPECTED_ORDER
    assert [section.key for section in page.region("main")] == EXPECTED_ORDER[1:-1]
    assert page.anchors == list(NAVIGABLE_ANCHORS)


def test_every_nav_anchor_matches_one_section(rendered_page: BeautifulSoup) -> None:
    links = rendered_page.select("[data-test='nav-link']")
    assert [link.get_text() for link in links] == [
        "Architecture",
        "Features",
        "Compare",
        "Savings",
        "Deploy",
    ]
    for link in links:
        anchor = link["href"].removeprefix("#")
        matches = rendered_page.select(f"[id='{anchor}']")
        assert len(matches) == 1, f"expected one element with id {anchor!r}, got {len(matches)}"
        assert matches[0].name == "section"


def test_page_regions_wrap_main_content(rendered_page: BeautifulSoup) -> None:
    body = rendered_page.body
    assert body is not None
    header = rendered_page.select_one("[data-test='site-header']")
    main = rendered_page.select_one("main")
    footer = rendered_page.select_one("[data-test='site-footer']")
    assert header is not None
    assert main is not None
    assert footer is not None
    assert main.select_one("[data-test='hero']") is not None
    assert main.select_one("[data-test='site-footer']") is None
    ids = [node["id"] for node in main.select("section.page-section")]
    assert ids == list(NAVIGABLE_ANCHORS)


def test_page_embeds_copy_messages_and_pygments_css(
    rendered_page: BeautifulSoup,
) -> None:
    script = "\n".join(node.get_text() for node in rendered_page.select("script"))
    assert COPY_SUCCESS_MESSAGE in script
    assert COPY_FAILURE_MESSAGE in script
    assert "navigator.clipboard" in script
    styles = "\n".join(node.get_text() for node in rendered_page.select("style"))
    assert ".codehilite" in styles


def test_packaged_page_shows_three_steps(rendered_page: BeautifulSoup) -> None:
    steps = rendered_page.select("[data-test='step']")
    assert len(steps) == 3
    assert len(rendered_page.select("[data-test='step-connector']")) == 2
    buttons = rendered_page.select("[data-test='copy-button']")
    assert [button["data-copy-text"] for button in buttons] == [
        step.code for step in default_catalog().onboarding.steps
    ]


def test_render_is_deterministic() -> None:
    builder = LandingPageBuilder(default_catalog())
    first = builder.render()
    assert first == builder.render()
    assert first.endswith("\n")


def test_run_creates_parent_directories(tmp_path: Path) -> None:
    output = tmp_path / "public" / "nested" / "index.html"
    path = LandingPageBuilder(default_catalog(), output=output).run()
    assert path == output
    assert output.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")


def test_empty_catalog_still_renders(tmp_path: Path) -> None:
    output = tmp_path / "index.html"
    LandingPageBuilder(ContentCatalog(), output=output).run()
    soup = BeautifulSoup(output.read_text(encoding="utf-8"), "html.parser")
    assert soup.select_one("[data-test='comparison-table'] tbody") is not None
    assert soup.select("[data-test='step']") == []


def test_packaged_navigation_has_no_problems() -> None:
    assert navigation_problems(default_catalog()) == []
    verify_navigation(default_catalog())


def test_navigation_reports_missing_anchor() -> None:
    catalog = dc.replace(
        default_catalog(),
        nav_links=(
            NavLink(label="Pricing", href="#pricing"),
            NavLink(label="Blog", href="#blog"),
            NavLink(label="GitHub", href="https://github.com/magenx/hek3ster"),
        ),
    )
    problems = navigation_problems(catalog)
    assert len(problems) == 1
    assert "'#blog'" in problems[0]
    with pytest.raises(AnchorMismatchError, match="Blog"):
        verify_navigation(catalog)


def test_navigation_reports_duplicate_anchor() -> None:
    duplicate = PageSection(
        "extra", "main", lambda env, catalog: Markup(""), anchor="pricing"
    )
    problems = navigation_problems(default_catalog(), layout=(*PAGE_SECTIONS, duplicate))
    assert problems == [
        "Navigation link 'Savings' targets '#pricing', which 2 sections define."
    ]


def test_navigation_accepts_step_anchors() -> None:
    catalog = dc.replace(
        default_catalog(),
        nav_links=(
            NavLink(label="Install", href="#step-1"),
            NavLink(label="Later", href="#step-9"),
        ),
    )
    problems = navigation_problems(catalog)
    assert len(problems) == 1
    assert "'#step-9'" in problems[0]


def test_malformed_records_only_drop_themselves(tmp_path: Path) -> None:
    catalog_path = tmp_path / "catalog.yaml"
    catalog_path.write_text(
        """
title: demo
features:
  cards:
    - title: Good
    - description: no title
pricing:
  plans:
    - badge: Nameless
    - name: hek3ster
      price: "$158"
  spec_rows:
    - label: Language
    - label: Runtime
      configuration: k3s
""".strip()
        + "\n",
        encoding="utf-8",
    )
    output = tmp_path / "index.html"
    LandingPageBuilder(load_catalog(catalog_path), output=output).run()
    soup = BeautifulSoup(output.read_text(encoding="utf-8"), "html.parser")
    cards = soup.select("[data-test='feature-card']")
    assert [card.h3.get_text() for card in cards] == ["Good"]
    prices = [node.get_text() for node in soup.select("[data-test='plan-price']")]
    assert prices == ["$158"]
    assert len(soup.select("[data-test='spec-row']")) == 1
