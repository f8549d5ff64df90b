"""Behaviour tests for copying onboarding examples to the clipboard.

These scenarios drive ``copy_to_clipboard`` with an in-memory clipboard that
either accepts or denies writes, and check that the copied text is stored
verbatim and that each attempt yields exactly one notification of the right
kind.

The tests are implemented as pytest-bdd scenarios backed by the
``copy_example.feature`` feature file.

Usage:
    Run these behaviour tests with pytest, for example:

        pytest tests/bdd/test_copy_example.py -v
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from hek3ster_site._constants import COPY_FAILURE_MESSAGE, COPY_SUCCESS_MESSAGE
from hek3ster_site.clipboard import ClipboardUnavailableError, copy_to_clipboard

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "copy_example.feature"
)
scenarios(FEATURE_FILE)

EXAMPLE = "hek3ster create --config cluster.yaml"


class MemoryClipboard:
    """Clipboard double; ``deny`` makes every write fail."""

    def __init__(self, *, deny: bool = False) -> None:
        self.deny = deny
        self.contents: str | None = None

    async def write(self, text: str) -> None:
        if self.deny:
            msg = "clipboard permission denied"
            raise ClipboardUnavailableError(msg)
        self.contents = text


class MemoryNotifier:
    """Notifier double collecting ``(kind, message)`` pairs."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.events.append(("success", message))

    def failure(self, message: str) -> None:
        self.events.append(("failure", message))


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a working clipboard")
def given_working_clipboard(scenario_state: dict[str, object]) -> None:
    """Install a clipboard that accepts writes."""
    scenario_state["clipboard"] = MemoryClipboard()


@given("a clipboard that denies writes")
def given_denied_clipboard(scenario_state: dict[str, object]) -> None:
    """Install a clipboard that rejects every write."""
    scenario_state["clipboard"] = MemoryClipboard(deny=True)


@when(f'I copy the example "{EXAMPLE}"')
def when_copy_example(scenario_state: dict[str, object]) -> None:
    """Copy the example text and record the notifications."""
    clipboard: MemoryClipboard = scenario_state["clipboard"]  # type: ignore[assignment]
    notifier = MemoryNotifier()
    scenario_state["notifier"] = notifier
    scenario_state["result"] = asyncio.run(
        copy_to_clipboard(EXAMPLE, writer=clipboard, notifier=notifier)
    )


@then(f'the clipboard holds "{EXAMPLE}"')
def then_clipboard_holds_example(scenario_state: dict[str, object]) -> None:
    """Verify the clipboard contains exactly the example text."""
    clipboard: MemoryClipboard = scenario_state["clipboard"]  # type: ignore[assignment]
    assert clipboard.contents == EXAMPLE, (
        f"expected clipboard to hold {EXAMPLE!r}, got {clipboard.contents!r}"
    )


@then("the clipboard is unchanged")
def then_clipboard_unchanged(scenario_state: dict[str, object]) -> None:
    """Verify a denied write leaves the clipboard untouched."""
    clipboard: MemoryClipboard = scenario_state["clipboard"]  # type: ignore[assignment]
    assert clipboard.contents is None
    assert not scenario_state["result"].ok  # type: ignore[attr-defined]


@then("exactly one success notification is shown")
def then_one_success(scenario_state: dict[str, object]) -> None:
    """Verify a single success notification was emitted."""
    notifier: MemoryNotifier = scenario_state["notifier"]  # type: ignore[assignment]
    assert notifier.events == [("success", COPY_SUCCESS_MESSAGE)], (
        f"expected one success notification, got {notifier.events!r}"
    )


@then("exactly one failure notification is shown")
def then_one_failure(scenario_state: dict[str, object]) -> None:
    """Verify a single failure notification was emitted."""
    notifier: MemoryNotifier = scenario_state["notifier"]  # type: ignore[assignment]
    assert len(notifier.events) == 1, (
        f"expected one notification, got {notifier.events!r}"
    )
    kind, message = notifier.events[0]
    assert kind == "failure"
    assert message.startswith(COPY_FAILURE_MESSAGE)
