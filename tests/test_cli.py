from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from hek3ster_site import cli
from hek3ster_site.clipboard import CopyResult

BROKEN_NAV_CATALOG = """
title: demo
navigation:
  links:
    - label: Deploy
      href: "#docs"
    - label: Blog
      href: "#blog"
"""


def test_generate_writes_page(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output = tmp_path / "public" / "index.html"
    cli.generate(output=output)
    assert output.exists()
    assert capsys.readouterr().out.strip() == f"wrote {output}"


def test_check_passes_for_packaged_catalog(capsys: pytest.CaptureFixture[str]) -> None:
    cli.check()
    assert capsys.readouterr().out.strip() == "navigation ok"


def test_check_reports_broken_anchor(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    catalog = tmp_path / "catalog.yaml"
    catalog.write_text(BROKEN_NAV_CATALOG.strip() + "\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.check(catalog=catalog)
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert "'#blog'" in out
    assert "Deploy" not in out


def test_steps_lists_packaged_steps(capsys: pytest.CaptureFixture[str]) -> None:
    cli.steps()
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(".", 1)[0] for line in lines] == ["1", "2", "3"]
    assert lines[2].startswith("3. Create Your Cluster")


def test_copy_step_passes_code_verbatim(mocker: MockerFixture) -> None:
    result = CopyResult(text="", ok=True)
    copier = mocker.patch.object(
        cli, "copy_to_clipboard", new=mocker.AsyncMock(return_value=result)
    )
    cli.copy(3)
    (text,), _ = copier.call_args
    assert "hek3ster create --config cluster.yaml" in text
    assert text == cli.default_catalog().get_step(3).code


def test_copy_failure_exits_non_zero(mocker: MockerFixture) -> None:
    result = CopyResult(text="x", ok=False, error="denied")
    copier = mocker.patch.object(
        cli, "copy_to_clipboard", new=mocker.AsyncMock(return_value=result)
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.copy(text="x")
    assert excinfo.value.code == 1
    copier.assert_awaited_once_with("x")


def test_copy_requires_exactly_one_source() -> None:
    with pytest.raises(ValueError, match="exactly one"):
        cli.copy()
    with pytest.raises(ValueError, match="exactly one"):
        cli.copy(1, text="x")


def test_format_path_prefers_relative(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    assert cli._format_path(tmp_path / "public" / "index.html") == str(
        Path("public") / "index.html"
    )
    assert cli._format_path(Path("relative.html")) == "relative.html"
