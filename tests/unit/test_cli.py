"""Unit tests for the txresults CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from txresults.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("TXRESULTS_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


def test_verify_bundled_snapshot_passes() -> None:
    result = runner.invoke(app, ["verify"])
    assert result.exit_code == 0, result.output
    assert "OK" in result.output
    assert "in sync" in result.output


def test_verify_reports_drift(tmp_path: Path) -> None:
    snapshot = tmp_path / "codes.yaml"
    snapshot.write_text("codes:\n  1: INVALID_TX\n  99999: BRAND_NEW_CODE\n", encoding="utf-8")
    result = runner.invoke(app, ["verify", "--enumeration", str(snapshot)])
    assert result.exit_code == 1
    assert "code 1" in result.output
    assert "code 99999" in result.output
    assert "<missing>" in result.output


def test_verify_first_stops_early(tmp_path: Path) -> None:
    snapshot = tmp_path / "codes.yaml"
    snapshot.write_text("codes:\n  1: INVALID_TX\n  99999: BRAND_NEW_CODE\n", encoding="utf-8")
    result = runner.invoke(app, ["verify", "--enumeration", str(snapshot), "--first"])
    assert result.exit_code == 1
    assert "code 1" in result.output
    assert "code 99999" not in result.output


def test_verify_uses_config_enumeration(tmp_path: Path) -> None:
    (tmp_path / "codes.yaml").write_text("codes:\n  0: OK\n", encoding="utf-8")
    (tmp_path / "txresults.yaml").write_text("verifier:\n  enumeration: codes.yaml\n", encoding="utf-8")
    result = runner.invoke(app, ["verify"])
    assert result.exit_code == 0, result.output
    assert "1 result code(s)" in result.output


def test_verify_unreadable_enumeration_exits_2(tmp_path: Path) -> None:
    result = runner.invoke(app, ["verify", "--enumeration", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 2
    assert "Cannot read" in result.output


def test_lookup_known_and_unknown() -> None:
    known = runner.invoke(app, ["lookup", "22"])
    assert known.exit_code == 0
    assert known.output.strip() == "SUCCESS"
    unknown = runner.invoke(app, ["lookup", "99999"])
    assert unknown.exit_code == 0
    assert unknown.output.strip() == "UNKNOWN_RESULT_CODE"


def test_lookup_uses_configured_sentinel(tmp_path: Path) -> None:
    (tmp_path / "txresults.yaml").write_text("lookup:\n  unknown_name: NOT_A_CODE\n", encoding="utf-8")
    result = runner.invoke(app, ["lookup", "99999"])
    assert result.output.strip() == "NOT_A_CODE"


def test_lookup_strict_unknown_exits_1() -> None:
    result = runner.invoke(app, ["lookup", "99999", "--strict"])
    assert result.exit_code == 1
    assert "Unknown result code: 99999" in result.output


def test_list_prints_codes_in_order() -> None:
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines[0] == "0\tOK"
    codes = [int(line.split("\t")[0]) for line in lines]
    assert codes == sorted(codes)


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("txresults ")


def test_lookup_unknown_differs_from_real_unknown_code() -> None:
    real = runner.invoke(app, ["lookup", "21"])
    absent = runner.invoke(app, ["lookup", "99999"])
    assert real.output.strip() == "UNKNOWN"
    assert real.output != absent.output


def test_lookup_strict_reports_bad_config(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("- not\n- a mapping\n", encoding="utf-8")
    for args in (["lookup", "22", "--config", str(bad)], ["lookup", "22", "--strict", "--config", str(bad)]):
        result = runner.invoke(app, args)
        assert result.exit_code == 2
        assert "root must be mapping" in result.output


def test_verify_resolves_enumeration_next_to_config(tmp_path: Path) -> None:
    conf_dir = tmp_path / "etc"
    conf_dir.mkdir()
    (conf_dir / "codes.yaml").write_text("codes:\n  22: SUCCESS\n", encoding="utf-8")
    (conf_dir / "txresults.yaml").write_text("verifier:\n  enumeration: codes.yaml\n", encoding="utf-8")
    result = runner.invoke(app, ["verify", "--config", str(conf_dir / "txresults.yaml")])
    assert result.exit_code == 0, result.output
    assert "1 result code(s)" in result.output
