"""Unit tests for enumeration sources."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from txresults.errors import EnumerationLoadError
from txresults.sources import (
    EnumerationSource,
    FileSource,
    MappingSource,
    ProtoEnumSource,
    bundled_snapshot,
)
from txresults.verifier import assert_in_sync


def test_load_yaml_snapshot(tmp_path: Path) -> None:
    target = tmp_path / "codes.yaml"
    target.write_text(
        "protocol: test-proto\nversion: '1.2'\ncodes:\n  0: OK\n  1: INVALID_TRANSACTION\n",
        encoding="utf-8",
    )
    source = FileSource.load(target)
    assert source.protocol == "test-proto"
    assert source.version == "1.2"
    assert dict(source.items()) == {0: "OK", 1: "INVALID_TRANSACTION"}
    assert source.label == "test-proto@1.2 (codes.yaml)"


def test_load_json_snapshot_converts_string_keys(tmp_path: Path) -> None:
    target = tmp_path / "codes.json"
    target.write_text(
        json.dumps({"protocol": "p", "version": "2", "codes": {"0": "OK", "22": "SUCCESS"}}),
        encoding="utf-8",
    )
    source = FileSource.load(target)
    assert source.codes == {0: "OK", 22: "SUCCESS"}


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(EnumerationLoadError, match="Cannot read"):
        FileSource.load(tmp_path / "nope.yaml")


def test_load_invalid_yaml_has_line_column(tmp_path: Path) -> None:
    target = tmp_path / "codes.yaml"
    target.write_text("codes:\n  0: [\n", encoding="utf-8")
    with pytest.raises(EnumerationLoadError) as exc_info:
        FileSource.load(target)
    assert "codes.yaml:" in str(exc_info.value)


def test_load_invalid_json_raises(tmp_path: Path) -> None:
    target = tmp_path / "codes.json"
    target.write_text("{not json", encoding="utf-8")
    with pytest.raises(EnumerationLoadError, match="Invalid JSON"):
        FileSource.load(target)


@pytest.mark.parametrize(
    ("payload", "match"),
    [
        ("- a\n- b\n", "root must be mapping"),
        ("protocol: p\n", "'codes' must be mapping"),
        ("codes:\n  zero: OK\n", "must be integer"),
        ("codes:\n  0: 12\n", "non-empty string"),
        ("codes:\n  true: OK\n", "must be integer"),
    ],
)
def test_load_rejects_malformed_snapshot(tmp_path: Path, payload: str, match: str) -> None:
    target = tmp_path / "codes.yaml"
    target.write_text(payload, encoding="utf-8")
    with pytest.raises(EnumerationLoadError, match=match):
        FileSource.load(target)


def test_names_are_kept_verbatim(tmp_path: Path) -> None:
    target = tmp_path / "codes.yaml"
    target.write_text("codes:\n  0: ' Ok '\n", encoding="utf-8")
    assert FileSource.load(target).codes == {0: " Ok "}


def test_missing_metadata_defaults_to_unknown(tmp_path: Path) -> None:
    target = tmp_path / "codes.yaml"
    target.write_text("codes:\n  0: OK\n", encoding="utf-8")
    source = FileSource.load(target)
    assert source.protocol == "unknown"
    assert source.version == "unknown"


def test_sources_satisfy_protocol() -> None:
    assert isinstance(MappingSource({0: "OK"}), EnumerationSource)
    assert isinstance(bundled_snapshot(), EnumerationSource)


def test_bundled_snapshot_has_no_duplicate_names() -> None:
    names = list(bundled_snapshot().codes.values())
    assert len(names) == len(set(names))


class _ResponseCodeEnumWrapper:
    """Stand-in for a compiled protobuf EnumTypeWrapper."""

    class DESCRIPTOR:
        full_name = "proto.ResponseCodeEnum"

    def items(self) -> list[tuple[str, int]]:
        return [("OK", 0), ("INVALID_TRANSACTION", 1), ("SUCCESS", 22)]


def test_proto_enum_source_flips_name_number_pairs() -> None:
    source = ProtoEnumSource(_ResponseCodeEnumWrapper())
    assert list(source.items()) == [(0, "OK"), (1, "INVALID_TRANSACTION"), (22, "SUCCESS")]
    assert source.label == "proto.ResponseCodeEnum"
    assert isinstance(source, EnumerationSource)
    assert assert_in_sync(source).checked == 3
