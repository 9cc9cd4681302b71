"""External enumeration sources the table is verified against."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml  # type: ignore[import-untyped]

from txresults.errors import EnumerationLoadError

BUNDLED_SNAPSHOT = "response_codes.yaml"


@runtime_checkable
class EnumerationSource(Protocol):
    """Anything that can list authoritative ``(code, name)`` pairs."""

    label: str

    def items(self) -> Iterable[tuple[int, str]]: ...


class MappingSource:
    """Wrap an in-memory ``{code: name}`` mapping."""

    def __init__(self, mapping: Mapping[int, str], label: str = "mapping") -> None:
        self._mapping = mapping
        self.label = label

    def items(self) -> Iterable[tuple[int, str]]:
        return self._mapping.items()


class EnumClassSource:
    """Adapt a Python ``Enum`` whose member values are the integer codes."""

    def __init__(self, enum_cls: type[Enum]) -> None:
        self._enum_cls = enum_cls
        self.label = enum_cls.__name__

    def items(self) -> Iterable[tuple[int, str]]:
        return [(int(member.value), member.name) for member in self._enum_cls]


class ProtoEnumSource:
    """Adapt a protobuf enum wrapper such as ``response_code_pb2.ResponseCodeEnum``.

    The wrapper's ``items()`` yields ``(name, number)``; this flips each pair
    into ``(code, name)``.
    """

    def __init__(self, wrapper: Any, label: str | None = None) -> None:
        self._wrapper = wrapper
        descriptor = getattr(wrapper, "DESCRIPTOR", None)
        self.label = label or getattr(descriptor, "full_name", None) or type(wrapper).__name__

    def items(self) -> Iterable[tuple[int, str]]:
        return [(int(number), name) for name, number in self._wrapper.items()]


@dataclass(frozen=True)
class FileSource:
    """A versioned snapshot of the enumeration loaded from YAML or JSON."""

    path: Path
    protocol: str
    version: str
    codes: dict[int, str] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return f"{self.protocol}@{self.version} ({self.path.name})"

    def items(self) -> Iterable[tuple[int, str]]:
        return self.codes.items()

    @classmethod
    def load(cls, path: str | Path) -> FileSource:
        target = Path(path)
        try:
            text = target.read_text(encoding="utf-8")
        except OSError as exc:
            raise EnumerationLoadError(f"Cannot read enumeration file {target}: {exc}") from exc
        return cls.parse(text, target)

    @classmethod
    def parse(cls, text: str, path: Path) -> FileSource:
        data = _decode(text, path)
        if not isinstance(data, dict):
            raise EnumerationLoadError(f"Enumeration root must be mapping: {path}")
        raw_codes = data.get("codes")
        if not isinstance(raw_codes, dict):
            raise EnumerationLoadError(f"Enumeration 'codes' must be mapping: {path}")
        codes: dict[int, str] = {}
        for raw_code, name in raw_codes.items():
            code = _as_code(raw_code)
            if code is None:
                raise EnumerationLoadError(f"Result code must be integer, got {raw_code!r}: {path}")
            if not isinstance(name, str) or not name:
                raise EnumerationLoadError(f"Name for result code {code} must be non-empty string: {path}")
            codes[code] = name
        return cls(
            path=path,
            protocol=str(data.get("protocol") or "unknown"),
            version=str(data.get("version") or "unknown"),
            codes=codes,
        )


def bundled_snapshot() -> FileSource:
    """Load the protocol snapshot shipped inside the package."""
    resource = resources.files("txresults") / "protocol" / BUNDLED_SNAPSHOT
    return FileSource.parse(resource.read_text(encoding="utf-8"), Path(str(resource)))


def as_source(value: EnumerationSource | Mapping[int, str]) -> EnumerationSource:
    if isinstance(value, Mapping):
        return MappingSource(value)
    return value


def _decode(text: str, path: Path) -> Any:
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise EnumerationLoadError(f"Invalid JSON at {path}:{exc.lineno}:{exc.colno}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        if mark is not None:
            raise EnumerationLoadError(f"Invalid YAML at {path}:{mark.line + 1}:{mark.column + 1}") from exc
        raise EnumerationLoadError(f"Invalid YAML at {path}") from exc


def _as_code(raw: Any) -> int | None:
    # JSON object keys are always strings.
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None
