"""Manifests describing compiled contracts, stored as TOML documents."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

import tomli_w


def _hash_to_hex(value: int) -> str:
    if value < 0:
        raise ValueError(f"class hash must not be negative: {value}")
    return f"{value:#x}"


def _hash_from_hex(value: Any) -> int:
    if not isinstance(value, str):
        raise ValueError(f"class hash must be a hex string, got {value!r}")
    try:
        parsed = int(value, 16)
    except ValueError as exc:
        raise ValueError(f"invalid class hash `{value}`") from exc
    if parsed < 0:
        raise ValueError(f"invalid class hash `{value}`")
    return parsed


def _parse_document(text: str, kind: str) -> dict[str, Any]:
    data = tomllib.loads(text)
    found = data.get("kind")
    if found != kind:
        raise ValueError(f"expected manifest kind `{kind}`, found `{found}`")
    return data


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None


@dataclass
class Member:
    """A member of a model struct."""

    name: str
    ty: str
    key: bool

    def _to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.ty, "key": self.key}

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> Member:
        return cls(
            name=_require(data, "name"),
            ty=_require(data, "type"),
            key=_require(data, "key"),
        )


@dataclass
class ContractManifest:
    """Manifest of a Dojo contract."""

    KIND: ClassVar[str] = "DojoContract"

    class_hash: int = 0
    qualified_path: str = ""
    tag: str = ""
    systems: list[str] = field(default_factory=list)

    def to_toml(self) -> str:
        """Serialize the manifest to TOML."""
        return tomli_w.dumps(
            {
                "kind": self.KIND,
                "class_hash": _hash_to_hex(self.class_hash),
                "qualified_path": self.qualified_path,
                "tag": self.tag,
                "systems": list(self.systems),
            }
        )

    @classmethod
    def from_toml(cls, text: str) -> ContractManifest:
        """Parse a manifest from TOML; raises ValueError when malformed."""
        data = _parse_document(text, cls.KIND)
        return cls(
            class_hash=_hash_from_hex(_require(data, "class_hash")),
            qualified_path=_require(data, "qualified_path"),
            tag=_require(data, "tag"),
            systems=list(_require(data, "systems")),
        )


@dataclass
class ModelManifest:
    """Manifest of a Dojo model."""

    KIND: ClassVar[str] = "DojoModel"

    class_hash: int = 0
    qualified_path: str = ""
    tag: str = ""
    members: list[Member] = field(default_factory=list)

    def to_toml(self) -> str:
        """Serialize the manifest to TOML."""
        return tomli_w.dumps(
            {
                "kind": self.KIND,
                "class_hash": _hash_to_hex(self.class_hash),
                "qualified_path": self.qualified_path,
                "tag": self.tag,
                "members": [m._to_dict() for m in self.members],
            }
        )

    @classmethod
    def from_toml(cls, text: str) -> ModelManifest:
        """Parse a manifest from TOML; raises ValueError when malformed."""
        data = _parse_document(text, cls.KIND)
        return cls(
            class_hash=_hash_from_hex(_require(data, "class_hash")),
            qualified_path=_require(data, "qualified_path"),
            tag=_require(data, "tag"),
            members=[Member._from_dict(m) for m in _require(data, "members")],
        )


@dataclass
class StarknetContractManifest:
    """Manifest of a plain Starknet contract."""

    KIND: ClassVar[str] = "StarknetContract"

    class_hash: int = 0
    qualified_path: str = ""
    name: str = ""

    def to_toml(self) -> str:
        """Serialize the manifest to TOML."""
        return tomli_w.dumps(
            {
                "kind": self.KIND,
                "class_hash": _hash_to_hex(self.class_hash),
                "qualified_path": self.qualified_path,
                "name": self.name,
            }
        )

    @classmethod
    def from_toml(cls, text: str) -> StarknetContractManifest:
        """Parse a manifest from TOML; raises ValueError when malformed."""
        data = _parse_document(text, cls.KIND)
        return cls(
            class_hash=_hash_from_hex(_require(data, "class_hash")),
            qualified_path=_require(data, "qualified_path"),
            name=_require(data, "name"),
        )