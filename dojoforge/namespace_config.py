"""Namespace configuration: a default namespace plus tag/namespace mappings."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

NAMESPACE_CFG_PREFIX = "nm|"
DEFAULT_NAMESPACE_CFG_KEY = "namespace_default"
DOJO_MANIFESTS_DIR_CFG_KEY = "dojo_manifests_dir"
WORKSPACE_CURRENT_PROFILE_CFG_KEY = "ws_current_profile"
DEFAULT_NAMESPACE = "DEFAULT_NAMESPACE"

_NAME_PATTERN = re.compile(r"[a-zA-Z0-9_]+")


def is_name_valid(name: str) -> bool:
    """Return True if the name only holds ASCII letters, digits and underscores."""
    return _NAME_PATTERN.fullmatch(name) is not None


@dataclass(frozen=True)
class Cfg:
    """A single configuration entry: a key with an optional value."""

    key: str
    value: str | None = None


@dataclass
class NamespaceConfig:
    """Default namespace and optional mappings from tags or namespaces."""

    default: str = DEFAULT_NAMESPACE
    mappings: dict[str, str] | None = None

    def with_mappings(self, mappings: Mapping[str, str]) -> NamespaceConfig:
        """Return a copy of this configuration using the given mappings."""
        return dataclasses.replace(self, mappings=dict(mappings))

    def display_mappings(self) -> str:
        """Render the mappings as human readable text."""
        if self.mappings is None:
            return "No mapping to apply"
        lines = "".join(f"{k} -> {v}\n" for k, v in self.mappings.items())
        return "\n-- Mappings --\n" + lines

    def get_mapping(self, tag_or_namespace: str) -> str:
        """Return the namespace for a tag or namespace, or the default one.

        A tag is first matched exactly, then by the namespace part before its
        last '-'. A namespace is matched exactly.
        """
        mappings = self.mappings or {}
        if tag_or_namespace in mappings:
            return mappings[tag_or_namespace]
        if "-" in tag_or_namespace:
            namespace = tag_or_namespace.rpartition("-")[0]
            return mappings.get(namespace, self.default)
        return self.default

    def validate(self) -> NamespaceConfig:
        """Check the default namespace and every mapped namespace.

        Returns this configuration; raises ValueError when something is invalid.
        """
        if not self.default:
            raise ValueError("Default namespace is empty")
        if not self.is_name_valid(self.default):
            raise ValueError(f"Invalid default namespace `{self.default}`")
        for tag_or_namespace, namespace in (self.mappings or {}).items():
            if not self.is_name_valid(namespace):
                raise ValueError(
                    f"Invalid namespace `{namespace}` for tag or namespace "
                    f"`{tag_or_namespace}`"
                )
        return self

    @staticmethod
    def is_name_valid(namespace: str) -> bool:
        """Return True if the namespace follows the naming rules."""
        return is_name_valid(namespace)

    @classmethod
    def from_cfg_set(cls, cfg_set: Iterable[Cfg]) -> NamespaceConfig:
        """Build a configuration from configuration entries.

        The default comes from the default-namespace key (empty if absent);
        mappings come from keys carrying the namespace prefix.
        """
        default = ""
        mappings: dict[str, str] = {}
        for cfg in cfg_set:
            if cfg.key == DEFAULT_NAMESPACE_CFG_KEY:
                if cfg.value is not None:
                    default = cfg.value
            elif cfg.key.startswith(NAMESPACE_CFG_PREFIX):
                if cfg.value is not None:
                    mappings[cfg.key.replace(NAMESPACE_CFG_PREFIX, "")] = cfg.value
        return cls(default=default, mappings=mappings or None)