"""Configuration entries injected into compilation units, and compile results."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from dojoforge.namespace_config import (
    DEFAULT_NAMESPACE_CFG_KEY,
    DOJO_MANIFESTS_DIR_CFG_KEY,
    NAMESPACE_CFG_PREFIX,
    WORKSPACE_CURRENT_PROFILE_CFG_KEY,
    Cfg,
    NamespaceConfig,
)

COMPONENT_NAME_CFG_KEY = "component_name"

_UNIT_PATH_SUFFIX = re.compile(r"\s*\([^()]*\)\Z")


@dataclass
class CompileInfo:
    """Compilation information of all the units found in a workspace."""

    profile_name: str = ""
    manifest_path: Path = field(default_factory=Path)
    target_dir: Path = field(default_factory=Path)
    root_package_name: str | None = None
    compile_error_units: list[str] = field(default_factory=list)


def build_component_cfg_set(
    component_name: str,
    existing: Iterable[Cfg] | None,
    manifests_dir: str | os.PathLike[str],
    package_namespace: NamespaceConfig,
    profile: str,
    root_namespace: NamespaceConfig,
) -> list[Cfg]:
    """Return the configuration entries for one component of a compilation unit.

    The component keeps its own entries, then gains its name, the manifests
    directory, its package's default namespace, the current profile and the
    namespace mappings of the root package. Duplicates are dropped while the
    insertion order is kept.
    """
    entries: list[Cfg] = list(existing or ())
    entries.append(Cfg(COMPONENT_NAME_CFG_KEY, component_name))
    entries.append(Cfg(DOJO_MANIFESTS_DIR_CFG_KEY, os.fspath(manifests_dir)))
    entries.append(Cfg(DEFAULT_NAMESPACE_CFG_KEY, package_namespace.default))
    entries.append(Cfg(WORKSPACE_CURRENT_PROFILE_CFG_KEY, profile))
    # Mappings of dependencies are ignored: the root package defines them for all.
    entries.extend(
        Cfg(f"{NAMESPACE_CFG_PREFIX}{key}", value)
        for key, value in (root_namespace.mappings or {}).items()
    )
    return list(dict.fromkeys(entries))


def strip_unit_path(unit_name: str) -> str:
    """Remove a trailing parenthesised path from a compilation unit name."""
    return _UNIT_PATH_SUFFIX.sub("", unit_name, count=1)