"""Loading of the per-package Dojo configuration files."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dojoforge.namespace_config import NamespaceConfig

_log = logging.getLogger(__name__)

_MULTIPLE_DOJO_PACKAGES = (
    "Multiple packages with [[target.dojo]] found in workspace. Please specify a package "
    "using --package option or maybe one of them must be declared as a [lib]."
)


class ConfigError(Exception):
    """Raised when a Dojo configuration cannot be loaded."""


def _namespace_from_dict(data: Any) -> NamespaceConfig:
    if not isinstance(data, Mapping):
        raise ConfigError("`namespace` must be a table")
    default = data.get("default")
    if not isinstance(default, str):
        raise ConfigError("missing or invalid field `default` in `namespace`")
    mappings = data.get("mappings")
    if mappings is None:
        return NamespaceConfig(default=default)
    if not isinstance(mappings, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in mappings.items()
    ):
        raise ConfigError("`namespace.mappings` must map strings to strings")
    return NamespaceConfig(default=default, mappings=dict(mappings))


@dataclass
class CompilerConfig:
    """The part of the Dojo configuration used by the compiler."""

    namespace: NamespaceConfig = field(default_factory=NamespaceConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CompilerConfig:
        """Build the configuration from parsed TOML; raises ConfigError."""
        if "namespace" not in data:
            raise ConfigError("missing field `namespace`")
        return cls(namespace=_namespace_from_dict(data["namespace"]))


@dataclass(frozen=True)
class PackageInfo:
    """What the loader needs to know about a workspace package."""

    name: str
    manifest_path: Path
    is_lib: bool = False
    is_dojo: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "manifest_path", Path(self.manifest_path))


def load_package_config(package: PackageInfo, profile: str) -> CompilerConfig:
    """Load the configuration of a package for the given profile.

    Uses `dojo_<profile>.toml` next to the manifest, falling back to
    `dojo_dev.toml`. Without `dojo_dev.toml` the default configuration is
    returned.
    """
    if package.is_lib and package.is_dojo:
        raise ConfigError("[lib] package cannot have [[target.dojo]].")

    manifest_dir = package.manifest_path.parent
    dev_config_path = manifest_dir / "dojo_dev.toml"
    config_path = manifest_dir / f"dojo_{profile}.toml"

    _log.debug(
        "Loading dojo config for package %s in %s (profile %s).",
        package.name,
        manifest_dir,
        profile,
    )

    if not dev_config_path.exists():
        if not package.is_lib:
            _log.warning(
                "Dojo configuration file not found, using default config. Consider adding "
                "`dojo_%s.toml` alongside your `Scarb.toml` to configure Dojo with this "
                "profile.",
                profile,
            )
        return CompilerConfig()

    if not config_path.exists():
        config_path = dev_config_path

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"failed to read `{config_path}`: {exc}") from exc
    return CompilerConfig.from_dict(data)


def load_workspace_config(packages: Iterable[PackageInfo], profile: str) -> CompilerConfig:
    """Load the configuration of the single non-lib Dojo package of a workspace."""
    dojo_packages = [p for p in packages if p.is_dojo and not p.is_lib]
    match dojo_packages:
        case []:
            _log.warning("No package with [[target.dojo]] found in workspace.")
            return CompilerConfig()
        case [package]:
            return load_package_config(package, profile)
        case _:
            _log.error(_MULTIPLE_DOJO_PACKAGES)
            raise ConfigError(_MULTIPLE_DOJO_PACKAGES)


def _as_path(value: str | os.PathLike[str]) -> Path:
    return Path(value)