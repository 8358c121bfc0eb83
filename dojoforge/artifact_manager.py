"""Storage of compiled artifacts and writing them to disk as JSON."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dojoforge.debug_info import SierraToCairoDebugInfo

_log = logging.getLogger(__name__)


class ArtifactNotFoundError(LookupError):
    """Raised when no artifact is registered for a qualified path."""


@dataclass(frozen=True)
class CompiledArtifact:
    """A compiled Sierra class with its class hash and optional debug info."""

    class_hash: int
    contract_class: Mapping[str, Any]
    debug_info: SierraToCairoDebugInfo | None = None


def _write_pretty_json(path: Path, value: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(value, handle, indent=2)


class ArtifactManager:
    """Holds compiled artifacts keyed by their Cairo qualified path."""

    def __init__(self) -> None:
        self._artifacts: dict[str, CompiledArtifact] = {}

    def __len__(self) -> int:
        return len(self._artifacts)

    def __contains__(self, qualified_path: object) -> bool:
        return qualified_path in self._artifacts

    def __iter__(self) -> Iterator[tuple[str, CompiledArtifact]]:
        return self.iter()

    def iter(self) -> Iterator[tuple[str, CompiledArtifact]]:
        """Yield (qualified path, artifact) pairs."""
        return iter(self._artifacts.items())

    def get_artifact(self, qualified_path: str) -> CompiledArtifact | None:
        """Return the artifact for the path, or None if there is none."""
        return self._artifacts.get(qualified_path)

    def get_class_hash(self, qualified_path: str) -> int:
        """Return the class hash of an artifact; raises ArtifactNotFoundError."""
        artifact = self.get_artifact(qualified_path)
        if artifact is None:
            raise ArtifactNotFoundError(
                f"Can't get class hash from artifact for qualified path {qualified_path}"
            )
        return artifact.class_hash

    def add_artifact(self, qualified_path: str, artifact: CompiledArtifact) -> None:
        """Register an artifact, replacing any previous one for the same path."""
        _log.debug("Adding artifact `%s` to the manager.", qualified_path)
        self._artifacts[qualified_path] = artifact

    def _require(self, qualified_path: str) -> CompiledArtifact:
        artifact = self.get_artifact(qualified_path)
        if artifact is None:
            raise ArtifactNotFoundError(f"Artifact file for `{qualified_path}` not found.")
        return artifact

    def write_sierra_class(
        self,
        qualified_path: str,
        target_dir: str | os.PathLike[str],
        file_name: str,
    ) -> Path:
        """Write the Sierra class as `<file_name>.json` and its debug info if any.

        Returns the path of the class file.
        """
        artifact = self._require(qualified_path)
        directory = Path(target_dir)
        class_path = directory / f"{file_name}.json"
        _log.debug("Saving sierra class `%s` to %s.", qualified_path, class_path)
        _write_pretty_json(class_path, artifact.contract_class)
        if artifact.debug_info is not None:
            _write_pretty_json(
                directory / f"{file_name}.debug.json", artifact.debug_info.to_dict()
            )
        return class_path

    def write_abi(
        self,
        qualified_path: str,
        target_dir: str | os.PathLike[str],
        file_name: str,
    ) -> Path:
        """Write the ABI of the artifact as `<file_name>.json` and return its path."""
        artifact = self._require(qualified_path)
        abi_path = Path(target_dir) / f"{file_name}.json"
        _log.debug("Saving abi of `%s` to %s.", qualified_path, abi_path)
        _write_pretty_json(abi_path, artifact.contract_class.get("abi"))
        return abi_path