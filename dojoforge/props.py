"""Compiler target properties and contract selection helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from dojoforge.constants import (
    BASE_CONTRACT_TAG,
    BASE_QUALIFIED_PATH,
    CAIRO_PATH_SEPARATOR,
    RESOURCE_METADATA_QUALIFIED_PATH,
    WORLD_CONTRACT_TAG,
    WORLD_QUALIFIED_PATH,
)
from dojoforge.contract_selector import ContractSelector

_log = logging.getLogger(__name__)

BUILD_EXTERNAL_CONTRACTS_KEY = "build-external-contracts"


@dataclass
class Props:
    """Properties of a `[[target.dojo]]` target."""

    build_external_contracts: list[ContractSelector] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Props:
        """Build the properties from a parsed target table; raises ValueError."""
        if not data:
            return cls()
        raw = data.get(BUILD_EXTERNAL_CONTRACTS_KEY)
        if raw is None:
            return cls()
        if not isinstance(raw, list) or not all(isinstance(p, str) for p in raw):
            raise ValueError(
                f"`{BUILD_EXTERNAL_CONTRACTS_KEY}` must be a list of contract paths"
            )
        return cls(build_external_contracts=[ContractSelector(p) for p in raw])

    def verify(self) -> None:
        """Check every external contract selector; raises ValueError."""
        for selector in self.build_external_contracts or ():
            selector.validate()


def collect_selector_packages(selectors: Iterable[ContractSelector]) -> list[str]:
    """Return the distinct package names of the selectors, in first-seen order."""
    return list(dict.fromkeys(selector.package() for selector in selectors))


def find_matching_contracts(
    contract_paths: Iterable[str], selectors: Iterable[ContractSelector]
) -> tuple[list[str], list[ContractSelector]]:
    """Select contract paths matched by any selector.

    Returns the matched paths, in input order, and the selectors that matched
    none of them. A warning is logged for each unmatched selector.
    """
    selector_list = list(selectors)
    matched = [
        path
        for path in contract_paths
        if any(selector.matches(path) for selector in selector_list)
    ]
    unmatched = [
        selector
        for selector in selector_list
        if not any(selector.matches(path) for path in matched)
    ]
    for selector in unmatched:
        _log.warning("No contract found for path `%s`.", selector.full_path())
    return matched, unmatched


def starknet_file_name(qualified_path: str) -> str | None:
    """Return the artifact file name of a Starknet contract.

    The world and base contracts use their tags; the resource metadata
    contract is skipped (None); any other contract uses its path with the
    separators replaced by underscores.
    """
    match qualified_path:
        case _ if qualified_path == WORLD_QUALIFIED_PATH:
            return WORLD_CONTRACT_TAG
        case _ if qualified_path == BASE_QUALIFIED_PATH:
            return BASE_CONTRACT_TAG
        case _ if qualified_path == RESOURCE_METADATA_QUALIFIED_PATH:
            return None
        case _:
            return qualified_path.replace(CAIRO_PATH_SEPARATOR, "_")