"""Auxiliary data the plugin attaches to generated files for models and contracts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from dojoforge.constants import CAIRO_PATH_SEPARATOR
from dojoforge.contract_selector import to_snake_case
from dojoforge.manifest import Member


@dataclass
class ModelAuxData:
    """Data about a model generated by the plugin."""

    name: str
    namespace: str
    members: list[Member] = field(default_factory=list)


@dataclass
class ContractAuxData:
    """Data about a Dojo contract generated by the plugin."""

    name: str
    namespace: str
    systems: list[str] = field(default_factory=list)


@dataclass
class StarknetContractAuxData:
    """Data about a plain Starknet contract."""

    contract_name: str


AuxData = ModelAuxData | ContractAuxData | StarknetContractAuxData


@dataclass
class DojoAuxData:
    """Dojo aux data keyed by the fully qualified path of each contract module."""

    models: dict[str, ModelAuxData] = field(default_factory=dict)
    contracts: dict[str, ContractAuxData] = field(default_factory=dict)
    sn_contracts: dict[str, str] = field(default_factory=dict)

    def contains_starknet_contract(self, qualified_path: str) -> bool:
        """Return True if the path was already recorded as a contract or a model."""
        return qualified_path in self.contracts or qualified_path in self.models

    def add_generated(self, module_path: str, aux_data: AuxData) -> None:
        """Record aux data found among the generated files of a module."""
        if isinstance(aux_data, ContractAuxData):
            path = f"{module_path}{CAIRO_PATH_SEPARATOR}{aux_data.name}"
            self.contracts[path] = aux_data
        elif isinstance(aux_data, ModelAuxData):
            path = f"{module_path}{CAIRO_PATH_SEPARATOR}{to_snake_case(aux_data.name)}"
            self.models[path] = aux_data
        elif isinstance(aux_data, StarknetContractAuxData):
            # Dojo contracts and models are Starknet contracts too; keep only the others.
            if not self.contains_starknet_contract(module_path):
                self.sn_contracts[module_path] = aux_data.contract_name

    @classmethod
    def from_generated(cls, entries: Iterable[tuple[str, AuxData]]) -> DojoAuxData:
        """Build aux data from (module path, aux data) pairs, in order."""
        result = cls()
        for module_path, aux_data in entries:
            result.add_generated(module_path, aux_data)
        return result