import tomllib

import pytest

from dojoforge.manifest import (
    ContractManifest,
    Member,
    ModelManifest,
    StarknetContractManifest,
)


def test_contract_manifest_round_trip():
    manifest = ContractManifest(
        class_hash=0x1234ABCD,
        qualified_path="game::actions::actions",
        tag="game-actions",
        systems=["spawn", "move"],
    )
    assert ContractManifest.from_toml(manifest.to_toml()) == manifest


def test_contract_manifest_kind_and_hash_format():
    manifest = ContractManifest(class_hash=255, qualified_path="a::b", tag="ns-b")
    data = tomllib.loads(manifest.to_toml())
    assert data["kind"] == "DojoContract"
    assert data["class_hash"].startswith("0x")
    assert int(data["class_hash"], 16) == 255


def test_model_manifest_round_trip_with_members():
    manifest = ModelManifest(
        class_hash=42,
        qualified_path="game::models::position",
        tag="game-Position",
        members=[Member("player", "ContractAddress", True), Member("x", "u32", False)],
    )
    text = manifest.to_toml()
    assert ModelManifest.from_toml(text) == manifest
    data = tomllib.loads(text)
    assert data["kind"] == "DojoModel"
    assert data["members"][1] == {"name": "x", "type": "u32", "key": False}


def test_starknet_manifest_round_trip_and_default():
    manifest = StarknetContractManifest(
        class_hash=7, qualified_path="dojo::world::world_contract::world", name="dojo-world"
    )
    assert StarknetContractManifest.from_toml(manifest.to_toml()) == manifest
    default = StarknetContractManifest()
    assert StarknetContractManifest.from_toml(default.to_toml()) == default
    assert tomllib.loads(default.to_toml())["kind"] == "StarknetContract"


def test_wrong_kind_is_rejected():
    text = ModelManifest(tag="ns-M").to_toml()
    with pytest.raises(ValueError):
        ContractManifest.from_toml(text)


def test_missing_field_is_rejected():
    with pytest.raises(ValueError):
        StarknetContractManifest.from_toml('kind = "StarknetContract"\nname = "x"\n')


def test_invalid_class_hash_is_rejected():
    text = (
        'kind = "StarknetContract"\nclass_hash = "zz"\n'
        'qualified_path = "a::b"\nname = "b"\n'
    )
    with pytest.raises(ValueError):
        StarknetContractManifest.from_toml(text)