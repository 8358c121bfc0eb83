import json

import pytest

from dojoforge.artifact_manager import (
    ArtifactManager,
    ArtifactNotFoundError,
    CompiledArtifact,
)
from dojoforge.debug_info import (
    Location,
    SierraStatementToCairoDebugInfo,
    SierraToCairoDebugInfo,
    TextPosition,
)

PATH = "pkg::actions::actions"


def _contract_class():
    return {
        "sierra_program": ["0x1", "0x2"],
        "entry_points_by_type": {"EXTERNAL": [], "L1_HANDLER": [], "CONSTRUCTOR": []},
        "abi": [{"type": "function", "name": "spawn"}],
    }


def _manager(debug_info=None):
    manager = ArtifactManager()
    manager.add_artifact(
        PATH,
        CompiledArtifact(class_hash=42, contract_class=_contract_class(), debug_info=debug_info),
    )
    return manager


def test_add_and_get_artifact():
    manager = _manager()
    artifact = manager.get_artifact(PATH)
    assert artifact.class_hash == 42
    assert artifact.contract_class == _contract_class()
    assert manager.get_artifact("pkg::other") is None


def test_get_class_hash():
    assert _manager().get_class_hash(PATH) == 42


def test_get_class_hash_missing_raises():
    with pytest.raises(ArtifactNotFoundError, match="pkg::missing"):
        ArtifactManager().get_class_hash("pkg::missing")


def test_iter_yields_all_pairs():
    manager = _manager()
    other = CompiledArtifact(class_hash=7, contract_class={"abi": []})
    manager.add_artifact("pkg::other", other)
    pairs = dict(manager.iter())
    assert set(pairs) == {PATH, "pkg::other"}
    assert pairs["pkg::other"] is other
    assert len(manager) == 2


def test_add_artifact_replaces():
    manager = _manager()
    manager.add_artifact(PATH, CompiledArtifact(class_hash=9, contract_class={}))
    assert manager.get_class_hash(PATH) == 9
    assert len(manager) == 1


def test_write_sierra_class_round_trip(tmp_path):
    manager = _manager()
    target = tmp_path / "target" / "contracts"
    written = manager.write_sierra_class(PATH, target, "ns-actions")
    assert written == target / "ns-actions.json"
    assert json.loads(written.read_text()) == _contract_class()
    assert not (target / "ns-actions.debug.json").exists()


def test_write_sierra_class_with_debug_info(tmp_path):
    debug = SierraToCairoDebugInfo(
        {
            0: SierraStatementToCairoDebugInfo(
                [Location(TextPosition(1, 2), TextPosition(1, 8), "src/lib.cairo")]
            )
        }
    )
    manager = _manager(debug_info=debug)
    manager.write_sierra_class(PATH, tmp_path, "ns-actions")
    content = json.loads((tmp_path / "ns-actions.debug.json").read_text())
    assert content == debug.to_dict()


def test_write_sierra_class_missing_raises(tmp_path):
    with pytest.raises(ArtifactNotFoundError, match="not found"):
        ArtifactManager().write_sierra_class("pkg::missing", tmp_path, "x")
    assert list(tmp_path.iterdir()) == []


def test_write_abi(tmp_path):
    manager = _manager()
    written = manager.write_abi(PATH, tmp_path / "abis", "actions")
    assert json.loads(written.read_text()) == _contract_class()["abi"]


def test_write_abi_missing_raises(tmp_path):
    with pytest.raises(ArtifactNotFoundError):
        ArtifactManager().write_abi("pkg::missing", tmp_path, "x")