import pytest

from dojoforge.version import (
    DojoVersionError,
    check_package_dojo_version,
    generate_version,
)


def test_generate_version_lines():
    text = generate_version("1.0.0", "2.8.2", "2.8.2", "1.6.0")
    lines = text.split("\n")
    assert lines[0] == "1.0.0"
    assert lines[1] == "scarb: 2.8.2"
    assert lines[2] == "cairo: 2.8.2"
    assert lines[3] == "sierra: 1.6.0"
    assert len(lines) == 4


def test_mismatched_git_tag_rejected():
    dep = "dojo git+https://example.com/dojo?tag=v0.9.0"
    with pytest.raises(DojoVersionError) as info:
        check_package_dojo_version(dep, "1.0.0", "/work/game/Scarb.toml")
    message = str(info.value)
    assert "expected 1.0.0" in message
    assert message.endswith("/work/game/Scarb.toml")


@pytest.mark.parametrize(
    "dep",
    [
        None,
        "dojo git+https://example.com/dojo?tag=v1.0.0",
        "dojo git+https://example.com/dojo?branch=main",
        "dojo path+file:///work/dojo",
        "dojo ^0.9.0",
    ],
)
def test_only_mismatching_tag_raises(dep):
    assert check_package_dojo_version(dep, "1.0.0", "Scarb.toml") is None
    mismatched = "dojo git+https://example.com/dojo?tag=v0.1.0"
    with pytest.raises(DojoVersionError):
        check_package_dojo_version(mismatched, "1.0.0", "Scarb.toml")