# dojoforge

Build-side helpers for Dojo world projects. The package covers the parts of a
Dojo build that do not need the Cairo toolchain itself. It needs Python 3.11
or later and depends only on `tomli-w`.

| Module | What it holds |
| --- | --- |
| `dojoforge.constants` | Well-known qualified paths, tags and directory names |
| `dojoforge.namespace_config` | `NamespaceConfig`, `Cfg`, `is_name_valid` |
| `dojoforge.contract_selector` | `ContractSelector`, `to_snake_case` |
| `dojoforge.manifest` | `Member`, `ContractManifest`, `ModelManifest`, `StarknetContractManifest` |
| `dojoforge.aux_data` | `ModelAuxData`, `ContractAuxData`, `StarknetContractAuxData`, `DojoAuxData` |
| `dojoforge.debug_info` | Sierra-to-Cairo debug info types, `relative_location` |
| `dojoforge.artifact_manager` | `ArtifactManager`, `CompiledArtifact`, `ArtifactNotFoundError` |
| `dojoforge.config` | `CompilerConfig`, `PackageInfo`, `load_package_config`, `load_workspace_config`, `ConfigError` |
| `dojoforge.version` | `generate_version`, `check_package_dojo_version`, `DojoVersionError` |
| `dojoforge.cfg` | `build_component_cfg_set`, `strip_unit_path`, `CompileInfo` |
| `dojoforge.props` | `Props`, `collect_selector_packages`, `find_matching_contracts`, `starknet_file_name` |
| `dojoforge.profiles` | `Verbosity`, `ui_verbosity`, `determine_profile`, `is_address` |
| `dojoforge.watch` | `EventKind`, `is_rebuild_needed`, `DirectoryPoller`, `watch` |

## Namespaces

Names may contain only ASCII letters, digits and underscores.

```python
from dojoforge.namespace_config import NamespaceConfig, is_name_valid

config = NamespaceConfig(
    default="nm",
    mappings={"tag1": "namespace1", "armory-Flatbow": "weapons"},
)

config.get_mapping("armory-Flatbow")   # "weapons"     (exact tag match)
config.get_mapping("tag1-TestModel")   # "namespace1"  (namespace part of the tag)
config.get_mapping("unknown")          # "nm"          (default)

config.validate()                      # returns config; raises ValueError if a name is invalid
is_name_valid("invalid-name")          # False
```

`NamespaceConfig.from_cfg_set` builds a configuration from `Cfg` entries: the
`namespace_default` key gives the default and keys prefixed with `nm|` give the
mappings.

## Contract selectors

```python
from dojoforge.contract_selector import ContractSelector

selector = ContractSelector("my_package::erc20::Token")
selector.package()                      # "my_package"
selector.path_with_model_snake_case()   # "my_package::erc20::token"

wildcard = ContractSelector("my_package::*")
wildcard.matches("my_package::sub_package::MyContract")   # True

ContractSelector("my_package::*::*::MyContract").validate()  # raises ValueError
```

`dojoforge.props.Props.from_dict` reads the `build-external-contracts` list of a
target table into selectors, and `find_matching_contracts` returns the contract
paths a list of selectors matches together with the selectors that matched
nothing.

## Manifests

Each manifest type serializes to TOML with a `kind` field and the class hash
as a hex string, and parses back with `from_toml` (raising `ValueError` on a
wrong kind or a missing field).

```python
from dojoforge.manifest import ContractManifest

manifest = ContractManifest(
    class_hash=0x1234,
    qualified_path="game::actions::actions",
    tag="game-actions",
    systems=["spawn", "move"],
)
text = manifest.to_toml()
assert ContractManifest.from_toml(text) == manifest
```

## Artifacts

```python
from dojoforge.artifact_manager import ArtifactManager, CompiledArtifact

manager = ArtifactManager()
manager.add_artifact("game::actions::actions",
                     CompiledArtifact(class_hash=0x1, contract_class={"abi": []}))
manager.get_class_hash("game::actions::actions")         # 1
manager.write_sierra_class("game::actions::actions", "target/dev", "game-actions")
manager.write_abi("game::actions::actions", "target/abis", "game-actions")
```

`write_sierra_class` writes `<name>.json`, plus `<name>.debug.json` when the
artifact carries debug info. Unknown paths raise `ArtifactNotFoundError`.

## Configuration

`load_package_config(package, profile)` reads `dojo_<profile>.toml` next to the
package's `Scarb.toml`, falling back to `dojo_dev.toml`; without `dojo_dev.toml`
it returns the default `CompilerConfig`. `load_workspace_config` picks the one
non-lib package with a Dojo target and raises `ConfigError` if there are
several.

## Profiles and the dev loop

```python
from dojoforge.profiles import determine_profile, is_address
from dojoforge.watch import EventKind, is_rebuild_needed

determine_profile(None, True, False)   # "release"
determine_profile()                    # "dev"
is_address("0x1234")                   # True

is_rebuild_needed(EventKind.MODIFY, ["src/lib.cairo"])  # True
is_rebuild_needed(EventKind.MODIFY, ["README.md"])      # False
```

`dojoforge.watch.watch(directory, build, interval, iterations)` calls `build`
once, then polls the directory and calls `build` again for every created,
modified or removed `.cairo` file or `Scarb.toml`. Failures after the first
build are logged and ignored. It runs forever unless `iterations` is given.

## What this package does not do

It does not compile Cairo code, compute class hashes, resolve Scarb
workspaces or provide a command-line program. The compiled classes, hashes and
package information are inputs you supply; the package organises, validates
and writes them.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
root.