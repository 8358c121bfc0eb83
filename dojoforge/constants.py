"""Well-known paths, tags and directory names used by the compiler."""

CAIRO_PATH_SEPARATOR = "::"
WORLD_QUALIFIED_PATH = "dojo::world::world_contract::world"
WORLD_CONTRACT_TAG = "dojo-world"
BASE_QUALIFIED_PATH = "dojo::contract::base_contract::base"
BASE_CONTRACT_TAG = "dojo-base"
RESOURCE_METADATA_QUALIFIED_PATH = "dojo::model::metadata::resource_metadata"
CONTRACTS_DIR = "contracts"
MODELS_DIR = "models"
MANIFESTS_DIR = "manifests"
MANIFESTS_BASE_DIR = "base"