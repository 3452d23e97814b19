from .config import HatsConfig, LogLevel, SubgraphConfig, load_config_from_env
from .constants import DEFAULT_PAGE_SIZE, MAX_LEVEL_HATS, MAX_LEVELS
from .exceptions import (
    HatsError,
    InputValidationError,
    MalformedPathError,
    SubgraphHatNotExistError,
    SubgraphNotSupportedError,
    SubgraphTreeNotExistError,
    SubgraphWearerNotExistError,
    UnknownRelationError,
    error_from_revert,
)
from .ids import (
    admin_at_level,
    build_child_id,
    dotted_to_hat_id,
    dotted_to_hex,
    hat_id_segments,
    hat_id_to_dotted,
    hat_id_to_hex,
    hat_id_to_tree_id,
    hex_to_hat_id,
    hex_to_tree_id,
    is_top_hat,
    is_well_formed,
    local_level,
    tree_id_from_dotted,
    tree_id_to_hex,
    tree_id_to_top_hat_id,
)
from .interfaces import GraphQueryExecutor, HatsReader
from .logging import (
    HatsLogFormatter,
    HatsLoggerAdapter,
    get_hats_logger,
    redact_secrets,
    safe_log_value,
    safe_preview,
    setup_logging,
)
from .subgraph import (
    HatsSubgraphClient,
    ObjectType,
    PaginationFilters,
    compile_selection,
    normalize_props,
    validate_props,
)

__all__ = [
    'HatsConfig',
    'LogLevel',
    'SubgraphConfig',
    'load_config_from_env',
    'DEFAULT_PAGE_SIZE',
    'MAX_LEVELS',
    'MAX_LEVEL_HATS',
    'HatsError',
    'InputValidationError',
    'MalformedPathError',
    'SubgraphHatNotExistError',
    'SubgraphNotSupportedError',
    'SubgraphTreeNotExistError',
    'SubgraphWearerNotExistError',
    'UnknownRelationError',
    'error_from_revert',
    'admin_at_level',
    'build_child_id',
    'dotted_to_hat_id',
    'dotted_to_hex',
    'hat_id_segments',
    'hat_id_to_dotted',
    'hat_id_to_hex',
    'hat_id_to_tree_id',
    'hex_to_hat_id',
    'hex_to_tree_id',
    'is_top_hat',
    'is_well_formed',
    'local_level',
    'tree_id_from_dotted',
    'tree_id_to_hex',
    'tree_id_to_top_hat_id',
    'GraphQueryExecutor',
    'HatsReader',
    'HatsLogFormatter',
    'HatsLoggerAdapter',
    'get_hats_logger',
    'redact_secrets',
    'safe_log_value',
    'safe_preview',
    'setup_logging',
    'HatsSubgraphClient',
    'ObjectType',
    'PaginationFilters',
    'compile_selection',
    'normalize_props',
    'validate_props',
]
