"""errchain: errors with arguments, a causal parent and their call site."""

from errchain.core.caller import Frame, caller_frame, resolve
from errchain.core.config import ChainConfig, ChainConfigError, merged_config
from errchain.core.errors import (
    ChainCycleError,
    ErrorRecord,
    chain_as_list,
    is_decorated,
    new_error,
    new_errorf,
    root_cause,
)
from errchain.core.report import describe_chain, format_chain, log_error, merged_arguments

__all__ = [
    "ChainConfig",
    "ChainConfigError",
    "ChainCycleError",
    "ErrorRecord",
    "Frame",
    "caller_frame",
    "chain_as_list",
    "describe_chain",
    "format_chain",
    "is_decorated",
    "log_error",
    "merged_arguments",
    "merged_config",
    "new_error",
    "new_errorf",
    "resolve",
    "root_cause",
]
