"""Core types: results, configuration and exit codes."""

from .config import Config, ConfigError, GitConfig, find_config, load_config
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "Config",
    "ConfigError",
    "GitConfig",
    "find_config",
    "load_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
