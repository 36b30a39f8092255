"""Core types shared by every layer: results, config, exit codes."""

from .config import CLIConfig, ConfigError, config_path, load_config, save_config
from .errors import ErrorCode
from .result import Err, Ok, Partial, Result, is_err, is_ok

__all__ = [
    # config
    "CLIConfig",
    "ConfigError",
    "config_path",
    "load_config",
    "save_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Partial",
    "Result",
    "is_err",
    "is_ok",
]
