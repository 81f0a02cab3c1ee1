"""Core types: results, exit codes, configuration."""

from .config import ActionConfig, ConfigError, load_action_config, load_event_payload
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "ActionConfig",
    "ConfigError",
    "load_action_config",
    "load_event_payload",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
