"""Core types: results, exit codes and configuration."""

from .config import ConfigError, ReleaseConfig, RepoRef, load_config
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    "ConfigError",
    "Err",
    "ErrorCode",
    "Ok",
    "ReleaseConfig",
    "RepoRef",
    "Result",
    "load_config",
]
