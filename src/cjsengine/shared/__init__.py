"""Shared types: errors and diagnostics."""

from .errors import (
    CJSError,
    ModuleArgumentError,
    ModuleResolutionError,
    LoaderConfigurationError,
    ModuleCollisionError,
    Error,
    format_error,
)

__all__ = [
    'CJSError',
    'ModuleArgumentError',
    'ModuleResolutionError',
    'LoaderConfigurationError',
    'ModuleCollisionError',
    'Error',
    'format_error',
]
