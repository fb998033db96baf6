"""
cjsengine: CommonJS-style require/module.exports on top of an embeddable
script backend.
"""

from .engine import CJSEngine, EngineOptions
from .backends import ScriptBackend, PythonBackend
from .module_system import (
    PathResolver,
    CommonJSPathResolver,
    OverlayPathResolver,
    Module,
    InternalModule,
    ModuleState,
    ExtensionRegistry,
    load_source,
    load_json,
)
from .shared.errors import (
    CJSError,
    ModuleArgumentError,
    ModuleResolutionError,
    LoaderConfigurationError,
    ModuleCollisionError,
    format_error,
)

__version__ = "0.1.0"

__all__ = [
    'CJSEngine',
    'EngineOptions',
    'ScriptBackend',
    'PythonBackend',
    'PathResolver',
    'CommonJSPathResolver',
    'OverlayPathResolver',
    'Module',
    'InternalModule',
    'ModuleState',
    'ExtensionRegistry',
    'load_source',
    'load_json',
    'CJSError',
    'ModuleArgumentError',
    'ModuleResolutionError',
    'LoaderConfigurationError',
    'ModuleCollisionError',
    'format_error',
]
