"""Module system: path resolution, extension loaders, module records and cache."""

from .path_resolver import PathResolver, CommonJSPathResolver, OverlayPathResolver
from .module import BaseModule, Module, InternalModule, ModuleState
from .cache import ModuleCache
from .loaders import ExtensionRegistry, ExtensionLoader, load_source, load_json

__all__ = [
    'PathResolver',
    'CommonJSPathResolver',
    'OverlayPathResolver',
    'BaseModule',
    'Module',
    'InternalModule',
    'ModuleState',
    'ModuleCache',
    'ExtensionRegistry',
    'ExtensionLoader',
    'load_source',
    'load_json',
]
