"""
Extension Loaders

A loader turns the source at a resolved location into the export value of a
module record. Loaders have the fixed signature ``(location, module) -> exports``
and are dispatched on the location's extension.
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional

from ..shared.errors import ModuleArgumentError
from ..utils.config import DEFAULT_LOADER_KEY, SOURCE_FILE_EXTENSION, JSON_FILE_EXTENSION, WRAPPER_PARAMS
from .module import Module

logger = logging.getLogger(__name__)

ExtensionLoader = Callable[[str, Module], Any]


def load_source(location: str, module: Module) -> Any:
    """
    Run a module body inside the wrapper ``(module, exports, __dirname, require)``.

    Rebinding the ``exports`` name replaces the module's exports; otherwise
    whatever the body left in ``module.exports`` is kept.
    """
    engine = module.engine
    source = engine.resolver.read_all_text(location)
    wrapper = engine.backend.compile_wrapper(source, location, WRAPPER_PARAMS)

    initial_exports = module.exports
    scope = wrapper(module, initial_exports, module.dirname, module.require)

    rebound = scope.get("exports", initial_exports)
    if rebound is not initial_exports:
        module.exports = rebound
    return module.exports


def load_json(location: str, module: Module) -> Any:
    """Parse the location as JSON; the parsed value is the module's exports."""
    engine = module.engine
    source = engine.resolver.read_all_text(location)
    module.exports = engine.backend.parse_json(source)
    return module.exports


class ExtensionRegistry:
    """
    Mapping of extension → loader, in registration order.

    The ``"default"`` key is the fallback for extensions without an entry.
    Iterating yields keys, so a resolver can hold the registry itself as a
    live list of recognized extensions.
    """

    def __init__(self, with_builtin_loaders: bool = True):
        self._loaders: Dict[str, ExtensionLoader] = {}
        if with_builtin_loaders:
            self.register(DEFAULT_LOADER_KEY, load_source)
            self.register(SOURCE_FILE_EXTENSION, load_source)
            self.register(JSON_FILE_EXTENSION, load_json)

    def register(self, extension: str, loader: ExtensionLoader) -> None:
        if not isinstance(extension, str) or not extension:
            raise ModuleArgumentError("An extension is required.", argument="extension")
        if extension in self._loaders:
            logger.debug(f"ExtensionRegistry: replacing loader for '{extension}'")
        self._loaders[extension] = loader

    def get(self, extension: str) -> Optional[ExtensionLoader]:
        return self._loaders.get(extension)

    def __contains__(self, extension: str) -> bool:
        return extension in self._loaders

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._loaders))

    def __len__(self) -> int:
        return len(self._loaders)
