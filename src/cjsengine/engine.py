"""
Engine

Embedding point of the module system: owns the script backend, the module
cache, the extension registry and the path resolver, and exposes ``require``
to host code and to scripts.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from .backends import ScriptBackend, create_backend
from .module_system.cache import ModuleCache
from .module_system.loaders import ExtensionRegistry, ExtensionLoader
from .module_system.module import BaseModule, InternalModule, Module
from .module_system.path_resolver import PathResolver, CommonJSPathResolver
from .shared.errors import ModuleArgumentError
from .utils.config import DEFAULT_BACKEND, DEFAULT_FILE_ENCODING, GLOBAL_REQUIRE_NAME

logger = logging.getLogger(__name__)


@dataclass
class EngineOptions:
    """Settings for the default path resolver."""
    base_path: Optional[str] = None  # Entry module / bare specifier base (cwd if None)
    search_paths: List[str] = field(default_factory=list)
    encoding: str = DEFAULT_FILE_ENCODING


class CJSEngine:
    """
    CommonJS module engine.

    - run_main(): load the entry module
    - load() / require(): load a module (cached by id, executed once)
    - register_internal_module(): publish a host value as a module
    - register_extension_loader(): support another source format

    All state is per instance; two engines never share modules.
    """

    def __init__(
        self,
        resolver: Optional[PathResolver] = None,
        backend: Union[str, ScriptBackend] = DEFAULT_BACKEND,
        options: Optional[EngineOptions] = None,
    ):
        """
        Args:
            resolver: Path resolution strategy (CommonJSPathResolver if None)
            backend: Backend name or instance executing module bodies
            options: Default resolver settings (ignored when a resolver is given)
        """
        self.options = options or EngineOptions()
        self.backend: ScriptBackend = create_backend(backend) if isinstance(backend, str) else backend
        self.cache = ModuleCache()
        self.extensions = ExtensionRegistry()

        if resolver is None:
            resolver = CommonJSPathResolver(
                self.extensions,
                base_path=self.options.base_path,
                search_paths=self.options.search_paths,
                encoding=self.options.encoding,
            )
        self.resolver: PathResolver = resolver

        self.backend.set_value(GLOBAL_REQUIRE_NAME, self.require)

    def register_extension_loader(self, extension: str, loader: ExtensionLoader) -> "CJSEngine":
        """Install or replace the loader for an extension ("default" is the fallback)."""
        self.extensions.register(extension, loader)
        return self

    def register_internal_module(self, module_id: str, value: Any) -> "CJSEngine":
        """
        Register a host value (object, function or class) as a requirable module.

        Raises:
            ModuleArgumentError: If module_id is empty
            ModuleCollisionError: If module_id is already cached
        """
        if not isinstance(module_id, str) or not module_id:
            raise ModuleArgumentError("A module id is required.", argument="module_id")
        self.cache.add(InternalModule(module_id, value))
        logger.debug(f"Registered internal module '{module_id}'")
        return self

    def run_main(self, main_module: str) -> Any:
        """Load the entry module (no parent) and return its exports."""
        if not isinstance(main_module, str) or not main_module.strip():
            raise ModuleArgumentError("A main module path is required.", argument="main_module")
        return self.load(main_module)

    def load(self, module_id: str, parent: Optional[Module] = None) -> Any:
        """
        Return the exports for module_id, loading it on first use.

        A cache hit still records the module in ``parent.children``.
        """
        if not isinstance(module_id, str) or not module_id:
            raise ModuleArgumentError("A module id is required.", argument="module_id")

        cached = self.cache.get(module_id)
        if cached is not None:
            if parent is not None:
                parent.children.append(cached)
            logger.debug(f"Cache hit for '{module_id}'")
            return cached.exports

        return Module(self, module_id, parent).exports

    def require(self, module_id: str) -> Any:
        """Global require for top-level code; loads without a parent."""
        return self.load(module_id)

    def execute(self, source: str, filename: str = "<script>") -> Any:
        """Evaluate top-level source (global require in scope); return its completion value."""
        return self.backend.execute(source, filename)

    def set_value(self, name: str, value: Any) -> "CJSEngine":
        self.backend.set_value(name, value)
        return self

    def get_value(self, name: str) -> Optional[Any]:
        return self.backend.get_value(name)

    def get_module(self, module_id: str) -> Optional[BaseModule]:
        """Get a cached module record by id"""
        return self.cache.get(module_id)

    def is_module_loaded(self, module_id: str) -> bool:
        """Check if a module id is cached"""
        return module_id in self.cache
