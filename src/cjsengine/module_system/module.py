"""
Module Records

A module record is one loaded unit of code: its identity, export value and
place in the require graph. Constructing a ``Module`` runs the whole
resolve → register → execute sequence; ``InternalModule`` wraps a host value
and skips it.
"""

import logging
import os
import weakref
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional

from ..shared.errors import ModuleArgumentError, LoaderConfigurationError
from ..utils.config import DEFAULT_LOADER_KEY

if TYPE_CHECKING:
    from ..engine import CJSEngine

logger = logging.getLogger(__name__)


class ModuleState(Enum):
    """Load lifecycle. There is no unloaded state: records stay cached."""
    RESOLVING = "resolving"
    REGISTERED = "registered"
    EXECUTING = "executing"
    LOADED = "loaded"


class BaseModule:
    """Fields shared by every record the cache can hold."""

    filename: Optional[str] = None

    def __init__(self, module_id: str, parent: Optional["Module"] = None):
        if not isinstance(module_id, str) or not module_id:
            raise ModuleArgumentError("A module id is required.", argument="module_id")
        self.id = module_id
        self.exports: Any = None
        self.children: List["BaseModule"] = []
        self.state = ModuleState.RESOLVING
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> Optional["Module"]:
        """The module whose require created this one (None for entry and internal modules)."""
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def is_main(self) -> bool:
        return self._parent_ref is None

    @property
    def loaded(self) -> bool:
        return self.state is ModuleState.LOADED

    @property
    def dirname(self) -> Optional[str]:
        return os.path.dirname(self.filename) if self.filename else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, filename={self.filename!r}, state={self.state.value})"


class InternalModule(BaseModule):
    """A record whose exports are supplied directly by the host."""

    def __init__(self, module_id: str, value: Any):
        super().__init__(module_id)
        self.exports = value
        self.state = ModuleState.LOADED


class Module(BaseModule):
    """
    A source-backed module. Construction is the load algorithm:

    1. validate the id
    2. resolve the location (failure leaves nothing behind)
    3. pick the loader for the location's extension (or the default);
       failure also leaves nothing behind
    4. link into the parent's children
    5. start exports as an empty backend object
    6. insert into the engine cache
    7. run the loader; nested requires of this id now hit the cache
    8. mark loaded

    If step 7 raises, the record stays cached as it was left, in the
    EXECUTING state; the exception propagates unchanged.
    """

    def __init__(self, engine: "CJSEngine", module_id: str, parent: Optional["Module"] = None):
        if engine is None:
            raise ModuleArgumentError("An engine is required.", argument="engine")
        super().__init__(module_id, parent)
        self.engine = engine

        self.filename = engine.resolver.resolve_path(self.id, parent)

        extension = engine.resolver.extension_of(self.filename)
        loader = engine.extensions.get(extension) or engine.extensions.get(DEFAULT_LOADER_KEY)
        if loader is None:
            raise LoaderConfigurationError(extension, self.filename)

        if parent is not None:
            parent.children.append(self)

        self.exports = engine.backend.new_object()

        engine.cache.set(self.id, self)
        self.state = ModuleState.REGISTERED
        logger.debug(f"Registered module '{self.id}' ({self.filename}) before execution")

        self.state = ModuleState.EXECUTING
        loader(self.filename, self)
        self.state = ModuleState.LOADED
        logger.debug(f"Loaded module '{self.id}': {len(self.children)} children")

    def require(self, specifier: str) -> Any:
        """Module-scoped require: loads ``specifier`` with this module as parent."""
        return self.engine.load(specifier, self)
