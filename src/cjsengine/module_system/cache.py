"""
Module Cache

Per-engine mapping from module id to module record. Keys are ids exactly as
requested; the cache never normalizes them.
"""

import logging
from typing import Dict, Iterator, List, Optional

from ..shared.errors import ModuleCollisionError
from .module import BaseModule

logger = logging.getLogger(__name__)


class ModuleCache:
    """
    At most one record per id for the lifetime of the owning engine.

    Records are never evicted. Not thread-safe: one engine is driven from one
    thread at a time.
    """

    def __init__(self):
        self._modules: Dict[str, BaseModule] = {}

    def __contains__(self, module_id: str) -> bool:
        return module_id in self._modules

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self) -> Iterator[str]:
        return iter(self._modules)

    def get(self, module_id: str) -> Optional[BaseModule]:
        return self._modules.get(module_id)

    def set(self, module_id: str, module: BaseModule) -> None:
        """Register a record under its id (used by the load algorithm)."""
        self._modules[module_id] = module

    def add(self, module: BaseModule) -> None:
        """Register a record that must not replace an existing one."""
        if module.id in self._modules:
            raise ModuleCollisionError(module.id)
        self._modules[module.id] = module
        logger.debug(f"ModuleCache: added '{module.id}'")

    def ids(self) -> List[str]:
        return list(self._modules)
