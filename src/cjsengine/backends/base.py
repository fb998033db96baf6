"""
Backend Interface

The script-execution substrate the module system is layered on. The module
system only needs to run source text, wrap a module body in a function that
receives host-supplied arguments, parse JSON, make empty objects and expose
host values as globals.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Sequence

# A compiled module wrapper: called with one argument per wrapper parameter,
# returns the body's final bindings.
ModuleWrapper = Callable[..., Dict[str, Any]]


class ScriptBackend(ABC):
    """
    Script backend interface.

    All backends implement the same interface; the engine never looks inside
    the values a backend produces.
    """

    @abstractmethod
    def execute(self, source: str, filename: str = "<script>") -> Any:
        """
        Evaluate top-level source in the backend's global scope.

        Returns the completion value of the source (None if it has none).
        """
        raise NotImplementedError

    @abstractmethod
    def compile_wrapper(self, source: str, filename: str, params: Sequence[str]) -> ModuleWrapper:
        """
        Define an anonymous function around a module body.

        The returned callable takes one positional argument per name in
        ``params``, runs the body with those names bound and returns the
        body's bindings once it completes.
        """
        raise NotImplementedError

    @abstractmethod
    def parse_json(self, text: str) -> Any:
        raise NotImplementedError

    @abstractmethod
    def new_object(self) -> Any:
        """Create the empty object a fresh module starts exporting."""
        raise NotImplementedError

    @abstractmethod
    def set_value(self, name: str, value: Any) -> None:
        """Expose a host value to scripts under a global name."""
        raise NotImplementedError

    @abstractmethod
    def get_value(self, name: str) -> Optional[Any]:
        raise NotImplementedError
