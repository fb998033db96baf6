"""Python backend: module bodies are Python source run with exec()."""

import ast
import builtins
import json
import logging
from types import SimpleNamespace
from typing import Any, Dict, Optional, Sequence

from .base import ScriptBackend, ModuleWrapper

logger = logging.getLogger(__name__)


class ModuleScope(dict):
    """
    Module-level namespace. Names the module does not bind are looked up in
    the backend globals at access time, so host values set after the module
    loaded are still visible to its functions.
    """

    def __init__(self, live_globals: Dict[str, Any]):
        super().__init__(__builtins__=builtins, __name__=live_globals.get("__name__"))
        self.live_globals = live_globals

    def __missing__(self, name: str) -> Any:
        return self.live_globals[name]


class PythonBackend(ScriptBackend):
    """
    Runs Python source as the script language.

    - Top-level code shares one global namespace (the REPL scope)
    - Each module body gets a fresh namespace holding the wrapper arguments;
      module-level names stay module-local and globals are read live
    - Functions defined in a module keep that namespace as their globals
    """

    def __init__(self):
        self.globals: Dict[str, Any] = {"__builtins__": builtins, "__name__": "__cjs__"}

    def execute(self, source: str, filename: str = "<script>") -> Any:
        tree = ast.parse(source, filename=filename, mode="exec")
        trailing: Optional[ast.Expression] = None
        if tree.body and isinstance(tree.body[-1], ast.Expr):
            # Evaluate a trailing expression separately to get a completion value
            trailing = ast.Expression(body=tree.body.pop().value)
        exec(compile(tree, filename, "exec"), self.globals)
        if trailing is None:
            return None
        return eval(compile(trailing, filename, "eval"), self.globals)

    def compile_wrapper(self, source: str, filename: str, params: Sequence[str]) -> ModuleWrapper:
        code = compile(source, filename, "exec")
        names = tuple(params)

        def wrapper(*args: Any) -> Dict[str, Any]:
            if len(args) != len(names):
                raise TypeError(f"module wrapper expects {len(names)} arguments, got {len(args)}")
            scope = ModuleScope(self.globals)
            scope.update(zip(names, args))
            exec(code, scope)
            return scope

        logger.debug(f"PythonBackend: compiled wrapper for {filename}")
        return wrapper

    def parse_json(self, text: str) -> Any:
        return json.loads(text)

    def new_object(self) -> SimpleNamespace:
        return SimpleNamespace()

    def set_value(self, name: str, value: Any) -> None:
        self.globals[name] = value

    def get_value(self, name: str) -> Optional[Any]:
        return self.globals.get(name)
