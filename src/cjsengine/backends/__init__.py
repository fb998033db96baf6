"""Script backends."""

from .base import ScriptBackend, ModuleWrapper
from .python import PythonBackend

BACKENDS = {
    "python": PythonBackend,
}


def create_backend(name: str) -> ScriptBackend:
    """Instantiate a backend by name."""
    if name not in BACKENDS:
        raise ValueError(f"Unknown backend: {name}")
    return BACKENDS[name]()


__all__ = ['ScriptBackend', 'ModuleWrapper', 'PythonBackend', 'BACKENDS', 'create_backend']
