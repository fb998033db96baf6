"""
Error Reporting

Exception hierarchy for module loading plus a small diagnostic formatter
used by the command line host.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, List, Sequence

from ..utils.config import COLOR_ENV_VAR


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    explicit = os.environ.get(COLOR_ENV_VAR, "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    return True

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_CYAN   = "\033[36m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


# ---------------------------------------------------------------------------
# Exception Classes
# ---------------------------------------------------------------------------

class CJSError(Exception):
    """Base exception for all module loading errors"""
    error_code = "E0000"

    def __init__(self, message: str, help: Optional[str] = None, notes: Sequence[str] = ()):
        super().__init__(message)
        self.message = message
        self.help_text = help
        self.notes = list(notes)

    def __str__(self):
        return self.message


class ModuleArgumentError(CJSError, ValueError):
    """Empty or missing module id, specifier or extension."""
    error_code = "E0001"

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


class ModuleResolutionError(CJSError):
    """Raised when a specifier cannot be mapped to a loadable location"""
    error_code = "E0002"

    def __init__(self, specifier: str, searched: Sequence[str] = (), requester: Optional[str] = None):
        notes = []
        if requester:
            notes.append(f"required from {requester}")
        if searched:
            notes.append("searched: " + ", ".join(searched))
        super().__init__(
            f"cannot find module '{specifier}'",
            help="check the specifier or register it as an internal module",
            notes=notes,
        )
        self.specifier = specifier
        self.searched = list(searched)
        self.requester = requester


class LoaderConfigurationError(CJSError):
    """No loader registered for an extension and no default loader either."""
    error_code = "E0003"

    def __init__(self, extension: str, location: str):
        super().__init__(
            f"no loader registered for extension '{extension}' and no default loader",
            help="register a loader with register_extension_loader()",
            notes=[f"while loading {location}"],
        )
        self.extension = extension
        self.location = location


class ModuleCollisionError(CJSError):
    """Raised when an internal module id is already present in the cache"""
    error_code = "E0004"

    def __init__(self, module_id: str):
        super().__init__(
            f"module '{module_id}' is already registered",
            help="internal modules are registered once, at startup",
        )
        self.module_id = module_id


# ---------------------------------------------------------------------------
# Diagnostic formatting
# ---------------------------------------------------------------------------

@dataclass
class Error:
    """A formatted-ready diagnostic."""
    message: str
    code: Optional[str] = None
    help: Optional[str] = None
    notes: List[str] = field(default_factory=list)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Error":
        if isinstance(exc, CJSError):
            return cls(message=exc.message, code=exc.error_code, help=exc.help_text, notes=exc.notes)
        # Script-level failures keep their own type name as the headline
        return cls(message=f"{type(exc).__name__}: {exc}")


def _format_diagnostic(error: Error, color: bool = False) -> str:
    """
    Render a single diagnostic.

    Example output (plain, no color)::

        error[E0002]: cannot find module './missing'
          = note: required from /app/main.py
          = help: check the specifier or register it as an internal module
    """
    code_str = f"[{error.code}]" if error.code else ""
    out = [
        _style(f"error{code_str}", _BOLD, _RED, color=color)
        + _style(f": {error.message}", _BOLD, color=color)
    ]
    for note in error.notes:
        out.append(
            _style("  = ", _BOLD, _CYAN, color=color)
            + _style("note: ", _BOLD, color=color)
            + note
        )
    if error.help:
        out.append(
            _style("  = ", _BOLD, _CYAN, color=color)
            + _style("help: ", _BOLD, color=color)
            + error.help
        )
    return "\n".join(out)


def format_error(exc: BaseException, color: Optional[bool] = None) -> str:
    """Format any exception raised while loading or running a module."""
    use_color = color if color is not None else _use_color()
    return _format_diagnostic(Error.from_exception(exc), color=use_color)
