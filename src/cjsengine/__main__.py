"""CLI entry point: run `cjsengine main.py` or `python -m cjsengine main.py`; no file starts a REPL."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

from .utils.config import JSON_INDENT, REPL_EXIT_COMMAND, REPL_PROMPT


def _json_default(obj: Any) -> Any:
    # Functions and classes carry a __dict__ too; show them by repr
    if callable(obj):
        return repr(obj)
    return getattr(obj, "__dict__", repr(obj))


def _render(value: Any) -> str:
    try:
        return json.dumps(value, indent=JSON_INDENT, default=_json_default)
    except (TypeError, ValueError):
        return repr(value)


def repl(engine, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Read-eval-print loop over top-level code with the global require."""
    from .shared.errors import format_error

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    stdout.write(f"Type '{REPL_EXIT_COMMAND}' to leave, 'require(id)' to load a module.\n")
    while True:
        stdout.write(REPL_PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return 0
        line = line.strip()
        if line == REPL_EXIT_COMMAND:
            return 0
        if not line:
            continue
        try:
            result = engine.execute(line, "<repl>")
        except Exception as e:
            stderr.write(format_error(e) + "\n")
            continue
        if result is not None:
            stdout.write(f"=> {_render(result)}\n")


def main(argv: Optional[list] = None) -> int:
    import argparse
    from .engine import CJSEngine, EngineOptions
    from .shared.errors import CJSError, format_error

    parser = argparse.ArgumentParser(prog="cjsengine", description="Run a CommonJS-style module as the program.")
    parser.add_argument("file", nargs="?", type=Path, help="Entry module (omit for a REPL)")
    parser.add_argument("--base-path", type=Path, default=None, help="Base directory for bare specifiers (default: cwd)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log module loading to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    base_path = str(args.base_path.resolve()) if args.base_path else None
    engine = CJSEngine(options=EngineOptions(base_path=base_path))

    if args.file is None:
        return repl(engine)

    path = args.file.resolve()
    if not path.exists():
        sys.stderr.write(f"cjsengine: error: file not found: {path}\n")
        return 1
    if not path.is_file():
        sys.stderr.write(f"cjsengine: error: not a file: {path}\n")
        return 1

    try:
        engine.run_main(str(path))
    except CJSError as e:
        sys.stderr.write(format_error(e) + "\n")
        return 1
    except Exception as e:
        sys.stderr.write(f"cjsengine: runtime error: {format_error(e)}\n")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
