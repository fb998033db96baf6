"""
Configuration constants to replace magic strings throughout cjsengine
"""

# Extension registry constants
DEFAULT_LOADER_KEY = "default"  # Fallback loader when an extension has no entry
SOURCE_FILE_EXTENSION = ".py"
JSON_FILE_EXTENSION = ".json"

# Path resolution constants
INDEX_FILE_STEM = "index"  # Directory modules load <dir>/index<ext>
RELATIVE_PREFIXES = ("./", "../")

# Module wrapper constants (order matters: positional arguments of the wrapper)
WRAPPER_PARAMS = ("module", "exports", "__dirname", "require")
GLOBAL_REQUIRE_NAME = "require"

# Backend selection
DEFAULT_BACKEND = "python"

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"

# Console constants
REPL_PROMPT = "cjs> "
REPL_EXIT_COMMAND = "exit"
JSON_INDENT = 2

# Error reporting constants
COLOR_ENV_VAR = "CJSENGINE_COLOR"
