"""
Input validation for names and tool arguments.

Handles:
- Template/tool name shape (checked at startup, fail fast)
- Tool argument objects (checked per request)
- String arguments pulled out of an argument object
"""

import re
from typing import Any, Mapping

from models import AnalyserError, ErrorKind

# =============================================================================
# PATTERNS
# =============================================================================

# Registered names: lowercase identifiers, e.g. "eds_block_analyser", "csv_header"
NAME_PATTERN = re.compile(r'^[a-z][a-z0-9_]*$')


# =============================================================================
# STARTUP CHECKS
# =============================================================================

def is_valid_name(name: object) -> bool:
    """True if name is usable as a registered template or tool name."""
    return isinstance(name, str) and bool(NAME_PATTERN.match(name))


# =============================================================================
# REQUEST CHECKS
# =============================================================================

def normalize_arguments(arguments: object) -> Mapping[str, Any]:
    """
    Coerce a tool argument object into a mapping.

    None becomes an empty mapping (most tools take no arguments).

    Raises:
        AnalyserError(INVALID_INPUT): If arguments is not a mapping
    """
    if arguments is None:
        return {}
    if not isinstance(arguments, Mapping):
        raise AnalyserError(
            ErrorKind.INVALID_INPUT,
            f"Tool arguments must be an object, got {type(arguments).__name__}",
        )
    return arguments


def require_string(arguments: Mapping[str, Any], key: str, hint: str = "") -> str:
    """
    Extract a required, non-empty string argument.

    Args:
        arguments: Tool argument mapping
        key: Argument name
        hint: Extra text appended to the error message (e.g. valid values)

    Raises:
        AnalyserError(INVALID_INPUT): If missing, not a string, or blank
    """
    value = arguments.get(key)
    if value is None:
        problem = f"Missing required argument '{key}'"
    elif not isinstance(value, str):
        problem = f"Argument '{key}' must be a string, got {type(value).__name__}"
    elif not value.strip():
        problem = f"Argument '{key}' cannot be empty"
    else:
        return value

    message = f"{problem}\n{hint}" if hint else problem
    raise AnalyserError(ErrorKind.INVALID_INPUT, message, {"argument": key})
