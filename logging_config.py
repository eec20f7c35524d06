"""
Logging configuration for eds-block-analyser.

Simple setup that the store, registry and dispatcher can import.
Everything goes to stderr: stdout carries the MCP stdio stream.
"""

import logging
import sys
from typing import Mapping

# Create logger for the package
logger = logging.getLogger("eds")


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging for eds-block-analyser.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logger.setLevel(getattr(logging, level.upper()))

    # Only add handler if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)

        # Concise format for MCP context
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


# NOTE: Call configure_logging() explicitly in server.py, cli.py or test setup.
# We don't auto-configure to avoid side effects on import.


# Convenience functions for common patterns
def log_tool_call(name: str, arguments: Mapping[str, object]) -> None:
    """Log a tool invocation with its arguments."""
    arg_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items() if v is not None)
    logger.debug(f"Tool: {name}({arg_str})")


def log_template_read(name: str, chars: int) -> None:
    """Log a successful file-backed template read."""
    logger.debug(f"Template: {name} read ({chars} chars)")


def log_template_failure(name: str, location: object, error: BaseException) -> None:
    """Log an unreadable template. Operator-facing only: includes the path."""
    logger.error(
        f"Template {name!r} could not be read from {location}: "
        f"{type(error).__name__}: {error}"
    )
