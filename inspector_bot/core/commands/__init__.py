"""Chat command parsing, dispatch and handlers."""

from .dispatcher import CommandDispatcher
from .parser import extract_params, strip_command
from .registry import CommandSpec, iter_command_specs

__all__ = [
    "CommandDispatcher",
    "CommandSpec",
    "extract_params",
    "iter_command_specs",
    "strip_command",
]
