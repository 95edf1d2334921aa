"""Utility modules for package-assistant.

This module exports commonly used utility functions.
"""

from package_assistant.utils.formatting import (
    console,
    create_update_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from package_assistant.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "create_update_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
