"""Error type and diagnostic messages shared by the shell components."""

from __future__ import annotations

import sys

ERROR_PREFIX = "minishell: "


class ShellError(Exception):
    """Raised when a shell component meets a condition it cannot recover from."""

    def __init__(self, func_name: str, message: str) -> None:
        self.func_name = func_name
        self.message = message
        super().__init__(
            f"Error: function name: {func_name}, Error message: {message}"
        )


def builtin_error_message(func: str, name: str | None, err: str) -> str:
    """Format a builtin's diagnostic, quoting the offending name when given."""
    quoted = f"`{name}': " if name is not None else ""
    return f"{ERROR_PREFIX}{func}: {quoted}{err}"


def builtin_error(func: str, name: str | None, err: str) -> None:
    """Write a builtin's diagnostic line to standard error."""
    sys.stderr.write(builtin_error_message(func, name, err) + "\n")
    sys.stderr.flush()