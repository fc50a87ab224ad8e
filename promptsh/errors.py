"""Error codes and the messages the shell prints for them."""

import os

from .resolve import is_directory
from .state import ShellState

ENV_FAILURE = -1
BUILTIN_FAILURE = 2
NOT_EXECUTABLE = 126
NOT_FOUND = 127


def format_error(program: str, count: int, command: str, message: str) -> str:
    """Build ``program: count: command`` followed by ``message``."""
    return f"{program}: {count}: {command}{message}"


def format_illegal_number(program: str, count: int, command: str, argument: str) -> str:
    """Build the message for an exit status that is not a usable number."""
    return format_error(program, count, command, f": Illegal number: {argument}\n")


def format_cd_error(program: str, count: int, command: str, target: str) -> str:
    """Build the message for a cd target that cannot be used."""
    if target.startswith("-"):
        detail = f": Illegal option {target[:2]}"
    else:
        detail = f": can't cd to {target}"
    return format_error(program, count, command, detail + "\n")


def error_message(state: ShellState, code: int) -> str | None:
    """Return the message to report for ``code``, or None if there is none."""
    args = state.args or []
    command = args[0] if args else ""
    if code == ENV_FAILURE:
        message = ": Unable to add/remove from environment\n"
    elif code == NOT_EXECUTABLE:
        message = ": Is a directory\n" if is_directory(command) else ": Permission denied\n"
    elif code == NOT_FOUND:
        if os.access(command, os.F_OK):
            message = ": Command not found\n"
        else:
            message = ": No such file or directory\n"
    elif code == BUILTIN_FAILURE:
        if command == "exit":
            argument = args[1] if len(args) > 1 else ""
            return format_illegal_number(state.program, state.count, command, argument)
        if command != "cd":
            return None
        message = ": No such file or directory\n"
    else:
        return None
    return format_error(state.program, state.count, command, message)