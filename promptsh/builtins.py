"""Commands the shell runs itself: cd, env, setenv, unsetenv, exit and help."""

import os
import sys
from collections.abc import Callable

from .errors import BUILTIN_FAILURE, ENV_FAILURE
from .state import ShellState


class ExitShell(Exception):
    """Raised by the exit builtin to stop the shell with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _arg(state: ShellState, index: int) -> str | None:
    args = state.args or []
    return args[index] if index < len(args) else None


def _chdir(path: str | None) -> bool:
    if path is None:
        return False
    try:
        os.chdir(path)
    except OSError:
        return False
    return True


def parent_directory(path: str) -> str | None:
    """Return ``path`` with its last ``/component`` removed, or None without a slash."""
    head, slash, _ = path.rpartition("/")
    return head if slash else None


def _cd_home(state: ShellState) -> int:
    old_pwd = os.getcwd()
    if not _chdir(state.env.get("HOME")):
        return BUILTIN_FAILURE
    state.env.set("OLDPWD", old_pwd)
    state.env.set("PWD", os.getcwd())
    state.status = 0
    return 0


def _cd_dot(state: ShellState, target: str) -> int:
    old_pwd = os.getcwd()
    state.env.set("OLDPWD", old_pwd)
    if target == ".":
        state.env.set("PWD", old_pwd)
        state.status = 0
        return 0
    parent = parent_directory(old_pwd)
    if parent is None:
        return 0
    if not _chdir(parent):
        return BUILTIN_FAILURE
    state.env.set("PWD", parent)
    state.status = 0
    return 0


def _cd_to(state: ShellState, target: str) -> int:
    old_pwd = os.getcwd()
    if not _chdir(target):
        return BUILTIN_FAILURE
    state.env.set("OLDPWD", old_pwd)
    state.env.set("PWD", os.getcwd())
    state.status = 0
    return 0


def _cd_switch(state: ShellState) -> int:
    old_pwd = os.getcwd()
    previous = state.env.get("OLDPWD")
    state.env.set("OLDPWD", old_pwd)
    if not _chdir(previous):
        state.env.set("PWD", old_pwd)
        return 0
    state.env.set("PWD", previous)
    state.status = 0
    return 0


def _cd_subdir(state: ShellState, target: str) -> int:
    old_pwd = os.getcwd()
    current = state.env.get("PWD")
    if current is None:
        current = old_pwd
    new_dir = f"{current}/{target}"
    if not _chdir(new_dir):
        return BUILTIN_FAILURE
    state.env.set("OLDPWD", old_pwd)
    state.env.set("PWD", new_dir)
    state.status = 0
    return 0


def cd_builtin(state: ShellState) -> int:
    """Change the working directory and keep PWD and OLDPWD up to date."""
    target = _arg(state, 1)
    if target is None or target in ("~", "--"):
        if state.env.get("HOME"):
            return _cd_home(state)
        if target is None:
            return BUILTIN_FAILURE
    if target == "-":
        return _cd_switch(state)
    if target in (".", ".."):
        return _cd_dot(state, target)
    if not target.startswith("/"):
        return _cd_subdir(state, target)
    return _cd_to(state, target)


def print_env(state: ShellState) -> int:
    """Write every environment entry on its own line."""
    for entry in state.env.lines():
        sys.stdout.write(entry + "\n")
    sys.stdout.flush()
    state.status = 0
    return 0


def set_env(state: ShellState) -> int:
    """Set NAME to VALUE; with only a name, remove it instead."""
    name = _arg(state, 1)
    value = _arg(state, 2)
    if name is None:
        return ENV_FAILURE
    if value is None:
        return unset_env(state)
    state.env.set(name, value)
    state.status = 0
    return 0


def unset_env(state: ShellState) -> int:
    """Remove the named variable from the environment."""
    name = _arg(state, 1)
    if name is None:
        return ENV_FAILURE
    if state.env.unset(name):
        state.status = 0
    return 0


def builtin_exit(state: ShellState) -> int:
    """Stop the shell; returns the failure code when the status is not usable."""
    from .text import parse_int

    argument = _arg(state, 1)
    if argument is not None:
        status = parse_int(argument)
        if status == 0:
            return BUILTIN_FAILURE
        state.status = status % 256
    else:
        state.status = 0
    raise ExitShell(state.status)


_HELP_GENERAL = (
    "^-^ bash, version 1.0(1)-release\n"
    "These commands are defined internally.Type 'help' to see the list"
    "Type 'help name' to find out more about the function 'name'.\n\n "
    "[dir]\nexit: exit [n]\n  env: env [option] [name=value] [command "
    "[args]]\n  setenv: setenv [variable] [value]\n  unsetenv: "
    "unsetenv [variable]\n"
)

_HELP_TOPICS = {
    "setenv": (
        "setenv: setenv (const char *name, const char *value,"
        "int replace)\n\t"
        "Add a new definition to the environment\n"
    ),
    "env": (
        "env: env [option] [name=value] [command [args]]\n\t"
        "Print the enviroment of the shell.\n"
    ),
    "unsetenv": (
        "unsetenv: unsetenv (const char *name)\n\t"
        "Remove an entry completely from the environment\n"
    ),
    "help": (
        "help: help [-dms] [pattern ...]\n"
        "\tDisplay information about builtin commands.\n "
        "Displays brief summaries of builtin commands.\n"
    ),
    "exit": (
        "exit: exit [n]\n Exit shell.\n"
        "Exits the shell with a status of N. If N is ommited, the exit"
        "statusis that of the last command executed\n"
    ),
    "cd": (
        "cd: cd [-L|[-P [-e]] [-@]] [dir]\n"
        "\tChange the shell working directory.\n "
    ),
}


def builtin_help(state: ShellState) -> int:
    """Print help for a builtin, or the general overview without a topic."""
    topic = _arg(state, 1)
    if topic is None:
        sys.stdout.write(_HELP_GENERAL)
        sys.stdout.flush()
    elif topic in _HELP_TOPICS:
        sys.stdout.write(_HELP_TOPICS[topic])
        sys.stdout.flush()
    else:
        sys.stderr.write(_arg(state, 0) or "")
        sys.stderr.flush()
    state.status = 0
    return 0


_BUILTINS: dict[str, Callable[[ShellState], int]] = {
    "exit": builtin_exit,
    "env": print_env,
    "setenv": set_env,
    "unsetenv": unset_env,
    "cd": cd_builtin,
    "help": builtin_help,
}


def lookup_builtin(name: str) -> Callable[[ShellState], int] | None:
    """Return the builtin called ``name``, or None if there is none."""
    return _BUILTINS.get(name)