"""Turning a command name into the path of the program to run."""

import os

from .environment import Environment
from .text import split_tokens


def is_directory(path: str) -> bool:
    """Return True if ``path`` names an existing directory."""
    return os.path.isdir(path)


def path_candidates(env: Environment, command: str) -> list[str]:
    """Return ``dir/command`` for every directory listed in PATH, in order."""
    path = env.get("PATH")
    if path is None:
        return []
    return [f"{directory}/{command}" for directory in split_tokens(path, ":")]


def dot_path(env: Environment, command: str) -> str | None:
    """Join PWD with a ``./name`` command; None when PWD is not set."""
    pwd = env.get("PWD")
    if pwd is None:
        return None
    return pwd + command[1:]


def resolve_command(env: Environment, command: str) -> str:
    """Return the path to execute for ``command``.

    ``./name`` is taken relative to PWD, absolute paths are kept, and other
    names are looked up along PATH; a name found nowhere is returned as is.
    """
    if command.startswith("./"):
        resolved = dot_path(env, command)
        return resolved if resolved is not None else command
    if command.startswith("/"):
        return command
    return next(
        (candidate for candidate in path_candidates(env, command) if os.path.exists(candidate)),
        command,
    )