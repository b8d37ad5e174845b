"""Resolve a command line to an executable path and its argument list."""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .textutils import split_words

PERMISSION_DENIED = 1
CMD_NOTFOUND = 2


class CommandError(Exception):
    """A command could not be resolved; ``code`` tells why."""

    def __init__(self, message: str, code: int = CMD_NOTFOUND) -> None:
        super().__init__(message)
        self.code = code


@dataclass
class CommandData:
    """An executable path together with the arguments to run it with."""

    path: str
    args: list[str] = field(default_factory=list)


def search_paths(env: Mapping[str, str]) -> list[str] | None:
    """Return the directories listed in PATH, or None when PATH is not set."""
    value = env.get("PATH")
    if value is None:
        return None
    return split_words(value, ":")


def find_executable(name: str, paths: Iterable[str]) -> str:
    """Return the first ``dir/name`` that is executable.

    An existing candidate that may not be executed stops the search with a
    permission error; no candidate at all is a not-found error.
    """
    for directory in paths:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
        if os.path.exists(candidate):
            raise CommandError(
                f"{candidate}: {os.strerror(errno.EACCES)}", PERMISSION_DENIED
            )
    raise CommandError(f"{name}: {os.strerror(errno.ENOENT)}", CMD_NOTFOUND)


def resolve_command(command_line: str, env: Mapping[str, str]) -> CommandData:
    """Split ``command_line`` on spaces and locate its program.

    A name holding a slash is used as given; otherwise it is looked up in
    the PATH of ``env``.
    """
    args = split_words(command_line, " ")
    if not args:
        raise CommandError("empty command", CMD_NOTFOUND)
    name = args[0]
    if "/" in name:
        return CommandData(name, args)
    paths = search_paths(env)
    if paths is None:
        raise CommandError(f"{name}: PATH is not set", CMD_NOTFOUND)
    return CommandData(find_executable(name, paths), args)