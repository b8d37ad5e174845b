"""Run ``infile < cmd1 | cmd2 > outfile`` from the command line."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from .command import CommandError, resolve_command


def _report(prefix: str, exc: OSError) -> None:
    print(f"{prefix}: {exc.strerror or exc}", file=sys.stderr)


def check_args_number(argv: Sequence[str]) -> None:
    """Raise ValueError unless exactly four arguments are given."""
    if len(argv) != 4:
        raise ValueError("Incorrect number of arguments")


def _spawn(
    command_line: str, env: Mapping[str, str], stdin: int, stdout: int
) -> subprocess.Popen | None:
    try:
        cmd = resolve_command(command_line, env)
    except CommandError as exc:
        print(exc, file=sys.stderr)
        return None
    try:
        return subprocess.Popen(
            cmd.args, executable=cmd.path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        _report("pipex: execve", exc)
        return None


def _start_first(
    infile: str, command_line: str, env: Mapping[str, str], write_fd: int
) -> subprocess.Popen | None:
    try:
        in_fd = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        _report("infile", exc)
        return None
    try:
        return _spawn(command_line, env, in_fd, write_fd)
    finally:
        os.close(in_fd)


def _start_second(
    outfile: str, command_line: str, env: Mapping[str, str], read_fd: int
) -> subprocess.Popen | None:
    try:
        out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        _report("pipex: open", exc)
        return None
    try:
        return _spawn(command_line, env, read_fd, out_fd)
    finally:
        os.close(out_fd)


def run_pipeline(
    infile: str,
    first_command: str,
    second_command: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Pipe ``first_command`` (reading ``infile``) into ``second_command`` (writing ``outfile``).

    Returns the exit status of the second command, or 1 when it could not
    be started or did not exit normally.
    """
    if env is None:
        env = os.environ
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        _report("pipex: pipe", exc)
        return 1
    try:
        try:
            first = _start_first(infile, first_command, env, write_fd)
        finally:
            os.close(write_fd)
        second = _start_second(outfile, second_command, env, read_fd)
    finally:
        os.close(read_fd)
    if first is not None:
        first.wait()
    if second is None:
        return 1
    status = second.wait()
    return status if status >= 0 else 1


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: ``pipex infile cmd1 cmd2 outfile``."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        check_args_number(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    infile, first_command, second_command, outfile = argv
    return run_pipeline(infile, first_command, second_command, outfile, os.environ)


if __name__ == "__main__":
    sys.exit(main())