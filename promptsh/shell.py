"""The interactive and scripted command loop of the shell."""

import io
import os
import signal
import subprocess
import sys
from typing import IO, Mapping

from .builtins import ExitShell, lookup_builtin
from .environment import Environment
from .errors import NOT_EXECUTABLE, NOT_FOUND, error_message
from .resolve import is_directory, resolve_command
from .state import ShellState
from .text import is_whitespace, split_tokens

PROMPT = "==> "
_DELIMITERS = " \n\t\r\a\v"
_ENCODING = "utf-8"


def _is_tty(stream: IO[str]) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError, OSError):
        return False


def _fileno(stream: IO[str]) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, ValueError, OSError, io.UnsupportedOperation):
        return None


class Shell:
    """Reads command lines, runs builtins and programs, and reports errors."""

    def __init__(
        self,
        program: str = "hsh",
        environ: Mapping[str, str] | None = None,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
    ) -> None:
        if environ is None:
            environ = os.environ
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.state = ShellState(program=program, env=Environment.from_mapping(environ))
        self.state.env.increment_shlvl()
        self.interactive = _is_tty(self.stdin)

    def read_command(self) -> list[str] | None:
        """Read one line and split it into arguments.

        Returns None at end of input and an empty list for a blank line.
        """
        if self.interactive:
            self.stdout.write(PROMPT)
            self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        if is_whitespace(line):
            return []
        if line.endswith("\n"):
            line = line[:-1]
        self.state.line = line
        tokens = split_tokens(line, _DELIMITERS)
        self.state.args = tokens
        return tokens

    def run_command(self, args: list[str]) -> int:
        """Run a builtin or an external program; return its error code (0 on success)."""
        self.state.args = list(args)
        builtin = lookup_builtin(args[0])
        if builtin is not None:
            return builtin(self.state)
        self.state.command = resolve_command(self.state.env, args[0])
        try:
            return self.execute(self.state.command, args)
        finally:
            self.state.command = None

    def execute(self, path: str, args: list[str]) -> int:
        """Start the program at ``path`` with ``args`` and wait for it.

        Returns 127 when the file is missing or a directory, 126 when it is
        not executable, and 0 once the program has run.
        """
        if not os.access(path, os.F_OK) or is_directory(path):
            return NOT_FOUND
        if not os.access(path, os.X_OK):
            return NOT_EXECUTABLE

        self.stdout.flush()
        self.stderr.flush()
        in_fd = _fileno(self.stdin)
        out_fd = _fileno(self.stdout)
        err_fd = _fileno(self.stderr)
        try:
            completed = subprocess.run(
                list(args),
                executable=path,
                env=self.state.env.to_dict(),
                stdin=in_fd if in_fd is not None else subprocess.DEVNULL,
                stdout=out_fd if out_fd is not None else subprocess.PIPE,
                stderr=err_fd if err_fd is not None else subprocess.PIPE,
                check=False,
            )
        except OSError:
            return NOT_FOUND
        if out_fd is None and completed.stdout:
            self.stdout.write(completed.stdout.decode(_ENCODING, errors="surrogateescape"))
        if err_fd is None and completed.stderr:
            self.stderr.write(completed.stderr.decode(_ENCODING, errors="surrogateescape"))
        return 0

    def report_error(self, code: int) -> int:
        """Print the message for ``code``; return ``code``, or 0 if it has no message."""
        message = error_message(self.state, code)
        if message is None:
            return 0
        self.stderr.write(message)
        self.stderr.flush()
        return code

    def run(self) -> int:
        """Run the command loop until exit or end of input; return the final status."""
        while True:
            self.state.count += 1
            args = self.read_command()
            if args is None:
                break
            if not args:
                if self.interactive:
                    continue
                break
            try:
                code = self.run_command(args)
            except ExitShell:
                self.state.clear()
                break
            if code:
                self.state.status = self.report_error(code)
                self.state.clear()
                if self.interactive:
                    continue
                break
            self.state.clear()
        self.state.clear()
        return self.state.status


def main(argv: list[str] | None = None) -> int:
    """Start the shell on the process's standard streams; return the exit status."""
    if argv is None:
        argv = sys.argv
    program = argv[0] if argv else "hsh"
    shell = Shell(program, os.environ, sys.stdin, sys.stdout, sys.stderr)

    def _on_interrupt(signum, frame) -> None:
        shell.stdout.write("\n" + PROMPT)
        shell.stdout.flush()

    previous = signal.signal(signal.SIGINT, _on_interrupt)
    try:
        status = shell.run()
    finally:
        signal.signal(signal.SIGINT, previous)
    return status % 256