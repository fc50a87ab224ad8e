"""Runtime state shared between the shell loop and the builtins."""

from dataclasses import dataclass, field

from .environment import Environment


@dataclass
class ShellState:
    """Everything the shell tracks while it runs.

    ``program`` is the name the shell was started under, ``line`` the raw input
    line, ``args`` its tokens, ``command`` the resolved executable path,
    ``status`` the last exit status and ``count`` the number of lines read.
    """

    program: str = "hsh"
    env: Environment = field(default_factory=lambda: Environment([]))
    line: str | None = None
    command: str | None = None
    args: list[str] | None = None
    status: int = 0
    count: int = 0

    def clear(self) -> None:
        """Forget the current input line and its arguments."""
        self.line = None
        self.args = None