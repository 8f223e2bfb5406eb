"""
Shared utilities: subprocess runner, priority sorting, console and logging setup.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, Iterable, List, TypeVar

from rich.console import Console
from rich.logging import RichHandler

from hostfetch.config import DEFAULT_COMMAND_TIMEOUT

console = Console()
err_console = Console(stderr=True)

T = TypeVar("T")


# ── Result types ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ShellResult:
    """Outcome of a single shell command invocation."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def text(self) -> str:
        """Trimmed stdout."""
        return self.stdout.strip()


# ── Subprocess wrapper ────────────────────────────────────────────────────────


def run_command(command: str, timeout: int = DEFAULT_COMMAND_TIMEOUT) -> ShellResult:
    """Run *command* through ``sh -c`` and return a :class:`ShellResult`.

    Shell expansions (``${VAR:-default}``) are honoured because the string is
    handed to the shell untouched.  Output is decoded leniently so odd bytes
    in process names never crash the tool.
    """
    try:
        proc = subprocess.run(
            ["sh", "-c", command],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            stdin=subprocess.DEVNULL,
            timeout=timeout,
        )
        stdout = proc.stdout.decode("utf-8", errors="replace") if proc.stdout else ""
        stderr = proc.stderr.decode("utf-8", errors="replace") if proc.stderr else ""
        return ShellResult(stdout, stderr, proc.returncode)
    except FileNotFoundError:
        return ShellResult("", "Command not found: sh", -1)
    except subprocess.TimeoutExpired:
        return ShellResult("", f"Command timed out after {timeout}s", -2)
    except OSError as exc:
        return ShellResult("", str(exc), -3)


# ── Sorting ───────────────────────────────────────────────────────────────────


def sort_by_priority(items: Iterable[T], priority: Callable[[T], int]) -> List[T]:
    """Return *items* ordered by ascending *priority* (lower first).

    The sort is stable: equal priorities keep their original order.
    """
    return sorted(items, key=priority)


# ── Logging ───────────────────────────────────────────────────────────────────


def setup_logging(verbose: bool = False) -> None:
    """Route library log records to stderr through Rich."""
    handler = RichHandler(console=err_console, show_time=False, show_path=verbose)
    root = logging.getLogger("hostfetch")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False
