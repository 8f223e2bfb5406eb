"""
Process-table lookups and the parent-process ancestry walk.

The terminal emulator is found by climbing from our parent process until a
non-shell process turns up; the login shell is simply our parent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Protocol

import psutil

from hostfetch.config import MAX_ANCESTRY_DEPTH, UNKNOWN
from hostfetch.core.utils import ShellResult

if TYPE_CHECKING:
    from hostfetch.core.probes import Probes

log = logging.getLogger(__name__)

INIT_PID = 1
SHELL_SUFFIX = "sh"


@dataclass(frozen=True)
class ProcessInfo:
    pid: int
    command_name: str
    parent_pid: int


class ProcessTable(Protocol):
    def lookup(self, pid: int) -> Optional[ProcessInfo]:
        """Return the entry for *pid*, or None if it cannot be read."""
        ...


# ── Implementations ───────────────────────────────────────────────────────────


class PsutilProcessTable:
    """Process table backed by :mod:`psutil`.

    An unreadable parent pid is reported as ``INIT_PID``, like
    :class:`PsProcessTable` does.
    """

    def lookup(self, pid: int) -> Optional[ProcessInfo]:
        try:
            proc = psutil.Process(pid)
            name = proc.name()
        except (psutil.Error, ValueError) as exc:
            log.debug("process lookup for pid %s failed: %s", pid, exc)
            return None
        try:
            ppid = proc.ppid()
        except psutil.Error as exc:
            log.debug("ppid lookup for pid %s failed: %s", pid, exc)
            ppid = INIT_PID
        return ProcessInfo(pid=pid, command_name=name, parent_pid=ppid)


class PsProcessTable:
    """Process table backed by ``ps -p <pid> -o ...``.

    A garbled parent pid is reported as ``INIT_PID`` rather than failing the
    whole lookup, so the walker can keep climbing.
    """

    def __init__(self, run: Callable[[str], ShellResult]) -> None:
        self._run = run

    def lookup(self, pid: int) -> Optional[ProcessInfo]:
        name = self._run(f"ps -p {int(pid)} -o comm=")
        if not name.ok or not name.text:
            log.debug("ps found no process %s (exit %s)", pid, name.exit_code)
            return None
        ppid_raw = self._run(f"ps -p {int(pid)} -o ppid=").text
        try:
            ppid = int(ppid_raw)
        except ValueError:
            log.debug("unparsable ppid %r for pid %s", ppid_raw, pid)
            ppid = INIT_PID
        return ProcessInfo(pid=pid, command_name=name.text, parent_pid=ppid)


# ── Public API ────────────────────────────────────────────────────────────────


def resolve_shell(probes: Probes) -> str:
    """Return the command name of our immediate parent process."""
    info = probes.processes.lookup(probes.getppid())
    if info is None or not info.command_name.strip():
        return UNKNOWN
    return info.command_name.strip()


def resolve_terminal(probes: Probes, max_depth: int = MAX_ANCESTRY_DEPTH) -> str:
    """Walk up from our parent while the process name ends in ``sh``.

    An unreadable parent pid moves the walk to PID 1; a process that can't
    be read at all ends it.  The walk stops on the first repeated PID or
    after *max_depth* steps, so it always terminates.
    """
    pid = probes.getppid()
    seen = set()
    name = ""

    for _ in range(max_depth):
        seen.add(pid)
        info = probes.processes.lookup(pid)
        name = info.command_name.strip() if info else ""
        if info is None or not name.endswith(SHELL_SUFFIX):
            break
        parent = info.parent_pid
        if parent <= 0:
            parent = INIT_PID
        if parent in seen:
            log.debug("ancestry walk revisited pid %s, stopping at %r", parent, name)
            break
        pid = parent

    return name or UNKNOWN
