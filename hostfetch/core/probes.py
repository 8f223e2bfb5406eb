"""
The OS collaborators every resolver reads from, bundled so tests can swap them.
"""

from __future__ import annotations

import os
import shutil
import time
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional

import psutil

from hostfetch.config import DEFAULT_PRIORITY_RULES, PLATFORM, InterfacePriorityRules, PlatformInfo
from hostfetch.core.network import NetworkInterface, snapshot_interfaces
from hostfetch.core.processes import ProcessTable, PsutilProcessTable
from hostfetch.core.utils import ShellResult, run_command


@dataclass
class Probes:
    platform: PlatformInfo = PLATFORM
    run: Callable[[str], ShellResult] = run_command
    which: Callable[[str], Optional[str]] = shutil.which
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    processes: ProcessTable = field(default_factory=PsutilProcessTable)
    interfaces: Callable[[], List[NetworkInterface]] = snapshot_interfaces
    getppid: Callable[[], int] = os.getppid
    boot_time: Callable[[], float] = psutil.boot_time
    clock: Callable[[], float] = time.time
    rules: InterfacePriorityRules = DEFAULT_PRIORITY_RULES


def default_probes(rules: InterfacePriorityRules = DEFAULT_PRIORITY_RULES) -> Probes:
    """Probes wired to the live host."""
    return Probes(rules=rules)
