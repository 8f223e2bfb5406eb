"""
Window manager / desktop environment detection.

Strategies are tried in a fixed order and the first one that produces a
name wins:

  1. macOS: known tiling WMs by process name, else ``aqua``
  2. ``$XDG_CURRENT_DESKTOP``
  3. the process holding the Wayland display socket open (``fuser`` / ``lsof``)
"""

from __future__ import annotations

import logging
import re
import shlex
from typing import TYPE_CHECKING, Callable, List, Mapping, Optional

from hostfetch.config import (
    DEFAULT_WAYLAND_DISPLAY,
    MACOS_DEFAULT_WM,
    MACOS_WINDOW_MANAGERS,
    UNKNOWN_WM,
)

if TYPE_CHECKING:
    from hostfetch.core.probes import Probes

log = logging.getLogger(__name__)

Strategy = Callable[["Probes"], Optional[str]]

_LEADING_PID = re.compile(r"\s*(\d+)")


def _from_macos(probes: Probes) -> Optional[str]:
    if not probes.platform.is_macos:
        return None
    for wm in MACOS_WINDOW_MANAGERS:
        if probes.run(f"pgrep -x {shlex.quote(wm)}").ok:
            return wm
    return MACOS_DEFAULT_WM


def _from_desktop_env(probes: Probes) -> Optional[str]:
    return probes.environ.get("XDG_CURRENT_DESKTOP", "").strip() or None


def wayland_socket_path(environ: Mapping[str, str]) -> Optional[str]:
    """Build ``$XDG_RUNTIME_DIR/${WAYLAND_DISPLAY:-wayland-0}``, or None without a runtime dir."""
    display = environ.get("WAYLAND_DISPLAY", "").strip() or DEFAULT_WAYLAND_DISPLAY
    if display.startswith("/"):
        return display
    runtime_dir = environ.get("XDG_RUNTIME_DIR", "").strip()
    if not runtime_dir:
        return None
    return f"{runtime_dir.rstrip('/')}/{display}"


def _from_wayland_socket(probes: Probes) -> Optional[str]:
    if probes.platform.is_macos or probes.platform.is_windows:
        return None
    path = wayland_socket_path(probes.environ)
    if path is None:
        log.debug("XDG_RUNTIME_DIR unset, no Wayland socket to inspect")
        return None

    if probes.platform.fuser:
        result = probes.run(f"fuser {shlex.quote(path)}")
    elif probes.platform.lsof:
        result = probes.run(f"lsof -t {shlex.quote(path)}")
    else:
        log.debug("neither fuser nor lsof available")
        return None

    if not result.ok:
        log.debug("socket owner probe failed (exit %s): %s", result.exit_code, result.stderr.strip())
        return None
    m = _LEADING_PID.match(result.stdout)
    if not m:
        return None

    info = probes.processes.lookup(int(m.group(1)))
    if info is None:
        return None
    return info.command_name.strip() or None


STRATEGIES: List[Strategy] = [
    _from_macos,
    _from_desktop_env,
    _from_wayland_socket,
]


# ── Public API ────────────────────────────────────────────────────────────────


def resolve_window_manager(probes: Probes) -> str:
    """Return the window manager / desktop name, or ``None/Unknown``."""
    for strategy in STRATEGIES:
        name = strategy(probes)
        if name:
            return name
    return UNKNOWN_WM
