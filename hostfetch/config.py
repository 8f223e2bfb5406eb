"""
Centralised runtime configuration and OS-detection helpers.
"""

import platform
import shutil
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class PlatformInfo:
    """Immutable snapshot of the host OS and available external tools."""

    system: str = field(default_factory=lambda: platform.system())  # Linux | Darwin | FreeBSD | Windows
    release: str = field(default_factory=platform.release)
    is_windows: bool = field(default=False)
    is_linux: bool = field(default=False)
    is_macos: bool = field(default=False)
    discover_tools: bool = True

    # Paths to external tools (None if not found on PATH)
    uname: Optional[str] = None
    pgrep: Optional[str] = None
    ps: Optional[str] = None
    fuser: Optional[str] = None
    lsof: Optional[str] = None

    def __post_init__(self) -> None:  # pragma: no cover
        # Set boolean OS flags
        object.__setattr__(self, "is_windows", self.system == "Windows")
        object.__setattr__(self, "is_linux", self.system == "Linux")
        object.__setattr__(self, "is_macos", self.system == "Darwin")

        if not self.discover_tools:
            return

        # Discover external tools
        for tool_name in ("uname", "pgrep", "ps", "fuser", "lsof"):
            object.__setattr__(self, tool_name, shutil.which(tool_name))


# Singleton, instantiated once at import time.
PLATFORM = PlatformInfo()


# ── Interface priority rules ──────────────────────────────────────────────────

# Lower is better; loopback sorts last, the overlay VPN just before it.
PRIORITY_MAX = 2**32 - 1
PRIORITY_ETHERNET = 0
PRIORITY_WIRELESS = 1
PRIORITY_MOBILE = 2
PRIORITY_DEFAULT = 69
PRIORITY_VPN = 1000
PRIORITY_NETWORK_MANAGER = 1001
PRIORITY_OVERLAY = PRIORITY_MAX - 1
PRIORITY_LOOPBACK = PRIORITY_MAX


@dataclass(frozen=True)
class InterfacePriorityRules:
    """Name prefixes used to rank network interfaces (matched case-insensitively)."""

    ethernet: Tuple[str, ...] = ("en", "eth")
    wireless: Tuple[str, ...] = ("wl",)
    mobile: Tuple[str, ...] = ("wwan",)
    overlay: Tuple[str, ...] = ("tailscale",)
    vpn: Tuple[str, ...] = ("tun", "tap", "wg", "vpn")
    network_manager: Tuple[str, ...] = ("nm",)
    loopback: Tuple[str, ...] = ("lo", "lo0")

    def with_vpn_prefixes(self, prefixes: Iterable[str]) -> "InterfacePriorityRules":
        """Return a copy with *prefixes* appended to the VPN list."""
        extra = tuple(p.strip().lower() for p in prefixes if p.strip())
        merged = self.vpn + tuple(p for p in extra if p not in self.vpn)
        return InterfacePriorityRules(
            ethernet=self.ethernet,
            wireless=self.wireless,
            mobile=self.mobile,
            overlay=self.overlay,
            vpn=merged,
            network_manager=self.network_manager,
            loopback=self.loopback,
        )


DEFAULT_PRIORITY_RULES = InterfacePriorityRules()


# ── Window managers ───────────────────────────────────────────────────────────

# Checked in order with ``pgrep -x``; the first one running wins.
MACOS_WINDOW_MANAGERS: Tuple[str, ...] = ("yabai", "Amethyst")
MACOS_DEFAULT_WM = "aqua"
DEFAULT_WAYLAND_DISPLAY = "wayland-0"


# ── Sentinels ─────────────────────────────────────────────────────────────────

UNKNOWN_WM = "None/Unknown"
NO_CONNECTION = "No Connection"
UNKNOWN = "Unknown"
UNKNOWN_OS = "Unknown OS"

# Defaults
DEFAULT_COMMAND_TIMEOUT = 10
MAX_ANCESTRY_DEPTH = 64
