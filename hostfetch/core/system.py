"""
Straightforward host facts: OS name, kernel, uptime and installed packages.
"""

from __future__ import annotations

import logging
import platform
from typing import TYPE_CHECKING, List, Tuple

import distro
import psutil

from hostfetch.config import UNKNOWN, UNKNOWN_OS

if TYPE_CHECKING:
    from hostfetch.core.probes import Probes

log = logging.getLogger(__name__)


# ── Registry ──────────────────────────────────────────────────────────────────

# (label, binary, list command, header lines to skip)
PACKAGE_COUNTERS: List[Tuple[str, str, str, int]] = [
    ("pacman",  "pacman",     "pacman -Qq", 0),
    ("dpkg",    "dpkg-query", "dpkg-query -f '.\\n' -W", 0),
    ("rpm",     "rpm",        "rpm -qa", 0),
    ("xbps",    "xbps-query", "xbps-query -l", 0),
    ("apk",     "apk",        "apk info", 0),
    ("portage", "qlist",      "qlist -I", 0),
    ("nix",     "nix-store",  "nix-store -q --requisites /run/current-system/sw", 0),
    ("brew",    "brew",       "brew list -1", 0),
    ("port",    "port",       "port -q installed", 0),
    ("pkg",     "pkg",        "pkg info", 0),
    ("flatpak", "flatpak",    "flatpak list", 0),
    ("snap",    "snap",       "snap list", 1),
]


# ── OS / kernel ───────────────────────────────────────────────────────────────


def get_os(probes: Probes) -> str:
    """Pretty OS name, e.g. ``Arch Linux`` or ``macOS 14.4``."""
    p = probes.platform
    if p.is_linux:
        name = distro.name(pretty=True)
        if name:
            return name
    elif p.is_macos:
        return f"macOS {platform.mac_ver()[0]}".strip()
    if p.system:
        return f"{p.system} {p.release}".strip()
    return UNKNOWN_OS


def get_distro_id(probes: Probes) -> str:
    """Short distro id used for logo lookup."""
    p = probes.platform
    if p.is_linux:
        return distro.id() or "linux"
    if p.is_macos:
        return "macos"
    if p.system == "FreeBSD":
        return "freebsd"
    return "unknown"


def get_kernel(probes: Probes) -> str:
    result = probes.run("uname -sr")
    if result.ok and result.text:
        return result.text
    p = probes.platform
    return f"{p.system} {p.release}".strip() or UNKNOWN


# ── Uptime ────────────────────────────────────────────────────────────────────


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'' if n == 1 else 's'}"


def format_uptime(seconds: int) -> str:
    """Render *seconds* as ``"2 days, 3 hours, 4 minutes"``.

    A unit appears once it or any larger unit is non-zero; seconds are left
    out once the uptime reaches a full day.
    """
    seconds = max(int(seconds), 0)
    days, rem = divmod(seconds, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, secs = divmod(rem, 60)

    parts: list[str] = []
    if days > 0:
        parts.append(_plural(days, "day"))
    if hours > 0 or parts:
        parts.append(_plural(hours, "hour"))
    if minutes > 0 or parts:
        parts.append(_plural(minutes, "minute"))
    if (secs > 0 or parts) and days == 0:
        parts.append(_plural(secs, "second"))

    return ", ".join(parts) or _plural(0, "second")


def get_uptime(probes: Probes) -> str:
    try:
        boot = probes.boot_time()
    except (OSError, psutil.Error) as exc:
        log.debug("boot time unavailable: %s", exc)
        return UNKNOWN
    return format_uptime(int(probes.clock() - boot))


# ── Packages ──────────────────────────────────────────────────────────────────


def count_packages(probes: Probes) -> List[Tuple[str, int]]:
    """Return ``(manager, count)`` for every installed manager that lists anything."""
    counts: list[tuple[str, int]] = []
    for label, binary, command, skip in PACKAGE_COUNTERS:
        if not probes.which(binary):
            continue
        result = probes.run(command)
        if not result.ok:
            log.debug("%s listing failed (exit %s)", label, result.exit_code)
            continue
        lines = [l for l in result.stdout.splitlines() if l.strip()][skip:]
        if lines:
            counts.append((label, len(lines)))
    return counts


def get_packages(probes: Probes) -> str:
    counts = count_packages(probes)
    if not counts:
        return UNKNOWN
    return ", ".join(f"{n} ({label})" for label, n in counts)
