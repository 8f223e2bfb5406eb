"""
Report assembly and rendering.

Every field is resolved independently and in sequence; the report is then
printed next to the distro logo, or dumped as JSON.
"""

from __future__ import annotations

import json
import platform
from dataclasses import asdict, dataclass
from typing import Callable, List, Optional, Tuple

from rich.columns import Columns
from rich.table import Table
from rich.text import Text

from hostfetch.config import UNKNOWN
from hostfetch.core.network import resolve_primary_address
from hostfetch.core.probes import Probes
from hostfetch.core.processes import resolve_shell, resolve_terminal
from hostfetch.core.system import get_kernel, get_os, get_packages, get_uptime
from hostfetch.core.utils import console
from hostfetch.core.window_manager import resolve_window_manager
from hostfetch.logo import Logo


def get_user(probes: Probes) -> str:
    return probes.environ.get("USER") or probes.environ.get("LOGNAME") or UNKNOWN


def get_host(probes: Probes) -> str:
    return platform.node() or UNKNOWN


# ── Field registry ────────────────────────────────────────────────────────────

# (attribute, label, resolver); also the order fields are displayed in.
FIELDS: List[Tuple[str, str, Callable[[Probes], str]]] = [
    ("os", "OS", get_os),
    ("kernel", "Kernel", get_kernel),
    ("uptime", "Uptime", get_uptime),
    ("packages", "Packages", get_packages),
    ("shell", "Shell", resolve_shell),
    ("window_manager", "WM", resolve_window_manager),
    ("terminal", "Terminal", resolve_terminal),
    ("ip_address", "IP", resolve_primary_address),
]


@dataclass
class HostReport:
    user: str = UNKNOWN
    host: str = UNKNOWN
    os: str = UNKNOWN
    kernel: str = UNKNOWN
    uptime: str = UNKNOWN
    packages: str = UNKNOWN
    shell: str = UNKNOWN
    window_manager: str = UNKNOWN
    terminal: str = UNKNOWN
    ip_address: str = UNKNOWN

    @property
    def title(self) -> str:
        return f"{self.user}@{self.host}"

    def rows(self) -> List[Tuple[str, str]]:
        """``(label, value)`` pairs in display order."""
        return [(label, getattr(self, attr)) for attr, label, _ in FIELDS]


def gather_report(probes: Probes) -> HostReport:
    """Resolve every field, one after another."""
    report = HostReport(user=get_user(probes), host=get_host(probes))
    for attr, _, resolver in FIELDS:
        setattr(report, attr, resolver(probes))
    return report


# ── Rendering ─────────────────────────────────────────────────────────────────


def report_to_json(report: HostReport) -> str:
    return json.dumps(asdict(report), indent=2, ensure_ascii=False)


def render_report(report: HostReport, logo: Optional[Logo] = None, accent: str = "bold bright_cyan") -> Columns:
    """Build the renderable: logo on the left, ``label: value`` table on the right."""
    if logo is not None:
        accent = logo.style

    info = Table.grid(padding=(0, 1))
    info.add_column(style=accent, no_wrap=True)
    info.add_column()

    title = Text()
    title.append(report.user, style=accent)
    title.append("@")
    title.append(report.host, style=accent)
    info.add_row(title, "")
    info.add_row(Text("─" * len(report.title), style="dim"), "")

    for label, value in report.rows():
        info.add_row(f"{label}:", value)

    if logo is None:
        return Columns([info])
    art = Text("\n".join(logo.lines), style=logo.style, no_wrap=True)
    return Columns([art, info], padding=(0, 3))


def print_report(report: HostReport, logo: Optional[Logo] = None) -> None:
    console.print()
    console.print(render_report(report, logo))
    console.print()
