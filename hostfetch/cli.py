"""
CLI entry-point for hostfetch.

Supports two modes:
  • **Full report** (default): ``hostfetch`` / ``python -m hostfetch``
  • **Single field**: ``hostfetch ip``, ``hostfetch wm`` etc.
"""

from __future__ import annotations

import argparse
import sys

from hostfetch import __app_name__, __version__


# subcommand -> HostReport attribute
FIELD_COMMANDS = {
    "os": "os",
    "kernel": "kernel",
    "uptime": "uptime",
    "packages": "packages",
    "shell": "shell",
    "wm": "window_manager",
    "terminal": "terminal",
    "term": "terminal",
    "ip": "ip_address",
}


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hostfetch",
        description=f"{__app_name__}: show what this machine is running.",
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Log failed probes to stderr")
    p.add_argument("--json", action="store_true", help="Print the report as JSON")
    p.add_argument("--no-logo", action="store_true", help="Don't draw the distro logo")
    p.add_argument("--ps", action="store_true", help="Query processes with ps instead of psutil")
    p.add_argument("--vpn-prefix", action="append", default=[], metavar="PREFIX",
                   help="Treat interfaces starting with PREFIX as VPNs (repeatable)")
    p.add_argument("--log-dir", default="", help="Append the report to a JSON-lines log in this directory")

    sub = p.add_subparsers(dest="command", help="Print a single field and exit.")

    sub.add_parser("os", help="Operating system name")
    sub.add_parser("kernel", help="Kernel name and release")
    sub.add_parser("uptime", help="Time since boot")
    sub.add_parser("packages", help="Installed package counts")
    sub.add_parser("shell", help="Parent shell")
    sub.add_parser("wm", help="Window manager / desktop environment")
    sub.add_parser("terminal", aliases=["term"], help="Terminal emulator")
    sub.add_parser("ip", help="Primary network address")

    return p


def _dispatch(args: argparse.Namespace) -> None:
    """Wire up probes, then resolve one field or the full report."""
    from hostfetch.config import DEFAULT_PRIORITY_RULES
    from hostfetch.core.probes import default_probes
    from hostfetch.core.processes import PsProcessTable
    from hostfetch.core.report import FIELDS, gather_report, print_report, report_to_json

    probes = default_probes(DEFAULT_PRIORITY_RULES.with_vpn_prefixes(args.vpn_prefix))
    if args.ps:
        probes.processes = PsProcessTable(probes.run)

    if args.command:
        attr = FIELD_COMMANDS[args.command]
        resolver = next(r for a, _, r in FIELDS if a == attr)
        print(resolver(probes))
        return

    report = gather_report(probes)

    if args.log_dir:
        from hostfetch.core.session_log import SessionLogger
        SessionLogger(args.log_dir).log(report)

    if args.json:
        print(report_to_json(report))
        return

    logo = None
    if not args.no_logo:
        from hostfetch.core.system import get_distro_id
        from hostfetch.logo import get_logo
        logo = get_logo(get_distro_id(probes))
    print_report(report, logo)


def main(argv: list[str] | None = None) -> None:
    """Main entry-point called by the ``hostfetch`` console script or ``python -m hostfetch``."""
    from hostfetch.core.utils import setup_logging

    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        _dispatch(args)
    except KeyboardInterrupt:
        print("\nAborted.")
        sys.exit(130)


if __name__ == "__main__":
    main()
