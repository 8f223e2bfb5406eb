"""
Session logger: records each produced report to a JSON-lines file.

Enabled with ``--log-dir``.  One file per run, named by start time, so a
series of runs can be diffed later (e.g. to see when the primary IP moved).
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from datetime import datetime

from hostfetch.core.report import HostReport


class SessionLogger:
    """Append-only JSON-lines logger for a single run."""

    def __init__(self, log_dir: str) -> None:
        self._log_dir = log_dir
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        self._log_path = os.path.join(self._log_dir, f"session_{ts}.jsonl")

    # ── Properties ────────────────────────────────────────────────────────

    @property
    def log_path(self) -> str:
        return self._log_path

    # ── Core API ──────────────────────────────────────────────────────────

    def log(self, report: HostReport) -> None:
        """Append *report* to the log file."""
        entry = {"timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"), **asdict(report)}
        try:
            os.makedirs(self._log_dir, exist_ok=True)
            with open(self._log_path, "a", encoding="utf-8") as fh:
                fh.write(json.dumps(entry, ensure_ascii=False) + "\n")
        except OSError:
            pass  # best-effort
