"""Tests for hostfetch.core.utils: command runner and priority sort."""

from __future__ import annotations

import logging
import subprocess
from unittest.mock import patch

from hostfetch.core.utils import ShellResult, run_command, setup_logging, sort_by_priority


class TestRunCommand:
    def test_success(self) -> None:
        result = run_command("echo hello")
        assert result == ShellResult("hello\n", "", 0)
        assert result.ok
        assert result.text == "hello"

    def test_exit_code_and_stderr(self) -> None:
        result = run_command("echo oops >&2; exit 3")
        assert result.exit_code == 3
        assert not result.ok
        assert result.stderr.strip() == "oops"

    def test_shell_expansion_default(self) -> None:
        result = run_command('echo "${HOSTFETCH_SURELY_UNSET_VAR:-wayland-0}"')
        assert result.text == "wayland-0"

    def test_timeout(self) -> None:
        with patch("hostfetch.core.utils.subprocess.run", side_effect=subprocess.TimeoutExpired("sh", 1)):
            result = run_command("sleep 5", timeout=1)
        assert result.exit_code == -2

    def test_missing_shell(self) -> None:
        with patch("hostfetch.core.utils.subprocess.run", side_effect=FileNotFoundError()):
            assert run_command("true").exit_code == -1

    def test_os_error(self) -> None:
        with patch("hostfetch.core.utils.subprocess.run", side_effect=PermissionError("denied")):
            result = run_command("true")
        assert result.exit_code == -3
        assert "denied" in result.stderr


class TestSortByPriority:
    def test_ascending_and_stable(self) -> None:
        items = [("a", 2), ("b", 1), ("c", 2), ("d", 0)]
        assert sort_by_priority(items, lambda i: i[1]) == [("d", 0), ("b", 1), ("a", 2), ("c", 2)]

    def test_empty(self) -> None:
        assert sort_by_priority([], lambda i: i) == []


def test_setup_logging_levels() -> None:
    setup_logging(verbose=True)
    assert logging.getLogger("hostfetch").level == logging.DEBUG
    setup_logging(verbose=False)
    logger = logging.getLogger("hostfetch")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
