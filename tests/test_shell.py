"""Tests for mono_repos.shell."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from mono_repos.shell import git, info, run, step, warn


class TestGit:
    @patch("mono_repos.shell.subprocess.run")
    def test_returns_stripped_stdout(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = subprocess.CompletedProcess([], 0, stdout="main\n")

        assert git("rev-parse", "--abbrev-ref", "HEAD", cwd=tmp_path) == "main"
        mock_run.assert_called_once_with(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            cwd=tmp_path,
            capture_output=True,
            text=True,
            check=True,
        )


class TestRun:
    @patch("mono_repos.shell.subprocess.run")
    def test_streams_by_default(self, mock_run: MagicMock) -> None:
        run("npm", "install")
        mock_run.assert_called_once_with(
            ("npm", "install"), cwd=None, capture_output=False, text=True, check=True
        )

    @patch("mono_repos.shell.subprocess.run")
    def test_quiet_captures(self, mock_run: MagicMock, tmp_path: Path) -> None:
        run("npm", "publish", cwd=tmp_path, quiet=True, check=False)
        mock_run.assert_called_once_with(
            ("npm", "publish"), cwd=tmp_path, capture_output=True, text=True, check=False
        )


class TestOutput:
    def test_step_header(self, capsys: pytest.CaptureFixture[str]) -> None:
        step("publish foo")
        out = capsys.readouterr().out
        assert "publish foo" in out
        assert "─" * 60 in out

    def test_info_goes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        info("linked foo")
        assert capsys.readouterr().out == "  linked foo\n"

    def test_warn_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        warn("install failed")
        captured = capsys.readouterr()
        assert captured.err == "  install failed\n"
        assert captured.out == ""
