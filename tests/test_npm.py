"""Tests for mono_repos.npm."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from mono_repos.errors import PackageManagerError
from mono_repos.npm import Npm


@patch("mono_repos.npm.run")
class TestNpm:
    def test_install(self, mock_run: MagicMock, tmp_path: Path) -> None:
        Npm(tmp_path).install()
        mock_run.assert_called_once_with("npm", "install", cwd=tmp_path, quiet=False)

    def test_register_for_linking(self, mock_run: MagicMock, tmp_path: Path) -> None:
        Npm(tmp_path).link()
        mock_run.assert_called_once_with("npm", "link", cwd=tmp_path, quiet=False)

    def test_link_named_package(self, mock_run: MagicMock, tmp_path: Path) -> None:
        Npm(tmp_path).link("foo")
        mock_run.assert_called_once_with(
            "npm", "link", "foo", cwd=tmp_path, quiet=False
        )

    def test_run_script(self, mock_run: MagicMock, tmp_path: Path) -> None:
        Npm(tmp_path).run_script("test")
        mock_run.assert_called_once_with(
            "npm", "run-script", "test", cwd=tmp_path, quiet=False
        )

    def test_silent_and_custom_executable(
        self, mock_run: MagicMock, tmp_path: Path
    ) -> None:
        Npm(tmp_path, silent=True, executable="pnpm").publish()
        mock_run.assert_called_once_with("pnpm", "publish", cwd=tmp_path, quiet=True)

    def test_nonzero_exit(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.side_effect = subprocess.CalledProcessError(
            1, ["npm", "publish"], stderr="npm ERR! 403 cannot publish over\n"
        )
        with pytest.raises(PackageManagerError, match="exited with 1: npm ERR! 403"):
            Npm(tmp_path).publish()

    def test_missing_executable(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.side_effect = FileNotFoundError("npm")
        with pytest.raises(PackageManagerError, match="Cannot run npm"):
            Npm(tmp_path).install()
