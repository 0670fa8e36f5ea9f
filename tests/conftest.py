"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from mono_repos.workspace import Workspace


def write_manifest(root: Path, folder: str, data: dict[str, Any]) -> Path:
    """Create packages/<folder>/package.json under root."""
    package_dir = root / "packages" / folder
    package_dir.mkdir(parents=True, exist_ok=True)
    manifest = package_dir / "package.json"
    manifest.write_text(json.dumps(data, indent=2) + "\n")
    return manifest


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    """Create a monorepo with two packages and a stray file.

    bar depends on foo (a sibling) and on left-pad (external).
    """
    write_manifest(
        tmp_path,
        "foo",
        {"name": "mono-repos-fixture-foo", "version": "0.0.0"},
    )
    write_manifest(
        tmp_path,
        "bar",
        {
            "name": "mono-repos-fixture-bar",
            "version": "1.2.3",
            "dependencies": {"mono-repos-fixture-foo": "^0.0.0"},
            "devDependencies": {"left-pad": "^1.0.0"},
        },
    )
    (tmp_path / "packages" / "README.md").write_text("not a package\n")
    return tmp_path


@pytest.fixture
def npm() -> Iterator[MagicMock]:
    """Replace the npm client; every Package shares the returned instance."""
    with patch("mono_repos.package.Npm") as mock_cls:
        yield mock_cls.return_value


@pytest.fixture
def workspace(workspace_root: Path, npm: MagicMock) -> Workspace:
    """Workspace over workspace_root with git and npm replaced by mocks."""
    ws = Workspace(workspace_root)
    ws.git = MagicMock()
    ws.git.current_branch.return_value = "main"
    return ws
