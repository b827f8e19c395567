"""Shared pytest fixtures for the create-vrx test suite.

Provides reusable fixtures for:
- Temporary parent directories for generated projects
- Representative answer sets (everything on, everything off)
- A fake command runner that imitates create-vite, package managers and git
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from create_vrx.config import Config
from create_vrx.planner.models import AnswerSet, Folder


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def parent_dir(tmp_path: Path) -> Path:
    """Empty directory that generated projects are created in."""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace


@pytest.fixture
def config() -> Config:
    return Config()


# ---------------------------------------------------------------------------
# Answer sets
# ---------------------------------------------------------------------------

@pytest.fixture
def full_answers() -> AnswerSet:
    """Full-stack project: react-ts with Tailwind, router, axios, zustand, lucide."""
    return AnswerSet(
        project_name="demo-app",
        variant="react-ts",
        package_manager="npm",
        tailwind=True,
        router=True,
        http_client="axios",
        state_manager="zustand",
        ui_library="lucide",
        eslint_prettier=True,
        testing="vitest-rtl",
        husky=True,
        alias="@",
        folders=[Folder.UTILS, Folder.TYPES],
        env=True,
        readme=True,
        git=True,
    )


@pytest.fixture
def bare_answers() -> AnswerSet:
    """Plain JavaScript project with every optional feature switched off."""
    return AnswerSet(
        project_name="bare_app",
        variant="react",
        package_manager="yarn",
        tailwind=False,
        router=False,
        http_client="none",
        state_manager="none",
        ui_library="none",
        eslint_prettier=False,
        testing="none",
        husky=False,
        alias="none",
        folders=[],
        env=False,
        readme=False,
        git=False,
    )


# ---------------------------------------------------------------------------
# Fake subprocesses
# ---------------------------------------------------------------------------

BASE_PACKAGE_JSON: dict[str, Any] = {
    "name": "demo-app",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {
        "dev": "vite",
        "build": "vite build",
        "lint": "eslint .",
        "preview": "vite preview",
    },
}

BASE_CSS = ":root {\n  font-family: system-ui;\n}\n"


def _fake_scaffold(cwd: Path, project_name: str) -> None:
    """Create the handful of files create-vite would leave behind."""
    project = cwd / project_name
    (project / "src").mkdir(parents=True)
    (project / "src" / "index.css").write_text(BASE_CSS, encoding="utf-8")
    (project / ".gitignore").write_text("node_modules\ndist\n", encoding="utf-8")
    manifest = dict(BASE_PACKAGE_JSON, name=project_name)
    (project / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")


@pytest.fixture
def fake_runner() -> AsyncMock:
    """AsyncMock standing in for ``run_command``.

    ``npm create ...`` builds a minimal project tree; every other command
    succeeds without side effects.  Calls are recorded on the mock.
    """

    async def _run(cmd: list[str], cwd=None, capture: bool = True, **kwargs):
        if cmd[:2] == ["npm", "create"]:
            _fake_scaffold(Path(cwd), cmd[3])
        return (0, "", "")

    return AsyncMock(side_effect=_run)


@pytest.fixture
def failing_install_runner() -> AsyncMock:
    """Runner whose scaffold works but whose first install fails."""

    async def _run(cmd: list[str], cwd=None, capture: bool = True, **kwargs):
        if cmd[:2] == ["npm", "create"]:
            _fake_scaffold(Path(cwd), cmd[3])
            return (0, "", "")
        if cmd[1] in ("install", "add"):
            return (1, "", "ERR! 404 Not Found")
        return (0, "", "")

    return AsyncMock(side_effect=_run)
