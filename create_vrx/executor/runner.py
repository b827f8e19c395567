"""Action executor: performs a :class:`~create_vrx.planner.Plan` in order.

Each action is awaited before the next one starts.  The first failure raises
:class:`~create_vrx.errors.ActionError` and nothing after it runs; actions
that already completed are not rolled back, so a failed run leaves the
partial project on disk for inspection.
"""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from create_vrx.config import Config
from create_vrx.errors import ActionError, PreconditionError
from create_vrx.planner.dependencies import install_command
from create_vrx.planner.files import merge_scripts, prepend_once
from create_vrx.planner.models import (
    Action,
    AppendTextAction,
    ChangeDirectoryAction,
    DoneAction,
    GitInitAction,
    InstallAction,
    MakeDirectoryAction,
    MergeScriptsAction,
    Plan,
    PrependTextAction,
    ScaffoldAction,
    WriteFileAction,
)
from create_vrx.utils import (
    load_json,
    print_muted,
    print_section_header,
    print_success,
    print_warning,
    run_command,
    save_json,
)

CommandRunner = Callable[..., Awaitable[tuple[int, str, str]]]


def ensure_target_available(parent: str | Path, project_name: str) -> Path:
    """Return ``parent / project_name`` if nothing exists there yet.

    Raises:
        PreconditionError: If the target directory (or a file) already exists.
    """
    target = Path(parent) / project_name
    if target.exists():
        raise PreconditionError(f"Directory '{project_name}' already exists!")
    return target


@dataclass
class ExecutionResult:
    """What an executor run did."""

    project_path: Path
    completed: list[Action] = field(default_factory=list)
    written_files: list[Path] = field(default_factory=list)
    skipped: list[Action] = field(default_factory=list)


class ActionExecutor:
    """Runs the actions of a plan strictly in sequence.

    The executor owns the working-directory context: it starts at
    ``root`` and moves into the project when it reaches a ``chdir`` action.
    The process-wide current directory is never changed.

    Args:
        root: Directory the project is created in.
        config: Tool configuration (scaffold package name).
        runner: Coroutine used to spawn processes; defaults to
            :func:`create_vrx.utils.run_command`.
        quiet: Suppress progress output.
    """

    def __init__(
        self,
        root: str | Path,
        config: Config | None = None,
        runner: CommandRunner | None = None,
        quiet: bool = False,
    ) -> None:
        self.root = Path(root)
        self.cwd = self.root
        self.config = config or Config()
        self.runner = runner or run_command
        self.quiet = quiet
        self._section: str | None = None
        self._handlers: dict[str, Callable[[Any, ExecutionResult], Awaitable[bool]]] = {
            "scaffold": self._scaffold,
            "chdir": self._chdir,
            "install": self._install,
            "mkdir": self._mkdir,
            "write_file": self._write_file,
            "prepend_text": self._prepend_text,
            "merge_scripts": self._merge_scripts,
            "append_text": self._append_text,
            "git_init": self._git_init,
            "done": self._done,
        }

    # -- Public API --------------------------------------------------------

    async def execute(self, plan: Plan) -> ExecutionResult:
        """Perform every action of *plan* in order.

        Returns:
            An :class:`ExecutionResult` describing completed and skipped
            actions.

        Raises:
            ActionError: On the first failing action.
        """
        result = ExecutionResult(project_path=self.root / plan.answers.project_name)
        for action in plan.actions:
            self._announce(action)
            handler = self._handlers[action.kind]
            try:
                performed = await handler(action, result)
            except (OSError, ValueError) as exc:
                raise ActionError(str(exc), action=action) from exc
            if performed:
                result.completed.append(action)
            else:
                result.skipped.append(action)
        return result

    # -- Output ------------------------------------------------------------

    def _announce(self, action: Action) -> None:
        if self.quiet or action.section == self._section or action.kind == "done":
            return
        self._section = action.section
        print_section_header(action.section)

    def _ok(self, message: str) -> None:
        if not self.quiet:
            print_success(message)

    def _info(self, message: str) -> None:
        if not self.quiet:
            print_muted(message)

    # -- Process actions ---------------------------------------------------

    async def _run(self, action: Action, cmd: list[str], capture: bool) -> None:
        try:
            returncode, _stdout, stderr = await self.runner(cmd, cwd=self.cwd, capture=capture)
        except FileNotFoundError as exc:
            raise ActionError(f"Command not found: {cmd[0]}", action=action) from exc
        if returncode != 0:
            message = f"Command failed (exit {returncode}): {' '.join(cmd)}"
            if stderr:
                message = f"{message}\n{stderr}"
            raise ActionError(message, action=action, stderr=stderr)

    async def _scaffold(self, action: ScaffoldAction, result: ExecutionResult) -> bool:
        self._info("Creating base Vite + React project...")
        cmd = [
            "npm",
            "create",
            self.config.scaffold_package,
            action.project_name,
            "--",
            "--template",
            action.variant.value,
        ]
        await self._run(action, cmd, capture=True)
        self._ok("Base project created")
        return True

    async def _install(self, action: InstallAction, result: ExecutionResult) -> bool:
        self._info(action.describe())
        cmd = install_command(action.package_manager, action.packages, dev=action.dev)
        await self._run(action, cmd, capture=False)
        self._ok("Dev dependencies installed" if action.dev else "Dependencies installed")
        return True

    async def _git_init(self, action: GitInitAction, result: ExecutionResult) -> bool:
        await self._run(action, ["git", "init"], capture=True)
        self._ok("Git repository initialized")
        return True

    # -- Filesystem actions ------------------------------------------------

    async def _chdir(self, action: ChangeDirectoryAction, result: ExecutionResult) -> bool:
        target = self.cwd / action.path
        if not target.is_dir():
            raise ActionError(f"Project directory was not created: {target}", action=action)
        self.cwd = target
        return True

    async def _mkdir(self, action: MakeDirectoryAction, result: ExecutionResult) -> bool:
        path = self.cwd / action.path
        if path.is_dir():
            return False
        path.mkdir(parents=True, exist_ok=True)
        self._ok(f"Created {action.path}/")
        return True

    async def _write_file(self, action: WriteFileAction, result: ExecutionResult) -> bool:
        path = self.cwd / action.path
        if path.exists() and not action.overwrite:
            return False
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(action.content, encoding="utf-8")
        result.written_files.append(path)
        self._ok(f"{action.path} written")
        return True

    async def _prepend_text(self, action: PrependTextAction, result: ExecutionResult) -> bool:
        path = self.cwd / action.path
        if not path.is_file():
            return False
        existing = path.read_text(encoding="utf-8")
        updated = prepend_once(existing, action.text, action.marker)
        if updated == existing:
            return False
        path.write_text(updated, encoding="utf-8")
        result.written_files.append(path)
        self._ok(f"{action.path} updated")
        return True

    async def _merge_scripts(self, action: MergeScriptsAction, result: ExecutionResult) -> bool:
        path = self.cwd / action.path
        if not path.is_file():
            if not self.quiet:
                print_warning(f"{action.path} not found, scripts not added")
            return False
        try:
            manifest = load_json(path)
        except json.JSONDecodeError as exc:
            raise ActionError(f"{action.path} is not valid JSON: {exc}", action=action) from exc
        save_json(merge_scripts(manifest, action.scripts), path)
        result.written_files.append(path)
        self._ok(f"Scripts added: {', '.join(action.scripts)}")
        return True

    async def _append_text(self, action: AppendTextAction, result: ExecutionResult) -> bool:
        path = self.cwd / action.path
        if not path.is_file():
            return False
        with path.open("a", encoding="utf-8") as handle:
            handle.write(action.text)
        result.written_files.append(path)
        self._ok(f"{action.path} extended")
        return True

    async def _done(self, action: DoneAction, result: ExecutionResult) -> bool:
        return True
