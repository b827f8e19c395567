"""Interactive option collector.

Asks the same questions, in the same order and with the same defaults, as the
``AnswerSet`` model declares, using ``rich.prompt``.  The target directory is
checked right after the project name is entered so the user does not answer
a dozen questions for a run that cannot start.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from rich.console import Console
from rich.prompt import Confirm, Prompt

from create_vrx.executor.runner import ensure_target_available
from create_vrx.planner.models import (
    PROJECT_NAME_PATTERN,
    AnswerSet,
    Folder,
    HttpClient,
    ImportAlias,
    PackageManager,
    StateManager,
    TestingFramework,
    UiLibrary,
    Variant,
    default_folders,
)
from create_vrx.utils import console as default_console
from create_vrx.utils import print_error, print_section_header

E = TypeVar("E", bound=Enum)

VARIANT_LABELS: dict[Variant, str] = {
    Variant.REACT: "JavaScript",
    Variant.REACT_TS: "TypeScript",
    Variant.REACT_SWC: "JavaScript + SWC",
    Variant.REACT_SWC_TS: "TypeScript + SWC",
}

NO_FOLDERS = "none"


def parse_folders(raw: str) -> list[Folder]:
    """Parse a comma/space separated folder list.

    ``"none"`` (or an empty string) selects no folder.  Duplicates are
    dropped; order does not matter to the plan.

    Raises:
        ValueError: If a name is not a known folder.
    """
    names = [name.strip().strip("/") for name in re.split(r"[,\s]+", raw) if name.strip()]
    if names == [NO_FOLDERS] or not names:
        return []
    folders: list[Folder] = []
    for name in names:
        try:
            folder = Folder(name)
        except ValueError:
            valid = ", ".join(f.value for f in Folder)
            raise ValueError(f"Unknown folder '{name}' (choose from: {valid})") from None
        if folder not in folders:
            folders.append(folder)
    return folders


class OptionCollector:
    """Gathers a complete :class:`AnswerSet` from the terminal.

    Args:
        parent: Directory the project will be created in; used for the
            early "already exists" check.
        console: Rich console used for prompts (tests pass a recording one).
    """

    def __init__(self, parent: str | Path, console: Console | None = None) -> None:
        self.parent = Path(parent)
        self.console = console or default_console

    def collect(self, project_name: str | None = None) -> AnswerSet:
        """Run every prompt and return the validated answers.

        Raises:
            PreconditionError: If the target directory already exists.
        """
        answers: dict[str, Any] = {}

        print_section_header("configure")
        answers["project_name"] = project_name or self._ask_project_name()
        ensure_target_available(self.parent, answers["project_name"])
        for variant, label in VARIANT_LABELS.items():
            self.console.print(f"  [cyan]{variant.value}[/cyan] [dim]{label}[/dim]")
        answers["variant"] = self._choose("🔧 Project variant", Variant, Variant.REACT_TS)
        answers["package_manager"] = self._choose(
            "📦 Package manager", PackageManager, PackageManager.NPM
        )

        print_section_header("essentials")
        answers["tailwind"] = self._confirm("🎨 Include Tailwind CSS?")
        answers["router"] = self._confirm("🗺  Include React Router?")
        answers["http_client"] = self._choose("🌐 HTTP client", HttpClient, HttpClient.AXIOS)
        answers["state_manager"] = self._choose(
            "🗃  State management", StateManager, StateManager.ZUSTAND
        )
        answers["ui_library"] = self._choose("🎯 UI components", UiLibrary, UiLibrary.LUCIDE)

        print_section_header("devtools")
        answers["eslint_prettier"] = self._confirm("✨ Setup ESLint + Prettier?")
        answers["testing"] = self._choose(
            "🧪 Testing framework", TestingFramework, TestingFramework.VITEST_RTL
        )
        answers["husky"] = self._confirm("🐕 Setup Git hooks (Husky)?")
        answers["alias"] = self._choose("📂 Import alias (→ src/)", ImportAlias, ImportAlias.AT)

        print_section_header("structure")
        answers["folders"] = self._ask_folders(default_folders(answers["variant"]))
        answers["env"] = self._confirm("🔐 Create environment files?")
        answers["readme"] = self._confirm("📝 Generate custom README?")
        answers["git"] = self._confirm("📚 Initialize Git repository?")

        return AnswerSet(**answers)

    # -- Prompt helpers ----------------------------------------------------

    def _ask_project_name(self) -> str:
        while True:
            name = Prompt.ask("📛 Project name", default="my-vrx-app", console=self.console)
            if re.fullmatch(PROJECT_NAME_PATTERN, name):
                return name
            print_error(
                "Project name can only contain letters, numbers, hyphens, and underscores"
            )

    def _choose(self, message: str, enum_cls: type[E], default: E) -> E:
        value = Prompt.ask(
            message,
            choices=[member.value for member in enum_cls],
            default=default.value,
            console=self.console,
        )
        return enum_cls(value)

    def _confirm(self, message: str, default: bool = True) -> bool:
        return Confirm.ask(message, default=default, console=self.console)

    def _ask_folders(self, defaults: list[Folder]) -> list[Folder]:
        default = ",".join(folder.value for folder in defaults) or NO_FOLDERS
        while True:
            raw = Prompt.ask(
                f"📂 Folders to create under src/ ({NO_FOLDERS} for no folder)",
                default=default,
                console=self.console,
            )
            try:
                return parse_folders(raw)
            except ValueError as exc:
                print_error(str(exc))
