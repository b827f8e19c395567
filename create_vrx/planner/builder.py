"""Plan builder: deterministic ``AnswerSet -> Plan`` translation.

No network, no filesystem, no randomness.  The only input besides the answers
is the tool :class:`~create_vrx.config.Config`.
"""

from __future__ import annotations

from create_vrx.config import Config

from .dependencies import resolve_dependencies, resolve_dev_dependencies
from .files import (
    GITIGNORE_ADDITIONS,
    TAILWIND_DIRECTIVE,
    TEST_SCRIPTS,
    FileGenerator,
)
from .models import (
    Action,
    AnswerSet,
    AppendTextAction,
    ChangeDirectoryAction,
    DoneAction,
    GitInitAction,
    ImportAlias,
    InstallAction,
    MakeDirectoryAction,
    MergeScriptsAction,
    Plan,
    PrependTextAction,
    ScaffoldAction,
    WriteFileAction,
)


class PlanBuilder:
    """Builds an immutable :class:`Plan` from a completed answer set.

    Actions come out in a fixed order: scaffold, enter the project, install
    runtime then dev dependencies, configure Vite, update the stylesheet,
    create folders, then env / test-runner / formatter / README files, and
    finally git.  Every optional step is decided once, up front.
    """

    def __init__(self, config: Config | None = None, files: FileGenerator | None = None) -> None:
        self.config = config or Config()
        self.files = files or FileGenerator(self.config)

    def build(self, answers: AnswerSet) -> Plan:
        dependencies = resolve_dependencies(answers)
        dev_dependencies = resolve_dev_dependencies(answers)

        vite_files = self.files.vite_config(answers)
        index_files = self.files.folder_index_files(answers)
        env_files = self.files.env_files() if answers.env else {}
        vitest_files = self.files.vitest_files(answers)
        prettier = {".prettierrc": self.files.prettier_config()} if answers.eslint_prettier else {}
        readme = {"README.md": self.files.readme(answers)} if answers.readme else {}

        actions: list[Action] = [
            ScaffoldAction(project_name=answers.project_name, variant=answers.variant),
            ChangeDirectoryAction(path=answers.project_name),
        ]

        if dependencies:
            actions.append(
                InstallAction(
                    package_manager=answers.package_manager,
                    packages=tuple(dependencies),
                )
            )
        if dev_dependencies:
            actions.append(
                InstallAction(
                    package_manager=answers.package_manager,
                    packages=tuple(dev_dependencies),
                    dev=True,
                )
            )

        if answers.tailwind or answers.alias is not ImportAlias.NONE:
            actions.extend(_write_all(vite_files, section="vite"))
        if answers.tailwind:
            actions.append(
                PrependTextAction(
                    path=self.config.stylesheet_path,
                    text=f"{TAILWIND_DIRECTIVE}\n\n",
                    marker=TAILWIND_DIRECTIVE,
                )
            )

        for folder in answers.ordered_folders():
            actions.append(MakeDirectoryAction(path=f"src/{folder.value}"))
        actions.extend(_write_all(index_files, section="folders", overwrite=False))

        actions.extend(_write_all(env_files))
        if vitest_files:
            actions.extend(_write_all(vitest_files))
            actions.append(
                MergeScriptsAction(path=self.config.manifest_name, scripts=dict(TEST_SCRIPTS))
            )
        actions.extend(_write_all(prettier))
        actions.extend(_write_all(readme))

        if answers.git:
            actions.append(GitInitAction())
            if answers.husky:
                actions.append(AppendTextAction(path=".gitignore", text=GITIGNORE_ADDITIONS))

        actions.append(DoneAction())

        generated_files = {
            **vite_files,
            **index_files,
            **env_files,
            **vitest_files,
            **prettier,
            **readme,
        }

        return Plan(
            answers=answers,
            dependencies=tuple(dependencies),
            dev_dependencies=tuple(dev_dependencies),
            generated_files=generated_files,
            actions=tuple(actions),
        )


def _write_all(
    files: dict[str, str], section: str = "files", overwrite: bool = True
) -> list[WriteFileAction]:
    return [
        WriteFileAction(path=path, content=content, overwrite=overwrite, section=section)
        for path, content in files.items()
    ]
