"""Pydantic v2 models for the create-vrx plan builder.

Defines the user's answer record (``AnswerSet``), the actions the executor
understands, and the immutable ``Plan`` that ties them together.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Literal, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer


PROJECT_NAME_PATTERN = r"^[A-Za-z0-9_-]+$"


def _freeze(value: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(value))


# Read-only str -> str mapping that still dumps as a plain dict.
FrozenMapping = Annotated[
    Mapping[str, str],
    AfterValidator(_freeze),
    PlainSerializer(dict, return_type=dict[str, str]),
]


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Variant(str, Enum):
    """create-vite template names."""
    REACT = "react"
    REACT_TS = "react-ts"
    REACT_SWC = "react-swc"
    REACT_SWC_TS = "react-swc-ts"

    @property
    def is_typescript(self) -> bool:
        return "ts" in self.value

    @property
    def is_swc(self) -> bool:
        return "swc" in self.value

    @property
    def script_ext(self) -> str:
        """Extension for generated script files (``ts`` or ``js``)."""
        return "ts" if self.is_typescript else "js"


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


class HttpClient(str, Enum):
    NONE = "none"
    AXIOS = "axios"
    OFETCH = "ofetch"


class StateManager(str, Enum):
    NONE = "none"
    ZUSTAND = "zustand"
    REDUX = "redux"
    JOTAI = "jotai"


class UiLibrary(str, Enum):
    NONE = "none"
    LUCIDE = "lucide"
    HEROICONS = "heroicons"
    REACT_ICONS = "react-icons"


class TestingFramework(str, Enum):
    NONE = "none"
    VITEST = "vitest"
    JEST = "jest"
    VITEST_RTL = "vitest-rtl"

    @property
    def uses_vitest(self) -> bool:
        return self in (TestingFramework.VITEST, TestingFramework.VITEST_RTL)


class ImportAlias(str, Enum):
    NONE = "none"
    AT = "@"
    TILDE = "~"


class Folder(str, Enum):
    """Folders that can be created under ``src/``.

    Declaration order is the order in which folders are processed.
    """
    COMPONENTS = "components"
    PAGES = "pages"
    HOOKS = "hooks"
    UTILS = "utils"
    SERVICES = "services"
    STORES = "stores"
    TYPES = "types"
    CONSTANTS = "constants"
    CONTEXTS = "contexts"


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

class AnswerSet(BaseModel):
    """The complete set of user-chosen configuration values.

    Every field has a default matching the interactive prompt's default, so
    ``AnswerSet(project_name="x")`` is the "accept everything" answer set.
    ``folders`` defaults to the pre-checked folders of a TypeScript project.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    project_name: str = Field(default="my-vrx-app", pattern=PROJECT_NAME_PATTERN)
    variant: Variant = Variant.REACT_TS
    package_manager: PackageManager = PackageManager.NPM
    tailwind: bool = True
    router: bool = True
    http_client: HttpClient = HttpClient.AXIOS
    state_manager: StateManager = StateManager.ZUSTAND
    ui_library: UiLibrary = UiLibrary.LUCIDE
    eslint_prettier: bool = True
    testing: TestingFramework = TestingFramework.VITEST_RTL
    husky: bool = True
    alias: ImportAlias = ImportAlias.AT
    folders: frozenset[Folder] = Field(
        default_factory=lambda: frozenset(default_folders(Variant.REACT_TS))
    )
    env: bool = True
    readme: bool = True
    git: bool = True

    @property
    def is_typescript(self) -> bool:
        return self.variant.is_typescript

    def ordered_folders(self) -> list[Folder]:
        """Selected folders in declaration order, independent of input order."""
        return [folder for folder in Folder if folder in self.folders]


def default_folders(variant: Variant) -> list[Folder]:
    """Folders pre-selected by the interactive prompt for *variant*."""
    folders = [
        Folder.COMPONENTS,
        Folder.PAGES,
        Folder.HOOKS,
        Folder.UTILS,
        Folder.SERVICES,
    ]
    if variant.is_typescript:
        folders.append(Folder.TYPES)
    return folders


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

class _Action(BaseModel):
    model_config = ConfigDict(frozen=True)

    section: str = "files"

    def describe(self) -> str:
        raise NotImplementedError


class ScaffoldAction(_Action):
    """Create the base project with the external scaffolding tool."""
    kind: Literal["scaffold"] = "scaffold"
    section: str = "scaffold"
    project_name: str
    variant: Variant

    def describe(self) -> str:
        return f"Scaffold '{self.project_name}' from template {self.variant.value}"


class ChangeDirectoryAction(_Action):
    """Move the executor's working context into the new project."""
    kind: Literal["chdir"] = "chdir"
    section: str = "scaffold"
    path: str

    def describe(self) -> str:
        return f"Enter {self.path}/"


class InstallAction(_Action):
    """Install packages with the chosen package manager."""
    kind: Literal["install"] = "install"
    section: str = "install"
    package_manager: PackageManager
    packages: tuple[str, ...]
    dev: bool = False

    def describe(self) -> str:
        label = "dev dependencies" if self.dev else "dependencies"
        return f"Install {label}: {', '.join(self.packages)}"


class MakeDirectoryAction(_Action):
    kind: Literal["mkdir"] = "mkdir"
    section: str = "folders"
    path: str

    def describe(self) -> str:
        return f"Create {self.path}/"


class WriteFileAction(_Action):
    """Write a text file; with ``overwrite=False`` existing files are kept."""
    kind: Literal["write_file"] = "write_file"
    path: str
    content: str
    overwrite: bool = True

    def describe(self) -> str:
        return f"Write {self.path}"


class PrependTextAction(_Action):
    """Prepend *text* to an existing file unless it already contains *marker*."""
    kind: Literal["prepend_text"] = "prepend_text"
    section: str = "vite"
    path: str
    text: str
    marker: str

    def describe(self) -> str:
        return f"Prepend {self.marker} to {self.path}"


class MergeScriptsAction(_Action):
    """Merge entries into the ``scripts`` table of a JSON manifest."""
    kind: Literal["merge_scripts"] = "merge_scripts"
    path: str
    scripts: FrozenMapping

    def describe(self) -> str:
        return f"Add scripts {', '.join(self.scripts)} to {self.path}"


class AppendTextAction(_Action):
    """Append *text* to a file, only if that file already exists."""
    kind: Literal["append_text"] = "append_text"
    section: str = "git"
    path: str
    text: str

    def describe(self) -> str:
        return f"Append to {self.path}"


class GitInitAction(_Action):
    kind: Literal["git_init"] = "git_init"
    section: str = "git"

    def describe(self) -> str:
        return "Initialize git repository"


class DoneAction(_Action):
    kind: Literal["done"] = "done"
    section: str = "done"

    def describe(self) -> str:
        return "Done"


Action = Annotated[
    Union[
        ScaffoldAction,
        ChangeDirectoryAction,
        InstallAction,
        MakeDirectoryAction,
        WriteFileAction,
        PrependTextAction,
        MergeScriptsAction,
        AppendTextAction,
        GitInitAction,
        DoneAction,
    ],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------

class Plan(BaseModel):
    """Derived, immutable description of what a run will do.

    ``generated_files`` holds every file whose content is fully known ahead of
    time (keyed by path relative to the project root); ``actions`` decides
    which of them are actually written, and in what order.
    """

    model_config = ConfigDict(frozen=True)

    answers: AnswerSet
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()
    generated_files: FrozenMapping = Field(default_factory=lambda: MappingProxyType({}))
    actions: tuple[Action, ...] = ()

    @property
    def package_count(self) -> int:
        return len(self.dependencies) + len(self.dev_dependencies)

    def actions_of(self, kind: str) -> list[Action]:
        """Return the actions with the given ``kind`` tag, in plan order."""
        return [action for action in self.actions if action.kind == kind]
