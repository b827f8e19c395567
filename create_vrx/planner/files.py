"""Generated file contents.

Everything here is a pure function of the answers (and of the tool
configuration): nothing reads or writes the filesystem.  The two helpers that
operate on files the scaffolding tool creates, :func:`prepend_once` and
:func:`merge_scripts`, take the existing content as an argument and return
the new content, so the executor only has to do the I/O.
"""

from __future__ import annotations

import json
from typing import Any

from create_vrx.config import Config

from .models import AnswerSet, Folder, ImportAlias, TestingFramework
from .templates import TemplateRenderer


TAILWIND_DIRECTIVE = '@import "tailwindcss";'

# Only these folders receive a placeholder index file.
INDEX_FOLDERS: frozenset[Folder] = frozenset(
    {Folder.UTILS, Folder.CONSTANTS, Folder.TYPES}
)

FOLDER_DESCRIPTIONS: dict[Folder, str] = {
    Folder.COMPONENTS: "Reusable UI components",
    Folder.PAGES: "Route components",
    Folder.HOOKS: "Custom React hooks",
    Folder.UTILS: "Utility functions",
    Folder.SERVICES: "API services",
    Folder.STORES: "State stores",
    Folder.TYPES: "TypeScript definitions",
    Folder.CONSTANTS: "Shared constants",
    Folder.CONTEXTS: "React context providers",
}

TEST_SCRIPTS: dict[str, str] = {
    "test": "vitest",
    "test:ui": "vitest --ui",
    "test:coverage": "vitest --coverage",
}

PRETTIER_CONFIG: dict[str, Any] = {
    "semi": True,
    "trailingComma": "es5",
    "singleQuote": True,
    "printWidth": 80,
    "tabWidth": 2,
}

GITIGNORE_ADDITIONS = """
# Logs
*.log
npm-debug.log*
yarn-debug.log*
yarn-error.log*

# Runtime data
pids
*.pid
*.seed
*.pid.lock

# Coverage directory used by tools like istanbul
coverage/

# IDE
.vscode/
.idea/
"""


# ---------------------------------------------------------------------------
# Content transforms applied by the executor
# ---------------------------------------------------------------------------

def prepend_once(existing: str, text: str, marker: str | None = None) -> str:
    """Return *existing* with *text* in front, unless *marker* is already there.

    *marker* defaults to *text* stripped of surrounding whitespace.  Applying
    the result twice yields the same content as applying it once.
    """
    marker = marker if marker is not None else text.strip()
    if marker in existing:
        return existing
    return text + existing


def merge_scripts(manifest: dict[str, Any], scripts: dict[str, str]) -> dict[str, Any]:
    """Return a copy of *manifest* whose ``scripts`` table includes *scripts*.

    Existing entries are kept; only entries with the same name are
    overwritten.  Other top-level keys of the manifest are untouched.

    Raises:
        ValueError: If the manifest's ``scripts`` value is not an object.
    """
    existing = manifest.get("scripts")
    if existing is None:
        existing = {}
    elif not isinstance(existing, dict):
        raise ValueError("package.json 'scripts' is not an object")
    merged = dict(manifest)
    merged["scripts"] = {**existing, **scripts}
    return merged


# ---------------------------------------------------------------------------
# File generator
# ---------------------------------------------------------------------------

class FileGenerator:
    """Renders the text files a project receives.

    Each method returns ``{relative_path: content}`` (or a single string for
    single-file outputs whose path is fixed) and never touches the disk.
    """

    def __init__(self, config: Config | None = None, renderer: TemplateRenderer | None = None) -> None:
        self.config = config or Config()
        self.renderer = renderer or TemplateRenderer()

    # -- Build-tool config -------------------------------------------------

    @staticmethod
    def vite_config_path(answers: AnswerSet) -> str:
        return f"vite.config.{answers.variant.script_ext}"

    @staticmethod
    def react_plugin(answers: AnswerSet) -> str:
        if answers.variant.is_swc:
            return "@vitejs/plugin-react-swc"
        return "@vitejs/plugin-react"

    def vite_config(self, answers: AnswerSet) -> dict[str, str]:
        """Vite config with the React plugin, plus Tailwind and alias if chosen."""
        plugins = ["react()"]
        if answers.tailwind:
            plugins.append("tailwindcss()")

        alias = None if answers.alias is ImportAlias.NONE else answers.alias.value
        content = self.renderer.render(
            "vite.config.j2",
            {
                "react_plugin": self.react_plugin(answers),
                "tailwind": answers.tailwind,
                "plugins": plugins,
                "alias": alias,
                "source_root": self.config.source_root,
            },
        )
        return {self.vite_config_path(answers): content}

    # -- Project structure -------------------------------------------------

    def folder_index_files(self, answers: AnswerSet) -> dict[str, str]:
        """Placeholder ``index`` files for the selected utils/constants/types folders."""
        ext = answers.variant.script_ext
        return {
            f"src/{folder.value}/index.{ext}": f"// Export {folder.value} here\n"
            for folder in answers.ordered_folders()
            if folder in INDEX_FOLDERS
        }

    def env_files(self) -> dict[str, str]:
        var = self.config.api_url_var
        return {
            ".env": f"{var}={self.config.default_api_url}\n",
            ".env.example": f"{var}=\n",
        }

    # -- Tooling -----------------------------------------------------------

    def vitest_files(self, answers: AnswerSet) -> dict[str, str]:
        """Vitest config (and the RTL setup file) when a Vitest flavour is chosen."""
        if not answers.testing.uses_vitest:
            return {}

        ext = answers.variant.script_ext
        setup_file = None
        if answers.testing is TestingFramework.VITEST_RTL:
            setup_file = f"src/test/setup.{ext}"

        files = {
            f"vitest.config.{ext}": self.renderer.render(
                "vitest.config.j2",
                {"react_plugin": self.react_plugin(answers), "setup_file": setup_file},
            )
        }
        if setup_file:
            files[setup_file] = "import '@testing-library/jest-dom'\n"
        return files

    def prettier_config(self) -> str:
        return json.dumps(PRETTIER_CONFIG, indent=2) + "\n"

    # -- README ------------------------------------------------------------

    @staticmethod
    def readme_features(answers: AnswerSet) -> list[str]:
        """Feature bullets, always in TypeScript, Tailwind, Router, Testing order."""
        features: list[str] = []
        if answers.is_typescript:
            features.append("TypeScript")
        if answers.tailwind:
            features.append("Tailwind CSS")
        if answers.router:
            features.append("React Router")
        if answers.testing is not TestingFramework.NONE:
            features.append(f"{answers.testing.value} Testing")
        return features

    def readme(self, answers: AnswerSet) -> str:
        built_with = [
            ("Vite", "https://vitejs.dev/", "Next Generation Frontend Tooling"),
            ("React", "https://react.dev/", "A JavaScript library for building user interfaces"),
        ]
        if answers.tailwind:
            built_with.append(
                ("Tailwind CSS", "https://tailwindcss.com/", "A utility-first CSS framework")
            )
        if answers.router:
            built_with.append(
                ("React Router", "https://reactrouter.com/", "Declarative routing for React")
            )
        if answers.testing.uses_vitest:
            built_with.append(("Vitest", "https://vitest.dev/", "Testing Framework"))
        elif answers.testing is TestingFramework.JEST:
            built_with.append(("Jest", "https://jestjs.io/", "Testing Framework"))

        return self.renderer.render(
            "README.md.j2",
            {
                "project_name": answers.project_name,
                "features": self.readme_features(answers),
                "package_manager": answers.package_manager.value,
                "testing": answers.testing is not TestingFramework.NONE,
                "folders": [
                    (folder.value, FOLDER_DESCRIPTIONS[folder])
                    for folder in answers.ordered_folders()
                ],
                "typescript": answers.is_typescript,
                "built_with": built_with,
            },
        )
