"""Dependency derivation.

Each answer maps to an ordered list of npm packages through a lookup table.
Tables are consulted in a fixed order so the resulting lists are a
deterministic function of the answers.
"""

from __future__ import annotations

from .models import (
    AnswerSet,
    HttpClient,
    PackageManager,
    StateManager,
    TestingFramework,
    UiLibrary,
)


HTTP_CLIENT_PACKAGES: dict[HttpClient, tuple[str, ...]] = {
    HttpClient.NONE: (),
    HttpClient.AXIOS: ("axios",),
    HttpClient.OFETCH: ("ofetch",),
}

STATE_MANAGER_PACKAGES: dict[StateManager, tuple[str, ...]] = {
    StateManager.NONE: (),
    StateManager.ZUSTAND: ("zustand",),
    StateManager.REDUX: ("@reduxjs/toolkit", "react-redux"),
    StateManager.JOTAI: ("jotai",),
}

UI_LIBRARY_PACKAGES: dict[UiLibrary, tuple[str, ...]] = {
    UiLibrary.NONE: (),
    UiLibrary.LUCIDE: ("lucide-react",),
    UiLibrary.HEROICONS: ("@heroicons/react",),
    UiLibrary.REACT_ICONS: ("react-icons",),
}

TESTING_PACKAGES: dict[TestingFramework, tuple[str, ...]] = {
    TestingFramework.NONE: (),
    TestingFramework.VITEST: ("vitest",),
    TestingFramework.JEST: ("jest", "@types/jest"),
    TestingFramework.VITEST_RTL: (
        "vitest",
        "@testing-library/react",
        "@testing-library/jest-dom",
        "@testing-library/user-event",
    ),
}

ROUTER_PACKAGES = ("react-router-dom",)
TAILWIND_PACKAGES = ("tailwindcss", "@tailwindcss/vite")
PRETTIER_PACKAGES = ("prettier", "eslint-config-prettier", "eslint-plugin-prettier")
HUSKY_PACKAGES = ("husky", "lint-staged")

# yarn rejects `yarn install <pkg>`, so yarn and pnpm use `add`.
INSTALL_SUBCOMMANDS: dict[PackageManager, str] = {
    PackageManager.NPM: "install",
    PackageManager.YARN: "add",
    PackageManager.PNPM: "add",
}

DEV_FLAGS: dict[PackageManager, str] = {
    PackageManager.NPM: "--save-dev",
    PackageManager.YARN: "-D",
    PackageManager.PNPM: "-D",
}


def resolve_dependencies(answers: AnswerSet) -> list[str]:
    """Return the runtime dependencies for *answers*, in install order."""
    packages: list[str] = []
    if answers.router:
        packages.extend(ROUTER_PACKAGES)
    packages.extend(HTTP_CLIENT_PACKAGES[answers.http_client])
    packages.extend(STATE_MANAGER_PACKAGES[answers.state_manager])
    packages.extend(UI_LIBRARY_PACKAGES[answers.ui_library])
    if answers.tailwind:
        packages.extend(TAILWIND_PACKAGES)
    return packages


def resolve_dev_dependencies(answers: AnswerSet) -> list[str]:
    """Return the development dependencies for *answers*, in install order."""
    packages: list[str] = []
    if answers.eslint_prettier:
        packages.extend(PRETTIER_PACKAGES)
    packages.extend(TESTING_PACKAGES[answers.testing])
    if answers.husky:
        packages.extend(HUSKY_PACKAGES)
    return packages


def install_command(
    package_manager: PackageManager, packages: list[str] | tuple[str, ...], dev: bool = False
) -> list[str]:
    """Build the argv that installs *packages* with *package_manager*.

    Example::

        install_command(PackageManager.NPM, ["vitest"], dev=True)
        -> ["npm", "install", "--save-dev", "vitest"]
    """
    cmd = [package_manager.value, INSTALL_SUBCOMMANDS[package_manager]]
    if dev:
        cmd.append(DEV_FLAGS[package_manager])
    cmd.extend(packages)
    return cmd
