"""create-vrx configuration.

Tool-level settings that are not part of a user's answers: which scaffolding
package is invoked, where the stylesheet lives, what the generated env files
contain.  Settings are Pydantic v2 models so they can be validated at
construction time and read from a JSON file or environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from create_vrx.errors import PreconditionError

ENV_OVERRIDES: dict[str, str] = {
    "VRX_SCAFFOLD_PACKAGE": "scaffold_package",
    "VRX_STYLESHEET": "stylesheet_path",
    "VRX_API_URL": "default_api_url",
    "VRX_SOURCE_ROOT": "source_root",
}


class Config(BaseModel):
    """Global create-vrx configuration.

    Instances are created once by the CLI entry point and passed to both the
    plan builder and the action executor.
    """

    scaffold_package: str = Field(
        default="vite@latest",
        description="Package passed to `npm create` to scaffold the base project",
    )
    stylesheet_path: str = Field(
        default="src/index.css",
        description="Stylesheet that receives the Tailwind import directive",
    )
    api_url_var: str = Field(default="VITE_API_URL", pattern=r"^[A-Z][A-Z0-9_]*$")
    default_api_url: str = Field(default="http://localhost:8000")
    source_root: str = Field(
        default="/src", description="Target of the import alias in the Vite config"
    )
    manifest_name: str = Field(default="package.json")

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: str | Path) -> "Config":
        """Read settings from a JSON file (``create-vrx --config FILE``).

        Keys that are missing keep their defaults.

        Raises:
            PreconditionError: If the file cannot be read or holds invalid
                settings.
        """
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise PreconditionError(f"Cannot read config file {path}: {exc}") from exc
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise PreconditionError(f"Invalid config file {path}:\n{exc}") from exc

    @classmethod
    def from_env(cls, base: "Config | None" = None) -> "Config":
        """Apply environment overrides on top of *base* (defaults if omitted).

        Recognised variables (all optional, empty values are ignored):
            VRX_SCAFFOLD_PACKAGE, VRX_STYLESHEET, VRX_API_URL, VRX_SOURCE_ROOT.
        """
        overrides: dict[str, Any] = {
            field: os.environ[var]
            for var, field in ENV_OVERRIDES.items()
            if os.environ.get(var)
        }
        data = (base or cls()).model_dump()
        data.update(overrides)
        return cls(**data)
