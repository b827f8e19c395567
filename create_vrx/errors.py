"""Exceptions raised while planning or executing a scaffold run."""

from __future__ import annotations

from typing import Any


class ScaffoldError(Exception):
    """Base class for every error that aborts a create-vrx run."""


class PreconditionError(ScaffoldError):
    """Raised before any action runs (target exists, invalid answers, ...)."""


class ActionError(ScaffoldError):
    """Raised when an action of the plan fails.

    The underlying message is kept verbatim in ``str(exc)``; ``action`` is the
    action that failed and ``stderr`` whatever the child process reported.
    """

    def __init__(self, message: str, action: Any = None, stderr: str = "") -> None:
        self.action = action
        self.stderr = stderr
        super().__init__(message)
