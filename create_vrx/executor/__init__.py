"""Action executor -- performs a plan against the filesystem and subprocesses."""

from create_vrx.executor.runner import (
    ActionExecutor,
    ExecutionResult,
    ensure_target_available,
)

__all__ = [
    "ActionExecutor",
    "ExecutionResult",
    "ensure_target_available",
]
