"""Shared utility functions for create-vrx.

Provides async command execution, JSON I/O, duration formatting and
Rich-based progress reporting.  Console output is the only reporting channel
the tool has; everything user-visible goes through the helpers below.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    capture: bool = True,
) -> tuple[int, str, str]:
    """Run a command asynchronously and wait for it to exit.

    There is no timeout: package installs can legitimately take minutes.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams, so the user sees the child's output).

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.

    Raises:
        FileNotFoundError: If the program cannot be found on ``PATH``.
    """
    pipe = asyncio.subprocess.PIPE if capture else None
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=pipe,
        stderr=pipe,
        cwd=str(cwd) if cwd else None,
    )
    stdout_bytes, stderr_bytes = await process.communicate()

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file that holds an object.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return data


def save_json(data: dict[str, Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON (two-space indent, trailing newline).

    Parent directories are created automatically.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False)
    file_path.write_text(content + "\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


SECTION_TITLES: dict[str, str] = {
    "configure": "PROJECT CONFIGURATION",
    "essentials": "ESSENTIAL TOOLS",
    "devtools": "DEVELOPMENT TOOLS",
    "structure": "PROJECT STRUCTURE",
    "scaffold": "SCAFFOLDING PROJECT",
    "install": "INSTALLING PACKAGES",
    "vite": "CONFIGURING VITE",
    "folders": "CREATING PROJECT STRUCTURE",
    "files": "CREATING CONFIG FILES",
    "git": "GIT SETUP",
}

SECTION_COLORS: dict[str, str] = {
    "configure": "medium_purple",
    "essentials": "medium_purple",
    "devtools": "medium_purple",
    "structure": "medium_purple",
    "scaffold": "bright_cyan",
    "install": "bright_yellow",
    "vite": "bright_magenta",
    "folders": "bright_green",
    "files": "bright_blue",
    "git": "bright_red",
}


def print_section_header(section: str) -> None:
    """Print a full-width rule announcing a section of the run.

    Args:
        section: Key into :data:`SECTION_TITLES`; unknown keys are printed
            upper-cased as-is.
    """
    title = SECTION_TITLES.get(section, section.upper())
    color = SECTION_COLORS.get(section, "white")
    console.print()
    console.print(Rule(f"[bold {color}] {title} [/bold {color}]", style=color))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]✔ {message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]✗ {message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_muted(message: str) -> None:
    """Print a dimmed progress line."""
    console.print(f"[dim]{message}[/dim]")
