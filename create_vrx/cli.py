"""create-vrx command-line entry point.

Collects answers (interactively, from a JSON file, or from defaults), builds
the plan, checks that the target directory is free, and executes the plan.

Usage::

    create-vrx
    create-vrx my-app --yes
    create-vrx my-app --answers answers.json --dry-run
    create-vrx my-app --yes --config create-vrx.json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
import time
from pathlib import Path

from pydantic import ValidationError
from rich.table import Table

from create_vrx import __version__
from create_vrx.config import Config
from create_vrx.errors import ActionError, PreconditionError
from create_vrx.executor.runner import (
    ActionExecutor,
    CommandRunner,
    ExecutionResult,
    ensure_target_available,
)
from create_vrx.planner.builder import PlanBuilder
from create_vrx.planner.models import AnswerSet, Plan, TestingFramework
from create_vrx.prompts import OptionCollector
from create_vrx.utils import (
    console,
    format_duration,
    print_error,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# Answer sources
# ---------------------------------------------------------------------------


def load_answers(path: str | Path, project_name: str | None = None) -> AnswerSet:
    """Load an :class:`AnswerSet` from a JSON file.

    A *project_name* given on the command line wins over the file's value.

    Raises:
        PreconditionError: If the file is missing, not JSON, or invalid.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise PreconditionError(f"Cannot read answers file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PreconditionError(f"Answers file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise PreconditionError(f"Answers file {path} must contain a JSON object")
    if project_name:
        data["project_name"] = project_name
    return _validate_answers(data)


def default_answers(project_name: str | None = None) -> AnswerSet:
    """The answers a user gets by pressing enter at every prompt."""
    data = {"project_name": project_name} if project_name else {}
    return _validate_answers(data)


def _validate_answers(data: dict) -> AnswerSet:
    try:
        return AnswerSet.model_validate(data)
    except ValidationError as exc:
        raise PreconditionError(_format_validation_error(exc)) from exc


def _format_validation_error(exc: ValidationError) -> str:
    lines = ["Invalid answers:"]
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "answers"
        if location == "project_name" and err["type"] == "string_pattern_mismatch":
            lines.append(
                "  project_name: Project name can only contain letters, numbers, "
                "hyphens, and underscores"
            )
        else:
            lines.append(f"  {location}: {err['msg']}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def print_plan(plan: Plan) -> None:
    """Print the plan without executing it (``--dry-run``)."""
    print_summary_table(
        {
            "Dependencies": ", ".join(plan.dependencies) or "-",
            "Dev dependencies": ", ".join(plan.dev_dependencies) or "-",
            "Generated files": ", ".join(plan.generated_files) or "-",
        },
        title=f"Plan for {plan.answers.project_name}",
    )

    table = Table(title="Actions", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Kind", style="magenta", no_wrap=True)
    table.add_column("Description")
    for index, action in enumerate(plan.actions, start=1):
        table.add_row(str(index), action.kind, action.describe())
    console.print(table)


def print_next_steps(plan: Plan, elapsed: float) -> None:
    answers = plan.answers
    pm = answers.package_manager.value

    console.print()
    console.print("[bold bright_cyan]🎉 PROJECT CREATED SUCCESSFULLY![/bold bright_cyan]")
    console.print()
    print_summary_table(
        {
            "Name": answers.project_name,
            "Variant": answers.variant.value,
            "Package Manager": pm,
            "Dependencies": f"{plan.package_count} packages",
            "Duration": format_duration(elapsed),
        },
        title="Project Summary",
    )

    print_warning("🚀 Next Steps:")
    console.print(f"   cd {answers.project_name}")
    console.print(f"   {pm} run dev")
    if answers.testing is not TestingFramework.NONE:
        console.print(f"   {pm} run test")
    console.print("\n   [cyan]Happy coding! 🎯[/cyan]\n")


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------


async def run(
    answers: AnswerSet,
    parent: str | Path,
    config: Config | None = None,
    *,
    dry_run: bool = False,
    runner: CommandRunner | None = None,
    quiet: bool = False,
) -> tuple[Plan, ExecutionResult | None]:
    """Build the plan for *answers* and execute it under *parent*.

    The target directory check happens before anything else; with
    ``dry_run`` the plan is returned without being executed.

    Raises:
        PreconditionError: If the target directory already exists.
        ActionError: If an action fails.
    """
    config = config or Config()
    ensure_target_available(parent, answers.project_name)
    plan = PlanBuilder(config).build(answers)
    if dry_run:
        return plan, None

    executor = ActionExecutor(parent, config=config, runner=runner, quiet=quiet)
    result = await executor.execute(plan)
    return plan, result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-vrx",
        description="create-vrx -- Modern React project generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-vrx\n"
            "  create-vrx my-app --yes\n"
            "  create-vrx my-app --answers answers.json --dry-run\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Project name (prompted for if omitted)",
    )
    parser.add_argument(
        "--answers", "-a",
        default=None,
        help="JSON file with every answer; skips the prompts",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Accept the default for every option; skips the prompts",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the plan without creating anything",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="JSON file with tool settings (scaffold package, stylesheet, ...); "
        "VRX_* environment variables override it",
    )
    parser.add_argument(
        "--directory", "-C",
        default=".",
        help="Directory to create the project in (default: current directory)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-vrx`` / ``python -m create_vrx``."""
    args = build_parser().parse_args(argv)
    parent = Path(args.directory).resolve()

    console.print("\n[bold bright_cyan]🚀 create-vrx — Modern React Project Generator[/bold bright_cyan]")
    console.print("[dim]   Built for developers who want more than basics[/dim]")

    started = time.monotonic()
    try:
        config = Config.from_env(Config.load(args.config) if args.config else None)
        if args.answers:
            answers = load_answers(args.answers, args.project_name)
        elif args.yes:
            answers = default_answers(args.project_name)
        else:
            if args.project_name:
                _validate_answers({"project_name": args.project_name})
            answers = OptionCollector(parent).collect(args.project_name)

        plan, _result = asyncio.run(run(answers, parent, config, dry_run=args.dry_run))
    except PreconditionError as exc:
        print_error(str(exc))
        sys.exit(1)
    except ActionError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        print_warning("\nAborted.")
        sys.exit(1)

    if args.dry_run:
        print_plan(plan)
        return
    print_next_steps(plan, time.monotonic() - started)


if __name__ == "__main__":
    main()
