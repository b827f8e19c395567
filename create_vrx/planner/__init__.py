"""create-vrx plan builder -- turns answers into an immutable plan.

Quick usage::

    from create_vrx.planner import AnswerSet, PlanBuilder

    plan = PlanBuilder().build(AnswerSet(project_name="my-app", tailwind=False))
    for action in plan.actions:
        print(action.describe())
"""

from create_vrx.planner.builder import PlanBuilder
from create_vrx.planner.files import FileGenerator, merge_scripts, prepend_once
from create_vrx.planner.models import (
    Action,
    AnswerSet,
    Folder,
    HttpClient,
    ImportAlias,
    PackageManager,
    Plan,
    StateManager,
    TestingFramework,
    UiLibrary,
    Variant,
)
from create_vrx.planner.templates import TemplateRenderer

__all__ = [
    "Action",
    "AnswerSet",
    "FileGenerator",
    "Folder",
    "HttpClient",
    "ImportAlias",
    "PackageManager",
    "Plan",
    "PlanBuilder",
    "StateManager",
    "TemplateRenderer",
    "TestingFramework",
    "UiLibrary",
    "Variant",
    "merge_scripts",
    "prepend_once",
]
