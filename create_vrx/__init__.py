"""create-vrx -- interactive Vite + React project generator.

The package is split in three layers:

* ``create_vrx.prompts`` collects an :class:`~create_vrx.planner.AnswerSet`.
* ``create_vrx.planner`` turns the answers into an immutable
  :class:`~create_vrx.planner.Plan` without touching the filesystem.
* ``create_vrx.executor`` performs the plan step by step.

Quick usage::

    from create_vrx.planner import AnswerSet, PlanBuilder

    plan = PlanBuilder().build(AnswerSet(project_name="my-app"))
    print(plan.dependencies)
"""

__version__ = "1.0.0"
