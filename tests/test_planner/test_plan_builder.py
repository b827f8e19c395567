"""Tests for the plan builder (create_vrx.planner.builder).

Covers:
- The full-stack project (dependencies, Vite config, index files)
- The "everything off" example (no test/formatter config, no script merge)
- Fixed action ordering and gating predicates
- Determinism of the whole plan
"""

from __future__ import annotations

import pytest

from create_vrx.config import Config
from create_vrx.planner.builder import PlanBuilder
from create_vrx.planner.models import AnswerSet, InstallAction, Plan

pytestmark = pytest.mark.unit


@pytest.fixture
def builder() -> PlanBuilder:
    return PlanBuilder(Config())


def _kinds(plan: Plan) -> list[str]:
    return [action.kind for action in plan.actions]


def _written(plan: Plan) -> list[str]:
    return [action.path for action in plan.actions_of("write_file")]


class TestFullStackProject:
    def test_dependencies(self, builder: PlanBuilder, full_answers: AnswerSet):
        plan = builder.build(full_answers)
        assert plan.dependencies == (
            "react-router-dom",
            "axios",
            "zustand",
            "lucide-react",
            "tailwindcss",
            "@tailwindcss/vite",
        )

    def test_vite_config(self, builder: PlanBuilder, full_answers: AnswerSet):
        plan = builder.build(full_answers)
        content = plan.generated_files["vite.config.ts"]
        assert "tailwindcss()" in content
        assert '"@": "/src"' in content
        assert "vite.config.ts" in _written(plan)

    def test_index_files(self, builder: PlanBuilder, full_answers: AnswerSet):
        plan = builder.build(full_answers)
        index_files = sorted(path for path in plan.generated_files if "/index." in path)
        assert index_files == ["src/types/index.ts", "src/utils/index.ts"]
        index_actions = [a for a in plan.actions_of("write_file") if "/index." in a.path]
        assert all(not action.overwrite for action in index_actions)

    def test_action_order(self, builder: PlanBuilder, full_answers: AnswerSet):
        plan = builder.build(full_answers)
        assert _kinds(plan) == [
            "scaffold",
            "chdir",
            "install",
            "install",
            "write_file",      # vite.config.ts
            "prepend_text",    # src/index.css
            "mkdir",
            "mkdir",
            "write_file",      # src/utils/index.ts
            "write_file",      # src/types/index.ts
            "write_file",      # .env
            "write_file",      # .env.example
            "write_file",      # vitest.config.ts
            "write_file",      # src/test/setup.ts
            "merge_scripts",
            "write_file",      # .prettierrc
            "write_file",      # README.md
            "git_init",
            "append_text",     # .gitignore
            "done",
        ]
        assert _written(plan) == [
            "vite.config.ts",
            "src/utils/index.ts",
            "src/types/index.ts",
            ".env",
            ".env.example",
            "vitest.config.ts",
            "src/test/setup.ts",
            ".prettierrc",
            "README.md",
        ]

    def test_install_actions(self, builder: PlanBuilder, full_answers: AnswerSet):
        runtime, dev = builder.build(full_answers).actions_of("install")
        assert isinstance(runtime, InstallAction) and not runtime.dev
        assert dev.dev
        assert dev.packages[-2:] == ("husky", "lint-staged")

    def test_scaffold_and_chdir(self, builder: PlanBuilder, full_answers: AnswerSet):
        scaffold, chdir = builder.build(full_answers).actions[:2]
        assert scaffold.project_name == "demo-app"
        assert scaffold.variant.value == "react-ts"
        assert chdir.path == "demo-app"

    def test_stylesheet_update(self, builder: PlanBuilder, full_answers: AnswerSet):
        (prepend,) = builder.build(full_answers).actions_of("prepend_text")
        assert prepend.path == "src/index.css"
        assert prepend.text == '@import "tailwindcss";\n\n'
        assert prepend.marker == '@import "tailwindcss";'

    def test_scripts_merge(self, builder: PlanBuilder, full_answers: AnswerSet):
        (merge,) = builder.build(full_answers).actions_of("merge_scripts")
        assert merge.path == "package.json"
        assert set(merge.scripts) == {"test", "test:ui", "test:coverage"}


class TestEverythingOff:
    def test_minimal_plan(self, builder: PlanBuilder, bare_answers: AnswerSet):
        plan = builder.build(bare_answers)
        assert plan.dependencies == ()
        assert plan.dev_dependencies == ()
        assert _kinds(plan) == ["scaffold", "chdir", "done"]

    def test_no_test_or_formatter_config(self, builder: PlanBuilder, bare_answers: AnswerSet):
        plan = builder.build(bare_answers)
        assert not any(path.startswith("vitest.config") for path in plan.generated_files)
        assert ".prettierrc" not in plan.generated_files
        assert plan.actions_of("merge_scripts") == []

    def test_vite_config_rendered_but_not_written(self, builder: PlanBuilder, bare_answers: AnswerSet):
        plan = builder.build(bare_answers)
        assert "vite.config.js" in plan.generated_files
        assert "vite.config.js" not in _written(plan)


class TestGating:
    def test_alias_alone_writes_vite_config(self, builder: PlanBuilder):
        plan = builder.build(AnswerSet(tailwind=False, alias="~"))
        assert "vite.config.ts" in _written(plan)
        assert plan.actions_of("prepend_text") == []

    def test_jest_has_no_vitest_config(self, builder: PlanBuilder):
        plan = builder.build(AnswerSet(testing="jest"))
        assert plan.actions_of("merge_scripts") == []
        assert "jest" in plan.dev_dependencies

    def test_git_without_husky(self, builder: PlanBuilder):
        plan = builder.build(AnswerSet(git=True, husky=False))
        assert plan.actions_of("git_init")
        assert plan.actions_of("append_text") == []

    def test_husky_without_git(self, builder: PlanBuilder):
        plan = builder.build(AnswerSet(git=False, husky=True))
        assert plan.actions_of("git_init") == []
        assert plan.actions_of("append_text") == []

    def test_only_dev_dependencies(self, builder: PlanBuilder, bare_answers: AnswerSet):
        answers = AnswerSet(**{**bare_answers.model_dump(), "husky": True})
        (install,) = builder.build(answers).actions_of("install")
        assert install.dev
        assert install.package_manager.value == "yarn"

    def test_folders_without_index_files(self, builder: PlanBuilder):
        plan = builder.build(AnswerSet(folders=["pages", "components"]))
        assert [a.path for a in plan.actions_of("mkdir")] == ["src/components", "src/pages"]
        assert not any("/index." in path for path in _written(plan))

    def test_custom_stylesheet_path(self, full_answers: AnswerSet):
        plan = PlanBuilder(Config(stylesheet_path="src/main.css")).build(full_answers)
        assert plan.actions_of("prepend_text")[0].path == "src/main.css"


class TestDeterminism:
    def test_same_input_same_plan(self, builder: PlanBuilder, full_answers: AnswerSet):
        first = builder.build(full_answers)
        second = PlanBuilder(Config()).build(AnswerSet(**full_answers.model_dump()))
        assert first.model_dump() == second.model_dump()
