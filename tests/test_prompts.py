"""Tests for the interactive option collector (create_vrx.prompts).

Prompts are driven by patching ``rich.prompt.Prompt.ask`` / ``Confirm.ask``.

Covers:
- Accepting every default
- Re-asking on an invalid project name
- Early failure when the target directory exists
- Folder list parsing
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from create_vrx.errors import PreconditionError
from create_vrx.planner.models import AnswerSet, Folder, Variant
from create_vrx.prompts import OptionCollector, parse_folders

pytestmark = pytest.mark.unit


def _default_prompt(message, default=None, **kwargs):
    return default


def _default_confirm(message, default=True, **kwargs):
    return default


class TestParseFolders:
    def test_comma_separated(self):
        assert parse_folders("components, pages,utils") == [
            Folder.COMPONENTS,
            Folder.PAGES,
            Folder.UTILS,
        ]

    def test_trailing_slashes_and_spaces(self):
        assert parse_folders("hooks/ types/") == [Folder.HOOKS, Folder.TYPES]

    def test_duplicates_dropped(self):
        assert parse_folders("utils,utils") == [Folder.UTILS]

    @pytest.mark.parametrize("raw", ["none", "", "  "])
    def test_no_folders(self, raw: str):
        assert parse_folders(raw) == []

    def test_unknown_folder(self):
        with pytest.raises(ValueError, match="Unknown folder 'assets'"):
            parse_folders("components,assets")


class TestOptionCollector:
    def test_all_defaults(self, parent_dir: Path):
        with patch("create_vrx.prompts.Prompt.ask", side_effect=_default_prompt), patch(
            "create_vrx.prompts.Confirm.ask", side_effect=_default_confirm
        ):
            answers = OptionCollector(parent_dir).collect()
        assert answers == AnswerSet()

    def test_prefilled_name_skips_name_prompt(self, parent_dir: Path):
        with patch("create_vrx.prompts.Prompt.ask", side_effect=_default_prompt) as ask, patch(
            "create_vrx.prompts.Confirm.ask", side_effect=_default_confirm
        ):
            answers = OptionCollector(parent_dir).collect("shop")
        assert answers.project_name == "shop"
        assert not any("Project name" in call.args[0] for call in ask.call_args_list)

    def test_invalid_name_is_asked_again(self, parent_dir: Path):
        names = iter(["not valid!", "valid-name"])

        def _prompt(message, default=None, **kwargs):
            if "Project name" in message:
                return next(names)
            return default

        with patch("create_vrx.prompts.Prompt.ask", side_effect=_prompt), patch(
            "create_vrx.prompts.Confirm.ask", side_effect=_default_confirm
        ), patch("create_vrx.prompts.print_error") as error:
            answers = OptionCollector(parent_dir).collect()
        assert answers.project_name == "valid-name"
        error.assert_called_once()

    def test_existing_target_fails_before_other_prompts(self, parent_dir: Path):
        (parent_dir / "taken").mkdir()
        with patch("create_vrx.prompts.Prompt.ask", side_effect=_default_prompt) as ask, patch(
            "create_vrx.prompts.Confirm.ask", side_effect=_default_confirm
        ) as confirm:
            with pytest.raises(PreconditionError, match="already exists"):
                OptionCollector(parent_dir).collect("taken")
        assert ask.call_count == 0
        assert confirm.call_count == 0

    def test_javascript_variant_defaults_folders_without_types(self, parent_dir: Path):
        def _prompt(message, default=None, **kwargs):
            if "variant" in message:
                return "react"
            return default

        with patch("create_vrx.prompts.Prompt.ask", side_effect=_prompt), patch(
            "create_vrx.prompts.Confirm.ask", side_effect=_default_confirm
        ):
            answers = OptionCollector(parent_dir).collect("js-app")
        assert answers.variant is Variant.REACT
        assert Folder.TYPES not in answers.folders
        assert Folder.COMPONENTS in answers.folders

    def test_declined_options(self, parent_dir: Path):
        def _prompt(message, default=None, choices=None, **kwargs):
            if choices and "none" in choices:
                return "none"
            if "Folders" in message:
                return "none"
            return default

        with patch("create_vrx.prompts.Prompt.ask", side_effect=_prompt), patch(
            "create_vrx.prompts.Confirm.ask", return_value=False
        ):
            answers = OptionCollector(parent_dir).collect("bare")
        assert answers.http_client.value == "none"
        assert answers.testing.value == "none"
        assert answers.alias.value == "none"
        assert answers.folders == frozenset()
        assert not any([answers.tailwind, answers.router, answers.git, answers.readme])

    def test_bad_folder_list_is_asked_again(self, parent_dir: Path):
        folder_answers = iter(["assets", "pages"])

        def _prompt(message, default=None, **kwargs):
            if "Folders" in message:
                return next(folder_answers)
            return default

        with patch("create_vrx.prompts.Prompt.ask", side_effect=_prompt), patch(
            "create_vrx.prompts.Confirm.ask", side_effect=_default_confirm
        ), patch("create_vrx.prompts.print_error"):
            answers = OptionCollector(parent_dir).collect("pages-only")
        assert answers.folders == frozenset({Folder.PAGES})
