"""End-to-end tests for the ``new`` interview."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from hapi_generator.cli import commands
from hapi_generator.cli.new_project import build_project_props, normalize_answers
from hapi_generator.core.settings_store import SettingsStore

pytestmark = pytest.mark.cli


def _answers(*lines: str) -> str:
    return "\n".join(lines) + "\n"


def _run_new(
    target: Path,
    settings_file: Path,
    answers: str,
    resolved: dict[str, str] | None = None,
):
    runner = CliRunner()
    with patch(
        "hapi_generator.cli.new_project.resolve_versions",
        return_value=resolved or {},
    ) as resolve_mock:
        result = runner.invoke(
            commands._click_cli,
            ["new", str(target), "--skip-install", "--settings", str(settings_file)],
            input=answers,
            standalone_mode=False,
        )
    return result, resolve_mock


class TestNewProjectInterview:
    """Interview answers flow into the settings file and the project files."""

    def test_full_interview_generates_project(
        self, tmp_path: Path, settings_file: Path,
    ) -> None:
        target = tmp_path / "my-service"
        answers = _answers(
            "My Service",        # name
            "",                  # description (default)
            "",                  # homepage
            "",                  # license (default MIT)
            "octocat",           # github username
            "Mona Lisa",         # author name
            "mona@example.com",  # author email
            "",                  # author url
            "",                  # jscs (default yes)
            "n",                 # release
            "1",                 # toggle joi
            "3",                 # toggle hoek
            "0",                 # done
            "y",                 # custom plugin
        )

        result, resolve_mock = _run_new(
            target, settings_file, answers, {"joi": "17.2.0", "hoek": "latest"},
        )

        assert result.exception is None, result.output
        assert result.return_value == 0
        assert resolve_mock.call_args.args[0] == ["joi", "hoek"]

        manifest = json.loads((target / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "my-service"
        assert manifest["description"] == "The best project ever."
        assert manifest["homepage"] == "https://github.com/octocat/my-service"
        assert manifest["dependencies"] == {
            "hapi": "^8.0.0",
            "joi": "17.2.0",
            "hoek": "latest",
        }
        assert "gulp-bump" not in manifest["devDependencies"]
        assert (target / ".jscs.json").is_file()
        assert (target / "lib" / "plugins" / "example" / "index.js").is_file()
        assert (target / "test" / "my-service_test.js").is_file()

        stored = SettingsStore.open(settings_file)
        assert dict(stored.get_meta()) == {
            "github_username": "octocat",
            "author_name": "Mona Lisa",
            "author_email": "mona@example.com",
        }

    def test_stored_meta_becomes_the_default(
        self, tmp_path: Path, settings_file: Path,
    ) -> None:
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(
            "meta:\n"
            "  github_username: octocat\n"
            "  author_name: Mona Lisa\n"
            "  author_email: mona@example.com\n",
            encoding="utf-8",
        )
        target = tmp_path / "other-service"
        answers = _answers(
            "", "", "", "", "", "", "", "",  # accept every default
            "", "",                          # jscs, release
            "0",                             # no plugins
            "",                              # no custom plugin
        )

        result, resolve_mock = _run_new(target, settings_file, answers)

        assert result.exception is None, result.output
        assert resolve_mock.call_args.args[0] == []
        manifest = json.loads((target / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "other-service"
        assert manifest["author"] == "Mona Lisa <mona@example.com>"
        assert manifest["repository"]["url"] == "https://github.com/octocat/other-service"
        assert manifest["dependencies"] == {"hapi": "^8.0.0"}
        assert not (target / "lib" / "plugins").exists()

    def test_blank_answers_do_not_erase_stored_meta(
        self, tmp_path: Path, settings_file: Path,
    ) -> None:
        store = SettingsStore.open(settings_file)
        store.set_meta({"author_name": "Mona Lisa", "author_url": "https://example.com"})
        answers = _answers(
            "Third", "", "", "", "", "", "", "",
            "", "", "0", "",
        )

        result, _ = _run_new(tmp_path / "third", settings_file, answers)

        assert result.exception is None, result.output
        reloaded = SettingsStore.open(settings_file)
        assert dict(reloaded.get_meta()) == {
            "author_name": "Mona Lisa",
            "author_url": "https://example.com",
        }

    def test_missing_github_user_falls_back_to_placeholder_repo(
        self, tmp_path: Path, settings_file: Path,
    ) -> None:
        target = tmp_path / "anon"
        answers = _answers(
            "Anon", "", "", "", "", "", "", "",
            "n", "n", "0", "n",
        )

        result, _ = _run_new(target, settings_file, answers)

        assert result.exception is None, result.output
        manifest = json.loads((target / "package.json").read_text(encoding="utf-8"))
        assert manifest["repository"]["url"] == "user/repo"
        assert manifest["homepage"] == "user/repo"
        assert "travis-ci.org/user/anon" in (target / "README.md").read_text(encoding="utf-8")

    def test_name_without_slug_characters_fails(
        self, tmp_path: Path, settings_file: Path,
    ) -> None:
        target = tmp_path / "bad"
        answers = _answers("!!!", "", "", "", "", "", "", "")

        result, resolve_mock = _run_new(target, settings_file, answers)

        assert result.return_value == 1
        resolve_mock.assert_not_called()
        assert not (target / "package.json").exists()


class TestAnswerNormalization:
    """Pure helpers behind the interview."""

    def test_answers_are_trimmed_and_license_defaults(self) -> None:
        normalized = normalize_answers({"name": "  My App ", "license": "   "})

        assert normalized == {"name": "My App", "license": "MIT"}

    def test_props_derive_slugs_and_repo(self) -> None:
        props = build_project_props(
            {"name": "My App", "github_username": "octocat", "license": "ISC"},
            2026,
        )

        assert props.slugname == "my-app"
        assert props.safe_slugname == "myApp"
        assert props.repo_url == "https://github.com/octocat/my-app"
        assert props.homepage == props.repo_url
        assert props.license == "ISC"
        assert props.current_year == 2026

    def test_explicit_homepage_wins(self) -> None:
        props = build_project_props(
            {"name": "My App", "homepage": "https://my.app"},
            2026,
        )

        assert props.homepage == "https://my.app"
        assert props.repo_url == "user/repo"
        assert props.github_username == "user"
