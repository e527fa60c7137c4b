#!/usr/bin/env python3
"""
Interview the user and generate a new hapi composer project.

Flow:
    1. Ask for project and author details (stored author details are defaults)
    2. Persist the author details in the settings store
    3. Ask for dev modules, hapi plugins and custom plugin boilerplate
    4. Resolve the latest plugin versions from the npm registry
    5. Write the project layout and run npm install
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from pathlib import Path

from hapi_generator.cli.prompts import prompt_confirm, prompt_multiselect, prompt_text
from hapi_generator.core.dependency_resolver import (
    render_manifest_fragment,
    resolve_versions,
)
from hapi_generator.core.settings_store import Dependency, SettingsStore
from hapi_generator.helpers.helpers_logging import (
    print_error,
    print_header,
    print_info,
)
from hapi_generator.helpers.helpers_naming import (
    camelize_slug,
    github_repo_url,
    slugify,
)
from hapi_generator.scaffolding import (
    ProjectProps,
    ScaffoldOptions,
    install_dependencies,
    print_next_steps,
    scaffold_project,
)

DEFAULT_DESCRIPTION = "The best project ever."
DEFAULT_LICENSE = "MIT"
FALLBACK_GITHUB_USER = "user"
FALLBACK_REPO_URL = "user/repo"

# (answer key, prompt message, static default)
PROJECT_PROMPTS: list[tuple[str, str, str | None]] = [
    ("name", "Project Name", None),
    ("description", "Description", DEFAULT_DESCRIPTION),
    ("homepage", "Homepage", None),
    ("license", "License", DEFAULT_LICENSE),
    ("github_username", "GitHub username", None),
    ("author_name", "Author's Name", None),
    ("author_email", "Author's Email", None),
    ("author_url", "Author's Homepage", None),
]


def ask_project_info(meta: Mapping[str, str], default_name: str) -> dict[str, str]:
    """Ask the project prompts; stored meta values override static defaults."""
    answers: dict[str, str] = {}
    for key, message, static_default in PROJECT_PROMPTS:
        default = default_name if key == "name" else static_default
        if meta.get(key):
            default = meta[key]
        answers[key] = prompt_text(message, default)
    return answers


def normalize_answers(answers: Mapping[str, str]) -> dict[str, str]:
    """Trim every answer; an empty license falls back to MIT."""
    normalized = {key: (value or "").strip() for key, value in answers.items()}
    if not normalized.get("license"):
        normalized["license"] = DEFAULT_LICENSE
    return normalized


def build_project_props(answers: Mapping[str, str], current_year: int) -> ProjectProps:
    """Derive slugs, repository URL and homepage from normalized answers."""
    name = answers.get("name", "")
    slugname = slugify(name)
    github_username = answers.get("github_username", "")

    if github_username:
        repo_url = github_repo_url(github_username, slugname)
    else:
        repo_url = FALLBACK_REPO_URL
        github_username = FALLBACK_GITHUB_USER

    return ProjectProps(
        name=name,
        slugname=slugname,
        safe_slugname=camelize_slug(slugname),
        description=answers.get("description", ""),
        homepage=answers.get("homepage") or repo_url,
        license=answers.get("license") or DEFAULT_LICENSE,
        github_username=github_username,
        repo_url=repo_url,
        author_name=answers.get("author_name", ""),
        author_email=answers.get("author_email", ""),
        author_url=answers.get("author_url", ""),
        current_year=current_year,
    )


def ask_dev_modules() -> tuple[bool, bool]:
    """Ask which optional dev modules to include.

    Returns:
        (jscs_module, release_module)
    """
    print_info("\nWhich modules would you like to include?")
    jscs_module = prompt_confirm("  jscs (JavaScript Code Style checker)", default=True)
    release_module = prompt_confirm("  release (Bump npm versions with Gulp)", default=True)
    return jscs_module, release_module


def ask_hapi_plugins(catalog: tuple[Dependency, ...]) -> list[str]:
    """Ask which catalog plugins to include (none preselected)."""
    return prompt_multiselect(
        "Which hapi plugins would you like to include?",
        [(dep.name, f"{dep.name} ({dep.description})") for dep in catalog],
    )


def ask_custom_plugin() -> bool:
    """Ask whether to add boilerplate for a project-local plugin."""
    return prompt_confirm(
        "Would you like to include boilerplate for your own hapi plugin?",
        default=False,
    )


def run_new_project(
    store: SettingsStore,
    target_dir: Path,
    *,
    skip_install: bool = False,
    force: bool = False,
    registry_url: str,
    timeout_ms: int,
) -> int:
    """
    Run the interview and generate the project.

    Args:
        store: Loaded settings store (author defaults and plugin catalog)
        target_dir: Directory to generate into
        skip_install: Do not run npm install
        force: Overwrite existing files
        registry_url: npm registry base URL
        timeout_ms: Per-package version lookup timeout

    Returns:
        Exit code

    Raises:
        SettingsWriteError: If the author details cannot be persisted
    """
    target_dir = target_dir.resolve()
    print_header("Hello, and welcome to the hapi composer generator. Let's be awesome together!")

    answers = normalize_answers(ask_project_info(store.get_meta(), target_dir.name))
    store.set_meta(answers)

    props = build_project_props(answers, date.today().year)
    if not props.slugname:
        print_error(f"Project name '{props.name}' does not produce a usable package name")
        return 1

    jscs_module, release_module = ask_dev_modules()
    plugins = ask_hapi_plugins(store.get_dependencies())
    custom_plugin = ask_custom_plugin()

    if plugins:
        print_info(f"\n🔍 Looking up latest versions for: {', '.join(plugins)}")
    resolved = resolve_versions(plugins, registry_url=registry_url, timeout_ms=timeout_ms)

    options = ScaffoldOptions(
        jscs_module=jscs_module,
        release_module=release_module,
        coveralls_module=True,
        custom_plugin=custom_plugin,
        dependencies_fragment=render_manifest_fragment(resolved),
    )

    print_info(f"\n📄 Writing project files to {target_dir}...")
    scaffold_project(target_dir, props, options, force=force)

    installed = install_dependencies(target_dir, skip_install=skip_install)
    print_next_steps(target_dir, props, installed)
    return 0
