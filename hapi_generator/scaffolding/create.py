"""Create new hapi composer project scaffolds."""

import json
from pathlib import Path

from hapi_generator.helpers.helpers_logging import print_created, print_skipped

from .templates import (
    get_composer_config,
    get_editorconfig_template,
    get_example_plugin_package,
    get_example_plugin_template,
    get_gitignore_template,
    get_gulpfile_template,
    get_index_template,
    get_jscs_template,
    get_jshintrc_template,
    get_package_json_template,
    get_readme_template,
    get_test_template,
    get_travis_template,
)
from .types import ProjectProps, ScaffoldOptions

EXAMPLE_PLUGIN_DIR = "lib/plugins/example"


def _write_file(
    project_root: Path,
    relative_path: str,
    content: str,
    force: bool,
) -> Path | None:
    """Write one file below project_root unless it exists and force is off.

    Returns:
        The written path, or None if the file was skipped
    """
    file_path = project_root / relative_path
    if file_path.exists() and not force:
        print_skipped(relative_path)
        return None

    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    print_created(relative_path)
    return file_path


def get_project_files(
    props: ProjectProps,
    options: ScaffoldOptions,
) -> dict[str, str]:
    """Return the full project layout as {relative path: content}.

    Args:
        props: Project answers and derived names
        options: Selected modules and the rendered dependencies fragment
    """
    files: dict[str, str] = {
        ".jshintrc": get_jshintrc_template(),
        ".gitignore": get_gitignore_template(),
        ".travis.yml": get_travis_template(options),
        ".editorconfig": get_editorconfig_template(),
    }
    if options.jscs_module:
        files[".jscs.json"] = get_jscs_template()

    files["README.md"] = get_readme_template(props, options)
    files["gulpfile.js"] = get_gulpfile_template(props, options)
    files["package.json"] = get_package_json_template(props, options)
    files["lib/index.js"] = get_index_template(props)

    if options.custom_plugin:
        files[f"{EXAMPLE_PLUGIN_DIR}/package.json"] = (
            json.dumps(get_example_plugin_package(), indent=2) + "\n"
        )
        files[f"{EXAMPLE_PLUGIN_DIR}/index.js"] = get_example_plugin_template()

    files["lib/config.json"] = (
        json.dumps(get_composer_config(options.custom_plugin), indent=2) + "\n"
    )
    files[f"test/{props.slugname}_test.js"] = get_test_template(props)
    return files


def scaffold_project(
    project_root: Path,
    props: ProjectProps,
    options: ScaffoldOptions,
    force: bool = False,
) -> list[Path]:
    """Create the directory structure and template files for a new project.

    Creates:
    - Dotfiles (.jshintrc, .gitignore, .travis.yml, .editorconfig, .jscs.json)
    - README.md, gulpfile.js and package.json with resolved plugin versions
    - lib/index.js and lib/config.json (hapi pack composition)
    - lib/plugins/example/ boilerplate when requested
    - test/<slug>_test.js

    Existing files are left alone unless ``force`` is set.

    Args:
        project_root: Directory to generate into (created if missing)
        props: Project answers and derived names
        options: Selected modules and the rendered dependencies fragment
        force: Overwrite files that already exist

    Returns:
        Paths of the files that were written
    """
    project_root.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for relative_path, content in get_project_files(props, options).items():
        path = _write_file(project_root, relative_path, content, force)
        if path is not None:
            written.append(path)
    return written


def print_next_steps(project_root: Path, props: ProjectProps, installed: bool) -> None:
    """Print next steps after scaffolding."""
    print(f"\n✅ Project scaffolding complete for '{props.name}'!")
    print("\n📋 Next steps:")
    step = 1
    if project_root != Path.cwd():
        print(f"   {step}. cd {project_root}")
        step += 1
    if not installed:
        print(f"   {step}. npm install")
        step += 1
    print(f"   {step}. npm test")
    print(f"   {step + 1}. npm start")
