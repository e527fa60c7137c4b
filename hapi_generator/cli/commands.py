#!/usr/bin/env python3
"""hapi-composer CLI - Main Entry Point.

Usage:
    hapi-composer <command> [options]

Commands:
    new [TARGET_DIR]     Interview and generate a new hapi composer project
    settings show        Show stored author details and the plugin catalog
    help                 Show this help message
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from hapi_generator.core import config
from hapi_generator.core.settings_store import SettingsError, SettingsStore
from hapi_generator.helpers.helpers_logging import (
    print_error,
    print_header,
    print_info,
)

# Minimum number of CLI args (program name + command)
_MIN_ARGS = 2

_SETTINGS_OPTION = click.option(
    "--settings",
    "settings_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: $HAPI_COMPOSER_SETTINGS or ~/.config/hapi-composer/settings.yaml)",
)


def _open_store(settings_file: Path | None) -> SettingsStore:
    """Load the settings store from the given or configured path."""
    return SettingsStore.open(settings_file or config.SETTINGS_FILE)


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)
    print(f"📍 Settings file: {config.SETTINGS_FILE}")
    print(f"🌐 Registry: {config.REGISTRY_URL}")


@click.group(invoke_without_command=True)
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Generate hapi composer service skeletons."""
    if ctx.invoked_subcommand is not None:
        return 0
    print_help()
    return 0


@_click_cli.command(name="new", help="Interview and generate a new hapi composer project")
@click.argument(
    "target_dir",
    required=False,
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option("--skip-install", is_flag=True, help="Do not run npm install")
@click.option("--force", is_flag=True, help="Overwrite files that already exist")
@_SETTINGS_OPTION
@click.option(
    "--timeout-ms",
    type=click.IntRange(min=1),
    default=None,
    help="Per-package registry lookup timeout in milliseconds (default: 1900)",
)
@click.option("--registry", default=None, help="npm registry base URL")
def new_cmd(
    target_dir: Path,
    skip_install: bool,
    force: bool,
    settings_file: Path | None,
    timeout_ms: int | None,
    registry: str | None,
) -> int:
    """Run the project interview."""
    from hapi_generator.cli.new_project import run_new_project

    store = _open_store(settings_file)
    return run_new_project(
        store,
        target_dir,
        skip_install=skip_install,
        force=force,
        registry_url=(registry or config.REGISTRY_URL).rstrip("/"),
        timeout_ms=timeout_ms or config.LOOKUP_TIMEOUT_MS,
    )


@_click_cli.group(name="settings", invoke_without_command=True)
@click.pass_context
def settings_cmd(ctx: click.Context) -> int:
    """Inspect the stored generator settings."""
    if ctx.invoked_subcommand is None:
        click.echo("❌ Missing subcommand for settings")
        click.echo("   Try: hapi-composer settings show")
        return 1
    return 0


@settings_cmd.command(name="show", help="Show stored author details and the plugin catalog")
@_SETTINGS_OPTION
def settings_show_cmd(settings_file: Path | None) -> int:
    """Print the settings document."""
    store = _open_store(settings_file)

    print_header(f"Settings: {store.settings_file}")
    meta = store.get_meta()
    print_info("\nAuthor details:")
    if not meta:
        click.echo("  (none stored yet)")
    for key, value in meta.items():
        click.echo(f"  {key:16} {value}")

    print_info("\nPlugin catalog:")
    for dep in store.get_dependencies():
        click.echo(f"  {dep.name:16} {dep.description}")
    return 0


@_click_cli.command(name="help", help="Show help message")
def help_cmd() -> int:
    """Print usage."""
    print_help()
    return 0


def main() -> int:
    """Main CLI entry point."""
    if len(sys.argv) < _MIN_ARGS:
        print_help()
        return 0

    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="hapi-composer",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SettingsError as exc:
        print_error(str(exc))
        return 1

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
