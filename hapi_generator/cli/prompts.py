"""Interactive prompts for the project interview."""

from __future__ import annotations

from collections.abc import Sequence

import click

from hapi_generator.helpers.helpers_logging import Colors, print_info


def prompt_text(message: str, default: str | None = None) -> str:
    """Ask for a free-text answer; an empty reply yields the default (or '')."""
    return click.prompt(
        message,
        default=default if default is not None else "",
        show_default=bool(default),
        type=str,
    )


def prompt_confirm(message: str, default: bool) -> bool:
    """Ask a yes/no question."""
    return click.confirm(message, default=default)


def prompt_multiselect(
    prompt: str,
    options: Sequence[tuple[str, str]],
) -> list[str]:
    """Let the user toggle any number of options by number.

    Args:
        prompt: Question shown above the list
        options: (value, label) pairs in display order

    Returns:
        Selected values in option order (not selection order)
    """
    if not options:
        return []

    selected: set[str] = set()
    while True:
        print_info(f"\n{prompt}")
        for index, (value, label) in enumerate(options, 1):
            mark = f"{Colors.GREEN}[x]{Colors.RESET}" if value in selected else "[ ]"
            click.echo(f"  {index}. {mark} {label}")
        click.echo("  0. Done")

        choice = click.prompt(
            f"Toggle (1-{len(options)}, 0=done)",
            type=click.IntRange(0, len(options)),
            default=0,
            show_default=False,
        )
        if choice == 0:
            break
        value = options[choice - 1][0]
        if value in selected:
            selected.remove(value)
        else:
            selected.add(value)

    return [value for value, _label in options if value in selected]
