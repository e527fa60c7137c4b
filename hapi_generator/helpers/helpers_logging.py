"""Console output helpers for the hapi-composer CLI."""

import click


class Colors:
    """ANSI color codes for terminal output."""
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    DIM = '\033[2m'
    BOLD = '\033[1m'
    RESET = '\033[0m'


def print_header(msg: str) -> None:
    """Print a header message."""
    click.echo(f"{Colors.HEADER}{Colors.BOLD}{msg}{Colors.RESET}")


def print_info(msg: str) -> None:
    """Print an info message."""
    click.echo(f"{Colors.CYAN}{msg}{Colors.RESET}")


def print_success(msg: str) -> None:
    """Print a success message."""
    click.echo(f"{Colors.GREEN}✓ {msg}{Colors.RESET}")


def print_warning(msg: str) -> None:
    """Print a warning message."""
    click.echo(f"{Colors.YELLOW}⚠️  {msg}{Colors.RESET}")


def print_error(msg: str) -> None:
    """Print an error message to stderr."""
    click.echo(f"{Colors.RED}❌ {msg}{Colors.RESET}", err=True)


def print_created(relative_path: str) -> None:
    """Report a file written by the scaffolder."""
    click.echo(f"✓ Created file: {relative_path}")


def print_skipped(relative_path: str) -> None:
    """Report a file left untouched because it already exists."""
    click.echo(f"{Colors.DIM}⊘ Skipped (exists): {relative_path}{Colors.RESET}")
