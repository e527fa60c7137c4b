"""Install the generated project's npm dependencies."""

import subprocess
from pathlib import Path

from hapi_generator.helpers.helpers_logging import (
    print_info,
    print_success,
    print_warning,
)


def install_dependencies(project_root: Path, skip_install: bool = False) -> bool:
    """Run ``npm install`` in the generated project.

    Args:
        project_root: Root directory of the generated project
        skip_install: Only print the manual command

    Returns:
        True if npm install ran and succeeded
    """
    if skip_install:
        print_info("Skipping npm install (run it yourself when ready)")
        return False

    print_info("\n📦 Installing npm dependencies...")
    try:
        result = subprocess.run(
            ["npm", "install"],
            cwd=project_root,
            check=False,
        )
    except FileNotFoundError:
        print_warning("npm not found, skipping dependency installation")
        return False

    if result.returncode != 0:
        print_warning(f"npm install exited with code {result.returncode}")
        return False

    print_success("Installed npm dependencies")
    return True
