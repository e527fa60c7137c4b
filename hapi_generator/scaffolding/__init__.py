"""Project scaffolding package for hapi composer services.

Public API:
    scaffold_project: Write the project layout into a directory
    install_dependencies: Run npm install in the generated project

Example:
    from hapi_generator.scaffolding import ProjectProps, ScaffoldOptions, scaffold_project

    props = ProjectProps(name="My API", slugname="my-api", safe_slugname="myApi")
    scaffold_project(Path("my-api"), props, ScaffoldOptions())
"""

from .create import get_project_files, print_next_steps, scaffold_project
from .install import install_dependencies
from .types import ProjectProps, ScaffoldOptions

__all__ = [
    "ProjectProps",
    "ScaffoldOptions",
    "get_project_files",
    "install_dependencies",
    "print_next_steps",
    "scaffold_project",
]
