"""Data passed from the interview to the scaffolder."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectProps:
    """Answers and derived names describing the generated project."""

    name: str
    slugname: str
    safe_slugname: str
    description: str = ""
    homepage: str = ""
    license: str = "MIT"
    github_username: str = "user"
    repo_url: str = "user/repo"
    author_name: str = ""
    author_email: str = ""
    author_url: str = ""
    current_year: int = 1970


@dataclass(frozen=True)
class ScaffoldOptions:
    """Optional pieces of the project layout."""

    jscs_module: bool = True
    release_module: bool = True
    coveralls_module: bool = True
    custom_plugin: bool = False
    dependencies_fragment: str = ""
