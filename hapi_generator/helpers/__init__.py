"""Helper utilities for project generation."""

from hapi_generator.helpers.helpers_naming import (
    camelize_slug,
    github_repo_url,
    slugify,
)

__all__ = [
    "camelize_slug",
    "github_repo_url",
    "slugify",
]
