"""Tests for project name derivation helpers."""

import pytest

from hapi_generator.helpers import camelize_slug, github_repo_url, slugify


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("My Hapi Project", "my-hapi-project"),
        ("my_hapi__project", "my-hapi-project"),
        ("  Spaced   Out  ", "spaced-out"),
        ("Crème Brûlée API!", "creme-brulee-api"),
        ("already-a-slug", "already-a-slug"),
        ("--leading and trailing--", "leading-and-trailing"),
        ("!!!", ""),
    ],
)
def test_slugify(name: str, expected: str) -> None:
    assert slugify(name) == expected


@pytest.mark.parametrize(
    ("slug", "expected"),
    [
        ("my-hapi-project", "myHapiProject"),
        ("service", "service"),
        ("api-v2", "apiV2"),
    ],
)
def test_camelize_slug(slug: str, expected: str) -> None:
    assert camelize_slug(slug) == expected


def test_github_repo_url() -> None:
    assert github_repo_url("octocat", "my-service") == "https://github.com/octocat/my-service"
