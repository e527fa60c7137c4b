"""Name derivation helpers for generated projects."""

import re
import unicodedata

_NON_SLUG_RE = re.compile(r"[^a-z0-9\s_-]")
_SEPARATOR_RE = re.compile(r"[\s_-]+")
_DASH_WORD_RE = re.compile(r"-+([a-zA-Z0-9])")


def slugify(value: str) -> str:
    """Convert a project name into a lowercase, dash-separated slug.

    Example:
        >>> slugify("My Hapi Project!")
        'my-hapi-project'
    """
    normalized = unicodedata.normalize("NFKD", value)
    ascii_only = normalized.encode("ascii", "ignore").decode("ascii")
    lowered = _NON_SLUG_RE.sub("", ascii_only.lower())
    return _SEPARATOR_RE.sub("-", lowered).strip("-")


def camelize_slug(slug: str) -> str:
    """Turn a slug into a safe JavaScript identifier (``my-app`` -> ``myApp``)."""
    return _DASH_WORD_RE.sub(lambda match: match.group(1).upper(), slug)


def github_repo_url(github_username: str, slugname: str) -> str:
    """Return the GitHub repository URL for a user and project slug."""
    return f"https://github.com/{github_username}/{slugname}"
