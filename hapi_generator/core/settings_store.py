"""Persistent generator settings: author metadata and the plugin catalog.

The settings file is a YAML document with two top-level fields::

    meta:
      github_username: octocat
      author_name: Mona Lisa
    dependencies:
      - name: joi
        description: Object schema validation

The store is constructed explicitly and handed to whatever needs it; it
loads once and writes the complete document on every ``set_meta`` call.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import cast

from hapi_generator.helpers.yaml_loader import (
    ConfigDict,
    ConfigValue,
    YAMLError,
    load_yaml_file,
    save_yaml_file,
)

META_KEYS: tuple[str, ...] = (
    "github_username",
    "author_name",
    "author_email",
    "author_url",
)


@dataclass(frozen=True)
class Dependency:
    """A plugin the generator can offer to a new project."""

    name: str
    description: str = ""


DEFAULT_DEPENDENCIES: tuple[Dependency, ...] = (
    Dependency("joi", "Object schema validation"),
    Dependency("lout", "API documentation generator"),
    Dependency("hoek", "General purpose node utilities"),
)


class SettingsError(Exception):
    """Base class for fatal settings store failures."""


class CorruptSettingsError(SettingsError):
    """The settings file exists but is not a valid settings document."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Settings file {path} is corrupt: {reason}")
        self.path = path
        self.reason = reason


class SettingsReadError(SettingsError):
    """The settings file exists but could not be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Could not read settings file {path}: {cause}")
        self.path = path
        self.cause = cause


class SettingsWriteError(SettingsError):
    """The settings file could not be written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Could not write settings file {path}: {cause}")
        self.path = path
        self.cause = cause


def merge_meta(
    prior: Mapping[str, str],
    candidate: Mapping[str, object],
) -> dict[str, str]:
    """Merge candidate answers into a prior meta record.

    Only recognized keys are considered. A candidate value replaces the prior
    one when it is a string that is non-empty after trimming; it is stored
    trimmed. Everything else leaves the prior value in place.

    Args:
        prior: Current meta record (not modified)
        candidate: Incoming values, e.g. interview answers

    Returns:
        New meta record
    """
    merged = {key: prior[key] for key in META_KEYS if key in prior}
    for key in META_KEYS:
        value = candidate.get(key)
        if not isinstance(value, str):
            continue
        trimmed = value.strip()
        if trimmed:
            merged[key] = trimmed
    return merged


def _parse_meta(raw: ConfigValue, path: Path) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise CorruptSettingsError(path, "'meta' must be a mapping")

    meta: dict[str, str] = {}
    for key in META_KEYS:
        value = raw.get(key)
        if value is None:
            continue
        # Numbers are accepted for values like numeric usernames.
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise CorruptSettingsError(path, f"'meta.{key}' must be a string")
        meta[key] = str(value)
    return meta


def _parse_dependencies(raw: ConfigValue, path: Path) -> tuple[Dependency, ...]:
    if raw is None:
        return DEFAULT_DEPENDENCIES
    if not isinstance(raw, list):
        raise CorruptSettingsError(path, "'dependencies' must be a list")

    dependencies: list[Dependency] = []
    seen: set[str] = set()
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise CorruptSettingsError(path, f"dependency #{index} must be a mapping")
        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            raise CorruptSettingsError(path, f"dependency #{index} has no name")
        if name in seen:
            raise CorruptSettingsError(path, f"dependency '{name}' is listed twice")
        seen.add(name)
        description = entry.get("description")
        dependencies.append(
            Dependency(name, "" if description is None else str(description))
        )
    return tuple(dependencies)


class SettingsStore:
    """Load, expose and persist the generator settings file."""

    def __init__(self, settings_file: Path) -> None:
        self.settings_file = settings_file
        self._meta: dict[str, str] = {}
        self._dependencies: tuple[Dependency, ...] = DEFAULT_DEPENDENCIES

    @classmethod
    def open(cls, settings_file: Path) -> SettingsStore:
        """Create a store for ``settings_file`` and load it."""
        store = cls(settings_file)
        store.load()
        return store

    def load(self) -> None:
        """Read the settings file, or fall back to defaults if it is absent.

        Raises:
            CorruptSettingsError: If the file exists but cannot be parsed
            SettingsReadError: If the file exists but cannot be read
        """
        if not self.settings_file.exists():
            self._meta = {}
            self._dependencies = DEFAULT_DEPENDENCIES
            return

        try:
            content = load_yaml_file(self.settings_file)
        except YAMLError as exc:
            raise CorruptSettingsError(self.settings_file, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise CorruptSettingsError(self.settings_file, "not valid UTF-8 text") from exc
        except OSError as exc:
            raise SettingsReadError(self.settings_file, exc) from exc

        if not isinstance(content, dict):
            raise CorruptSettingsError(
                self.settings_file, "expected a mapping with 'meta' and 'dependencies'"
            )

        self._meta = _parse_meta(content.get("meta"), self.settings_file)
        self._dependencies = _parse_dependencies(
            content.get("dependencies"), self.settings_file
        )

    def get_meta(self) -> Mapping[str, str]:
        """Return a read-only view of the stored meta record."""
        return MappingProxyType(self._meta)

    def get_dependencies(self) -> tuple[Dependency, ...]:
        """Return the plugin catalog in its stored order."""
        return self._dependencies

    def set_meta(self, candidate_values: Mapping[str, object]) -> None:
        """Merge ``candidate_values`` into the meta record and persist.

        Raises:
            SettingsWriteError: If the settings file cannot be written
        """
        self._meta = merge_meta(self._meta, candidate_values)
        self._write()

    def snapshot(self) -> ConfigDict:
        """Return the complete settings document as plain data."""
        dependencies: list[ConfigValue] = [
            {"name": dep.name, "description": dep.description}
            for dep in self._dependencies
        ]
        return {
            "meta": cast(ConfigValue, dict(self._meta)),
            "dependencies": dependencies,
        }

    def _write(self) -> None:
        try:
            save_yaml_file(self.snapshot(), self.settings_file)
        except OSError as exc:
            raise SettingsWriteError(self.settings_file, exc) from exc
