"""Core generator components: settings persistence and version resolution."""

from hapi_generator.core.dependency_resolver import (
    DependencyLookupError,
    render_manifest_fragment,
    resolve_versions,
    resolve_versions_async,
)
from hapi_generator.core.settings_store import (
    DEFAULT_DEPENDENCIES,
    META_KEYS,
    CorruptSettingsError,
    Dependency,
    SettingsError,
    SettingsReadError,
    SettingsStore,
    SettingsWriteError,
    merge_meta,
)

__all__ = [
    "DEFAULT_DEPENDENCIES",
    "META_KEYS",
    "CorruptSettingsError",
    "Dependency",
    "DependencyLookupError",
    "SettingsError",
    "SettingsReadError",
    "SettingsStore",
    "SettingsWriteError",
    "merge_meta",
    "render_manifest_fragment",
    "resolve_versions",
    "resolve_versions_async",
]
