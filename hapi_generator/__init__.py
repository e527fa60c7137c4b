"""
hapi composer generator

Scaffolds hapi "composer" service skeletons from a short interview and
remembers author details between runs.
"""

__version__ = "0.1.0"

from hapi_generator.cli.commands import main
from hapi_generator.core.settings_store import SettingsStore

__all__ = [
    "SettingsStore",
    "main",
]
