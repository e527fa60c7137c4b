#!/usr/bin/env python3
"""
YAML loading and atomic saving for generator settings.
Wraps a shared ruamel.yaml instance and returns plain Python containers.
"""

import os
import tempfile
from pathlib import Path
from typing import Union, cast

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]

__all__ = [
    "ConfigDict",
    "ConfigValue",
    "YAMLError",
    "load_yaml_file",
    "save_yaml_file",
    "yaml",
]


def _create_yaml_loader() -> YAML:
    """Create the shared YAML instance.

    Returns:
        Round-trip YAML loader configured for block style output
    """
    yaml_obj = YAML()
    yaml_obj.preserve_quotes = True
    yaml_obj.default_flow_style = False
    yaml_obj.indent(mapping=2, sequence=4, offset=2)
    return yaml_obj


# Shared loader instance
yaml: YAML = _create_yaml_loader()


def _to_plain(value: object) -> ConfigValue:
    """Convert ruamel's commented containers into plain dicts and lists."""
    if isinstance(value, dict):
        return {str(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    return cast(ConfigValue, value)


def load_yaml_file(file_path: Path) -> ConfigValue:
    """Load a YAML document into plain Python data.

    ruamel.yaml's load() is safe by default (unlike PyYAML's load()).
    JSON documents are valid YAML and load the same way.

    Args:
        file_path: Path to YAML file to load

    Returns:
        Parsed document (None for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
        YAMLError: If the content is not valid YAML
    """
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with file_path.open(encoding='utf-8') as f:
        return _to_plain(yaml.load(f))


def save_yaml_file(data: ConfigDict, file_path: Path) -> None:
    """Write data to a YAML file atomically.

    The document is written to a temporary file in the same directory and
    renamed over the target, so readers see either the old or the new file.

    Args:
        data: Configuration dictionary to save
        file_path: Path to YAML file to write

    Raises:
        OSError: If the directory or file cannot be written
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{file_path.name}.",
        suffix=".tmp",
        dir=file_path.parent,
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            yaml.dump(data, f)
        tmp_path.replace(file_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
