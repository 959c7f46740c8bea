"""
Configuration utility functions
"""

from pathlib import Path
from typing import Any

import yaml


def load_yaml(filepath: str | Path) -> dict[str, Any]:
    """
    Load YAML file and return as dictionary

    Args:
        filepath: Path to YAML file (relative or absolute)

    Returns:
        Dictionary with YAML data ({} for an empty file)

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If YAML is invalid

    Example:
        >>> config = load_yaml("config/providers/cache.yaml")
        >>> config["ttl_seconds"]["quote"]
        30
    """
    path = Path(filepath)

    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {filepath}")

    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_yaml_safe(filepath: str | Path) -> dict[str, Any]:
    """
    Load YAML file with fallback to empty dict if missing or invalid
    """
    try:
        return load_yaml(filepath)
    except (FileNotFoundError, yaml.YAMLError):
        return {}


def get_nested(config: dict[str, Any], *path: str, default: Any = None) -> Any:
    """
    Walk nested mappings, returning default on any missing level

    Example:
        >>> get_nested({"redis": {"port": 6380}}, "redis", "port", default=6379)
        6380
        >>> get_nested({}, "redis", "port", default=6379)
        6379
    """
    node: Any = config
    for key in path:
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node
