"""
Configuration Loader

Loads YAML configuration files, such as the site provider list.
"""

import os
from pathlib import Path
from typing import Any, Dict, List

import yaml

CONFIG_DIR_ENV = "CLEANURI_CONFIG_DIR"


def _get_config_dir() -> Path:
    """Get the config directory path."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        config_dir = Path(override)
        if not config_dir.is_dir():
            raise FileNotFoundError(f"{CONFIG_DIR_ENV} is not a directory: {config_dir}")
        return config_dir

    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'sites.yaml')

    Returns:
        Parsed YAML content as dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_site_providers(filename: str = 'sites.yaml') -> Dict[str, List[str]]:
    """
    Load the provider configuration.

    Returns:
        Dictionary mapping capability name to provider paths

    Example:
        {
            'cleanuri.site.Site': ['example_plugins.shop:ExampleShop'],
        }

    Raises:
        ValueError: If a capability does not map to a list of paths
    """
    config = load_config(filename)
    providers = config.get('providers') or {}

    result = {}
    for capability, paths in providers.items():
        if paths is None:
            paths = []
        if not isinstance(paths, list):
            raise ValueError(
                f"Providers for {capability!r} must be a list (got {type(paths).__name__})"
            )
        result[capability] = [str(path) for path in paths]

    return result
