"""
bintree.config - Configuration loading and defaults
"""

from bintree.config.defaults import DEFAULT_CONFIG
from bintree.config.loader import TreeConfig, find_config_file, load_config, merge_configs

__all__ = [
    "TreeConfig",
    "load_config",
    "find_config_file",
    "merge_configs",
    "DEFAULT_CONFIG",
]
