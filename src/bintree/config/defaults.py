"""Default configuration values for bintree."""

DEFAULT_CONFIG = {
    # "recursive" or "iterative"
    "traversal": "recursive",
    # Reject keys outside the unsigned 32-bit range
    "strict_keys": True,
}

CONFIG_FILENAME = "bintree.toml"
PYPROJECT_FILENAME = "pyproject.toml"
ENV_PREFIX = "BINTREE_"
