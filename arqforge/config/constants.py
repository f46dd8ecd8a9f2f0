"""
Configuration-related constants and resource limits.
"""

# Maximum config file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

# Per-project config file, looked up in the project root
PROJECT_CONFIG_FILENAME = ".arqforge.yaml"

# Prefix for environment variable overrides
ENV_PREFIX = "ARQFORGE_"

# Separator between nested keys in environment variable names
ENV_NESTING_SEPARATOR = "__"

DEFAULT_CONFIG: dict = {
    "logging": {
        "level": "info",
        "location": 0,
        "colors": True,
    },
    "maven": {
        "surefire_version": "2.14.1",
    },
    "containers": {
        "catalog": None,
    },
    "cube": {
        "version": "1.18.2",
    },
}
