from .loader import ConfigError, ValidationConfig, load_config, resolve_config_path

__all__ = [
    "ConfigError",
    "ValidationConfig",
    "load_config",
    "resolve_config_path",
]
