from .load import DEFAULT_CFG_FILE, config_from_dict, find_config, load_config
from .typed import ConfigCoerceError, build_typed, coerce

__all__ = [
    "build_typed",
    "coerce",
    "ConfigCoerceError",
    "load_config",
    "config_from_dict",
    "find_config",
    "DEFAULT_CFG_FILE",
]
