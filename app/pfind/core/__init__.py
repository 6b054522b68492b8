"""Core infrastructure for pfind.

Error taxonomy, XDG paths and configuration loading shared by the
command line and the search engine.
"""

from pfind.core.config import ConfigError, FinderConfig, load_config
from pfind.core.errors import ErrorKind, FindError

__all__ = [
    "ConfigError",
    "ErrorKind",
    "FindError",
    "FinderConfig",
    "load_config",
]
