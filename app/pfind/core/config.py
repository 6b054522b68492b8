"""Search configuration.

Settings live in an optional TOML file (~/.config/pfind/config.toml)
validated by a Pydantic model. Command-line options take precedence
over file values.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pfind.core.paths import get_config_path

logger = logging.getLogger(__name__)


class FinderConfig(BaseModel):
    """Tunable settings for a search run.

    Attributes:
        max_workers: Upper bound on concurrently running directory scans.
            None lets the thread pool pick its default.
        strict_type: Reject unknown ``-type`` codes. When False an unknown
            code silently means "any type".
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_workers: Annotated[
        int | None,
        Field(ge=1, le=512, description="Concurrent directory scans (1-512)"),
    ] = None
    strict_type: Annotated[
        bool,
        Field(description="Treat unknown -type codes as an error"),
    ] = True


class ConfigError(Exception):
    """Raised when the configuration file cannot be loaded."""


def load_config(path: Path | None = None) -> FinderConfig:
    """Load search configuration from a TOML file.

    A missing default file is not an error: defaults are returned. An
    explicitly requested file must exist.

    Args:
        path: Explicit config file. If None, uses the default location.

    Returns:
        Validated FinderConfig.

    Raises:
        ConfigError: If an explicit file is missing, the TOML syntax is
            invalid, or the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise ConfigError(f"Config file not found: {config_path}")
        logger.debug("No config file at %s, using defaults", config_path)
        return FinderConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        config = FinderConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config
