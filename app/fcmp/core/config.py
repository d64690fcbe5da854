"""Configuration file for fcmp defaults.

The configuration supplies default values for the command line options.
It is stored as TOML in ~/.config/fcmp/config.toml; a missing file simply
means every default applies.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from fcmp.core.paths import get_config_path
from fcmp.core.policy import MissingFilePolicy
from fcmp.diff.base import DiffStrategy
from fcmp.diff.internal import DEFAULT_CHUNK_SIZE
from fcmp.diff.modes import DiffMode, build_strategy

logger = logging.getLogger(__name__)

_MAX_CHUNK_SIZE = 16 * 1024 * 1024


class FcmpConfig(BaseModel):
    """Default settings for a comparison.

    Attributes:
        missing: How to treat paths that do not exist.
        diff: Which difference strategy to use.
        diff_command: Comparator argv for diff mode "command".
        chunk_size: Buffer size for the internal byte comparison.
        reverse: Select the least recently modified path by default.
        index: Print the index instead of the path by default.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    missing: Annotated[
        MissingFilePolicy,
        Field(description="Missing file policy"),
    ] = MissingFilePolicy.OLDEST
    diff: Annotated[
        DiffMode,
        Field(description="Difference strategy"),
    ] = DiffMode.NONE
    diff_command: Annotated[
        list[str] | None,
        Field(description="Comparator command and arguments"),
    ] = None
    chunk_size: Annotated[
        int,
        Field(ge=1, le=_MAX_CHUNK_SIZE, description="Internal compare buffer size"),
    ] = DEFAULT_CHUNK_SIZE
    reverse: bool = False
    index: bool = False

    @field_validator("missing", mode="before")
    @classmethod
    def parse_missing(cls, v: object) -> object:
        """Accept policy names in any case."""
        if isinstance(v, str):
            return MissingFilePolicy.parse(v)
        return v

    @field_validator("diff_command")
    @classmethod
    def check_command_name(cls, v: list[str] | None) -> list[str] | None:
        """Reject a comparator argv whose executable is blank."""
        if v and not v[0].strip():
            msg = "diff_command must start with a non-empty executable"
            raise ValueError(msg)
        return v

    @field_validator("diff", mode="before")
    @classmethod
    def normalize_diff(cls, v: object) -> object:
        """Accept diff mode names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def check_diff_command(self) -> "FcmpConfig":
        """Require a comparator command for diff mode "command"."""
        if self.diff == DiffMode.COMMAND and not self.diff_command:
            msg = "diff = 'command' requires a non-empty diff_command"
            raise ValueError(msg)
        return self

    def strategy(self) -> DiffStrategy:
        """Build the difference strategy these settings select."""
        return build_strategy(self.diff, self.diff_command, self.chunk_size)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content is invalid."""


def load_config(path: Path | None = None) -> FcmpConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FcmpConfig. Defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    config_path = path or get_config_path()

    try:
        with open(config_path, "rb") as f:
            data: dict[str, Any] = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No config file at %s, using defaults", config_path)
        return FcmpConfig()
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        config = FcmpConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config
