"""Invocation settings validated with Pydantic.

Settings come from the command line only; there is no configuration file
and no environment lookup.
"""

from __future__ import annotations

from typing import Annotated, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dirstats.core.metadata import DEFAULT_LINK_BUFFER_SIZE
from dirstats.types.models import ListingMode
from dirstats.utils.logging import DEFAULT_LOG_LEVEL

VALID_LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})


class BaseConfig(BaseModel):
    """Base configuration model with common settings."""

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        extra="forbid",
        validate_default=True,
        frozen=True,
    )


class InspectionConfig(BaseConfig):
    """Settings for one directory inspection run."""

    directory: Annotated[
        str,
        Field(min_length=1, description="Directory whose entries are listed"),
    ]
    mode: Annotated[
        ListingMode,
        Field(description="Listing mode: 1 full, 2 text files, 3 symlink-aware"),
    ] = ListingMode.FULL
    log_level: Annotated[
        str,
        Field(description="Logging level for diagnostics on standard error"),
    ] = DEFAULT_LOG_LEVEL
    link_buffer_size: Annotated[
        int,
        Field(
            ge=1,
            le=65536,
            description="Initial buffer size in bytes for reading symlink targets",
        ),
    ] = DEFAULT_LINK_BUFFER_SIZE
    max_path_length: Annotated[
        int | None,
        Field(
            ge=1,
            description="Upper bound on joined entry paths (None for unbounded)",
        ),
    ] = None

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, value: object) -> object:
        """Accept the mode as the decimal string given on the command line."""
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.isdecimal():
                return int(stripped)
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the log level to upper case and reject unknown names."""
        normalized = value.strip().upper()
        if normalized not in VALID_LOG_LEVELS:
            msg = f"Invalid log level {value!r}. Valid options: {', '.join(sorted(VALID_LOG_LEVELS))}"
            raise ValueError(msg)
        return normalized
