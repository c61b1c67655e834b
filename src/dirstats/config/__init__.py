"""Configuration for a dirstats run, built from command-line values."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from dirstats.exceptions import ArgumentError

from .models import VALID_LOG_LEVELS, BaseConfig, InspectionConfig

logger = logging.getLogger(__name__)


def build_config(**values: object) -> InspectionConfig:
    """Validate raw command-line values into an ``InspectionConfig``.

    Args:
        **values: Field values for ``InspectionConfig``

    Returns:
        Validated, immutable configuration

    Raises:
        ArgumentError: If any value fails validation
    """
    try:
        return InspectionConfig.model_validate(values)
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(part) for part in error['loc']) or 'config'}: {error['msg']}"
            for error in exc.errors()
        ]
        logger.debug("Rejected arguments: %s", "; ".join(problems))
        raise ArgumentError(
            "Invalid arguments: " + "; ".join(problems),
            {"errors": problems},
        ) from exc


__all__ = [
    "VALID_LOG_LEVELS",
    "BaseConfig",
    "InspectionConfig",
    "build_config",
]
