"""Design-by-contract checks for package operations."""

from __future__ import annotations

from typing import Optional

from ..config import PackageConfig
from ..exceptions import PostconditionViolation, PreconditionViolation


def _enabled(config: Optional[PackageConfig]) -> bool:
    if config is None:
        config = PackageConfig.from_env()
    return config.contracts_enabled


def require(condition: bool, message: str, config: Optional[PackageConfig] = None) -> None:
    """
    Check a precondition.

    Args:
        condition: Condition that must hold
        message: Description of the condition
        config: Configuration deciding whether checks are active

    Raises:
        PreconditionViolation: If the condition is false and checks are enabled
    """
    if not condition and _enabled(config):
        raise PreconditionViolation(message)


def ensure(condition: bool, message: str, config: Optional[PackageConfig] = None) -> None:
    """
    Check a postcondition.

    Args:
        condition: Condition that must hold
        message: Description of the condition
        config: Configuration deciding whether checks are active

    Raises:
        PostconditionViolation: If the condition is false and checks are enabled
    """
    if not condition and _enabled(config):
        raise PostconditionViolation(message)
