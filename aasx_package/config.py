"""
Configuration for AASX packages.

Resolves the contract-checking toggle and the logging level. A
``PackageConfig`` is passed to ``Packaging`` and flows into every package
it opens.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_DEBUG_CONTRACTS = "AASX_DEBUG_CONTRACTS"
ENV_LOG_LEVEL = "AASX_LOG_LEVEL"
ENV_RUNTIME = ("AASX_ENV", "PYTHON_ENV")

_TRUE_VALUES = ("1", "true")
_FALSE_VALUES = ("0", "false")


@dataclass
class PackageConfig:
    """
    Settings shared by all packages opened through one ``Packaging``.

    Attributes:
        debug_contracts: Explicit override for contract checking
            (``None`` means: decide from the environment)
        log_level: Logging level name used by the CLI
        environment: Name of the runtime environment, e.g. ``production``
        env_debug_contracts: Contract toggle read from the environment
    """

    debug_contracts: Optional[bool] = None
    log_level: str = "WARNING"
    environment: Optional[str] = None
    env_debug_contracts: Optional[bool] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PackageConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            PackageConfig instance
        """
        if environ is None:
            environ = os.environ

        explicit = environ.get(ENV_DEBUG_CONTRACTS, "").strip().lower()
        env_debug: Optional[bool] = None
        if explicit in _TRUE_VALUES:
            env_debug = True
        elif explicit in _FALSE_VALUES:
            env_debug = False

        runtime = None
        for name in ENV_RUNTIME:
            if environ.get(name):
                runtime = environ[name].strip().lower()
                break

        return cls(
            log_level=environ.get(ENV_LOG_LEVEL, "WARNING").upper(),
            environment=runtime,
            env_debug_contracts=env_debug,
        )

    @property
    def contracts_enabled(self) -> bool:
        """Whether ``require`` / ``ensure`` raise on failed conditions."""
        if self.debug_contracts is not None:
            return self.debug_contracts
        if self.env_debug_contracts is not None:
            return self.env_debug_contracts
        return self.environment != "production"
