"""Environment override data source.

Exposes every process environment variable to templates under its
lowercased name. Keys are not prefixed, so they may clash with values
from other data sources; precedence is decided by the host.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from tiller_env.services.data_source import BaseDataSource

logger = logging.getLogger(__name__)


class EnvironmentOverrideSource(BaseDataSource):
    """Data source backed by the process environment."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialize the source.

        Args:
            environ: Environment to read instead of ``os.environ``.
        """
        self._environ = environ

    def global_values(self) -> dict[str, str]:
        """Return all environment variables keyed by lowercased name.

        Names that differ only by case collapse to one key; the one
        enumerated last wins.

        Returns:
            A new dictionary mapping lowercased name to value.
        """
        values: dict[str, str] = {}
        environ = os.environ if self._environ is None else self._environ
        for name, value in environ.items():
            values[name.lower()] = value
        logger.debug("Read %d environment override value(s)", len(values))
        return values
