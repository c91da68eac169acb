"""Data source definitions.

A data source supplies key-value data to the templating host. The host
aggregates sources behind the same three hooks and owns merge order.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol


class DataSource(Protocol):
    """Protocol for template data sources.

    Each source may provide:
    - Global values shared by every template
    - Values scoped to a single template
    - Target metadata for a single template (e.g. output path)
    """

    @abstractmethod
    def global_values(self) -> Mapping[str, Any]:
        """Return values available to every template.

        Returns:
            Mapping of value name to value.
        """
        ...

    @abstractmethod
    def values(self, template_name: str) -> Mapping[str, Any]:
        """Return values for a single template.

        Args:
            template_name: Name of the template being rendered.

        Returns:
            Mapping of value name to value.
        """
        ...

    @abstractmethod
    def target_values(self, template_name: str) -> Mapping[str, Any]:
        """Return target metadata for a single template.

        Args:
            template_name: Name of the template being rendered.

        Returns:
            Mapping of target attribute to value.
        """
        ...


class BaseDataSource:
    """Data source that provides nothing.

    Variants subclass this and override only the hooks they supply.
    """

    def global_values(self) -> dict[str, Any]:
        """Return an empty mapping."""
        return {}

    def values(self, template_name: str) -> dict[str, Any]:  # noqa: ARG002
        """Return an empty mapping."""
        return {}

    def target_values(self, template_name: str) -> dict[str, Any]:  # noqa: ARG002
        """Return an empty mapping."""
        return {}
