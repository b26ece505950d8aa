"""Base service class for domain services."""

from typing import Any, ClassVar

import logfire


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span a load, a check and a save.
    Each public operation runs inside ``self.span(<operation>, ...)``, named
    ``<span_prefix>.<operation>``.
    """

    span_prefix: ClassVar[str] = "service"

    def span(self, operation: str, **attributes: Any):
        """Open a logfire span for one operation of this service."""
        return logfire.span(f"{self.span_prefix}.{operation}", **attributes)
