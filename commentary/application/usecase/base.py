"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from commentary.application.context import RequestContext


class BaseUseCase(ABC):
    """One exposed operation.

    Use cases translate a validated request into domain service calls on
    behalf of ``context.caller_id`` and shape the result into a response
    model. Domain errors propagate unchanged.
    """

    @abstractmethod
    async def execute(self, context: RequestContext, request: Any) -> Any:
        pass
