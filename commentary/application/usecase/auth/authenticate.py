"""Authenticate caller use case."""

from pydantic import BaseModel

from commentary.application.context import RequestContext
from commentary.domain.service import IdentityService


class AuthenticateRequest(BaseModel):
    """Authenticate request."""

    credentials: str | None = None  # Bearer token from the transport layer
    correlation_id: str | None = None  # Propagated from upstream if present


class AuthenticateUseCase:
    """Use case turning inbound credentials into a request context."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize authenticate use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: AuthenticateRequest) -> RequestContext:
        """Identify the caller.

        Args:
            request: Credentials and optional correlation ID

        Returns:
            Context to hand to the comment use cases

        Raises:
            UnauthenticatedError: If the caller cannot be identified
        """
        caller_id = await self.identity_service.identify(request.credentials)
        if request.correlation_id:
            return RequestContext(
                caller_id=caller_id, correlation_id=request.correlation_id
            )
        return RequestContext(caller_id=caller_id)
