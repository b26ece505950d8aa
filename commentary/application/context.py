"""Request-scoped context passed into every use case."""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from commentary.domain.value import UserId


class RequestContext(BaseModel):
    """Who is calling, and which request this is.

    Built once per inbound request by ``AuthenticateUseCase`` and passed
    explicitly down; nothing about the current request is kept in module or
    process state.
    """

    model_config = ConfigDict(frozen=True)

    caller_id: UserId
    correlation_id: str = Field(default_factory=lambda: uuid4().hex)
