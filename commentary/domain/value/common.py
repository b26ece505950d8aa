"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable, compared by value, and reject keys they do
    not declare, so a caller can never slip an extra field through one.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
