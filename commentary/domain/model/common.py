"""Base model for all domain entities."""

from datetime import datetime
from typing import Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable: a state change produces a new instance through
    ``revised``, and the repository decides whether it is persisted.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def revised(self, **changes) -> Self:
        """Copy with ``changes`` applied, stamping ``updated_at`` if present.

        Field values are not re-validated; callers pass already-typed values.
        """
        if "updated_at" in type(self).model_fields:
            changes.setdefault("updated_at", datetime.now())
        return self.model_copy(update=changes)
