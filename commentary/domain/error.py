"""Domain layer errors.

Every failure the comment engine reports is one of these kinds. Conflict
subclasses let callers catch the broad "invalid for current state" outcome
while still telling a tombstoned comment apart from a duplicate reaction.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class UnauthenticatedError(DomainError):
    """Raised when the caller's identity cannot be established."""

    pass


class ConflictError(DomainError):
    """Operation is invalid given the entity's current state."""

    pass


class AlreadyDeletedError(ConflictError):
    """Raised when the target comment has been tombstoned."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already deleted: {identifier}")


class ParentDeletedError(AlreadyDeletedError):
    """Raised when a reply operation targets a tombstoned parent."""

    def __init__(self, identifier: str):
        super().__init__("parent comment", identifier)


class DuplicateReactionError(ConflictError):
    """Raised when a caller repeats a like or dislike."""

    def __init__(self, reaction: str, comment_id: str, user_id: str):
        self.reaction = reaction
        super().__init__(
            f"User {user_id} has already {reaction} comment {comment_id}"
        )


class NoReactionError(ConflictError):
    """Raised when a caller removes a reaction they never made."""

    def __init__(self, reaction: str, comment_id: str, user_id: str):
        self.reaction = reaction
        super().__init__(
            f"User {user_id} has not {reaction} comment {comment_id}"
        )


class StaleCommentError(ConflictError):
    """Raised when a save loses an optimistic version check."""

    def __init__(self, comment_id: str, expected_version: int):
        self.comment_id = comment_id
        self.expected_version = expected_version
        super().__init__(
            f"Comment {comment_id} was modified concurrently "
            f"(expected version {expected_version})"
        )


class UnavailableError(DomainError):
    """Raised when the underlying store fails."""

    pass
