"""Domain layer DI providers."""

from dishka import Scope, provide

from commentary.domain.repository import CommentRepository
from commentary.domain.service import (
    CommentService,
    IdentityProvider,
    IdentityService,
    ReactionService,
    ReplyService,
)
from commentary.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository/session
    lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_identity_service(
        self, identity_provider: IdentityProvider
    ) -> IdentityService:
        """Provide caller identity domain service."""
        return IdentityService(identity_provider=identity_provider)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_reply_service(
        self,
        comment_repository: CommentRepository,
        comment_service: CommentService,
    ) -> ReplyService:
        """Provide reply domain service."""
        return ReplyService(
            comment_repository=comment_repository,
            comment_service=comment_service,
        )

    @provide
    def get_reaction_service(
        self,
        comment_repository: CommentRepository,
        comment_service: CommentService,
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            comment_repository=comment_repository,
            comment_service=comment_service,
        )
