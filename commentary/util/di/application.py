"""Application layer DI providers."""

from dishka import Scope, provide

from commentary.application.usecase.auth import AuthenticateUseCase
from commentary.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from commentary.application.usecase.reaction import (
    DislikeCommentUseCase,
    LikeCommentUseCase,
    UndislikeCommentUseCase,
    UnlikeCommentUseCase,
)
from commentary.application.usecase.reply import (
    CreateReplyUseCase,
    DeleteReplyUseCase,
    ListRepliesUseCase,
)
from commentary.domain.service import (
    CommentService,
    IdentityService,
    ReactionService,
    ReplyService,
)
from commentary.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_authenticate_use_case(
        self, identity_service: IdentityService
    ) -> AuthenticateUseCase:
        """Provide authenticate use case."""
        return AuthenticateUseCase(identity_service=identity_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Reply use cases
    @provide(scope=Scope.REQUEST)
    def get_list_replies_use_case(
        self, reply_service: ReplyService
    ) -> ListRepliesUseCase:
        """Provide list replies use case."""
        return ListRepliesUseCase(reply_service=reply_service)

    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self, reply_service: ReplyService
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(reply_service=reply_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_reply_use_case(
        self, reply_service: ReplyService
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(reply_service=reply_service)

    # Reaction use cases
    @provide(scope=Scope.REQUEST)
    def get_like_use_case(self, reaction_service: ReactionService) -> LikeCommentUseCase:
        """Provide like use case."""
        return LikeCommentUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_use_case(
        self, reaction_service: ReactionService
    ) -> UnlikeCommentUseCase:
        """Provide unlike use case."""
        return UnlikeCommentUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_dislike_use_case(
        self, reaction_service: ReactionService
    ) -> DislikeCommentUseCase:
        """Provide dislike use case."""
        return DislikeCommentUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_undislike_use_case(
        self, reaction_service: ReactionService
    ) -> UndislikeCommentUseCase:
        """Provide undislike use case."""
        return UndislikeCommentUseCase(reaction_service=reaction_service)
