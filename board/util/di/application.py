"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.comment import GetCommentsUseCase, SubmitCommentUseCase
from board.application.usecase.counter import (
    GetCounterUseCase,
    IncrementCounterUseCase,
)
from board.domain.service import CommentService, CounterService, ThreadService
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_comment_use_case(
        self, comment_service: CommentService
    ) -> SubmitCommentUseCase:
        """Provide submit comment use case."""
        return SubmitCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, thread_service: ThreadService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(thread_service=thread_service)

    # Counter use cases
    @provide(scope=Scope.REQUEST)
    def get_increment_counter_use_case(
        self, counter_service: CounterService
    ) -> IncrementCounterUseCase:
        """Provide increment counter use case."""
        return IncrementCounterUseCase(counter_service=counter_service)

    @provide(scope=Scope.REQUEST)
    def get_get_counter_use_case(
        self, counter_service: CounterService
    ) -> GetCounterUseCase:
        """Provide get counter use case."""
        return GetCounterUseCase(counter_service=counter_service)
