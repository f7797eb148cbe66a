"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import CommentSettings, RateLimitSettings, SubmissionSettings
from board.domain.repository import CommentRepository, CounterRepository
from board.domain.service import (
    CommentService,
    CounterService,
    RateLimiter,
    SlidingWindowRateLimiter,
    ThreadService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    The rate limiter is APP-scoped: its history must outlive single requests.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_rate_limiter(self, rate_limit_settings: RateLimitSettings) -> RateLimiter:
        """Provide the process-wide submission rate limiter."""
        return SlidingWindowRateLimiter(
            limit=rate_limit_settings.limit,
            window_seconds=rate_limit_settings.window_seconds,
            max_tracked_keys=rate_limit_settings.max_tracked_ips,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        rate_limiter: RateLimiter,
        submission_settings: SubmissionSettings,
    ) -> CommentService:
        """Provide comment ingestion domain service."""
        return CommentService(
            comment_repository=comment_repository,
            rate_limiter=rate_limiter,
            submission_settings=submission_settings,
        )

    @provide
    def get_thread_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> ThreadService:
        """Provide thread assembly domain service."""
        return ThreadService(
            comment_repository=comment_repository,
            comment_settings=comment_settings,
        )

    @provide
    def get_counter_service(
        self, counter_repository: CounterRepository
    ) -> CounterService:
        """Provide counter domain service."""
        return CounterService(counter_repository=counter_repository)
