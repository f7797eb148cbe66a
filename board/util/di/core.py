"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from board.config import (
    CommentSettings,
    RateLimitSettings,
    Settings,
    SubmissionSettings,
)
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_submission_settings(self, settings: Settings) -> SubmissionSettings:
        """Provide submission limits."""
        return settings.submission

    @provide
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        """Provide rate limit settings."""
        return settings.rate_limit

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment listing settings."""
        return settings.comments
