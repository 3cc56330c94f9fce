from typing import Optional


class MediaFinderError(Exception):
    """Base exception for the service."""


class ProviderError(MediaFinderError):
    """Raised when an upstream provider cannot be reached or answers with an error."""

    def __init__(self, provider: str, reason: str, status_code: Optional[int] = None):
        self.provider = provider
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"{provider}: {reason}")
