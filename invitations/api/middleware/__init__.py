"""API middleware for the invitation engine."""

from invitations.api.middleware.logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
]
