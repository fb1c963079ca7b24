"""Groupie Tracker HTTP layer -- routes and middleware."""

from groupie.api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from groupie.api.routes import router

__all__ = [
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "router",
]
