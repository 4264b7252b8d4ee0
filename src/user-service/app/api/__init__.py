"""API routers for the user service."""

from . import health, users

__all__ = ["health", "users"]
