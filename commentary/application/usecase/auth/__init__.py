"""Auth use cases."""

from .authenticate import AuthenticateRequest, AuthenticateUseCase

__all__ = [
    "AuthenticateRequest",
    "AuthenticateUseCase",
]
