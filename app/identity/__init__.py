from .client import (
    AuthenticatedUser,
    IdentityClient,
    IdentityError,
    extract_bearer_token,
)

__all__ = [
    "AuthenticatedUser",
    "IdentityClient",
    "IdentityError",
    "extract_bearer_token",
]
