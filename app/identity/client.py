"""
Identity Service Client
=======================
Resolves a bearer credential to a stable user id via the auth service.

Environment Variables Required:
- SUPABASE_URL: Base URL of the auth service
- SUPABASE_ANON_KEY: Public API key sent as the `apikey` header

Usage:
    from app.identity.client import IdentityClient

    client = IdentityClient()
    user = await client.get_user(token)
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class IdentityError(Exception):
    """The credential could not be resolved to a user."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity of the caller."""
    user_id: str
    email: Optional[str] = None


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an Authorization header value.

    Returns None for a missing header, a non-Bearer scheme or an empty token.
    """
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None


class IdentityClient:
    """
    Auth service client.

    One httpx.AsyncClient is opened per lookup and closed afterwards;
    the client keeps no connection state between requests.
    """

    DEFAULT_TIMEOUT = 10.0
    USER_ENDPOINT = "/auth/v1/user"

    def __init__(
        self,
        base_url: str = "",
        anon_key: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Auth service base URL
            anon_key: Public API key
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self.timeout = timeout
        self._transport = transport

        if not self.base_url:
            logger.warning("SUPABASE_URL not configured")
        if not self.anon_key:
            logger.warning("SUPABASE_ANON_KEY not configured")

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.anon_key)

    def _get_headers(self, credential: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {credential}",
            "apikey": self.anon_key,
        }

    async def get_user(self, credential: str) -> AuthenticatedUser:
        """
        Resolve a credential to the authenticated user.

        Raises:
            IdentityError: missing credential, unconfigured client,
                rejected credential, transport failure or malformed response
        """
        if not credential:
            raise IdentityError("Missing credential")
        if not self.is_configured:
            raise IdentityError("Identity service not configured")

        url = f"{self.base_url}{self.USER_ENDPOINT}"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(url, headers=self._get_headers(credential))
        except httpx.TimeoutException as e:
            raise IdentityError(f"Identity service timeout: {e}") from e
        except httpx.HTTPError as e:
            raise IdentityError(f"Identity service unavailable: {e}") from e

        if response.status_code != 200:
            raise IdentityError(
                f"Credential rejected ({response.status_code})",
                status_code=response.status_code,
            )

        try:
            body: Dict[str, Any] = response.json()
        except ValueError as e:
            raise IdentityError("Invalid identity response", status_code=200) from e

        user_id = body.get("id") if isinstance(body, dict) else None
        if not user_id:
            raise IdentityError("Identity response missing user id", status_code=200)

        return AuthenticatedUser(user_id=str(user_id), email=body.get("email"))
