import logging
import re

import httpx
from pydantic import BaseModel

from job_listing_extractor.errors import AuthenticationError

logger = logging.getLogger(__name__)

HTTP_TIMEOUT = 10.0  # seconds

_BEARER_RE = re.compile(r"^Bearer\s+(.+)$", re.IGNORECASE)


class AuthenticatedUser(BaseModel):
    id: str
    email: str | None = None


def parse_bearer_token(header: str | None) -> str | None:
    """Return the token from an 'Authorization: Bearer <token>' header, or None."""
    if not header:
        return None
    match = _BEARER_RE.match(header.strip())
    if not match:
        return None
    return match.group(1).strip() or None


class SupabaseAuthVerifier:
    """
    Resolves a bearer access token to a user through the Supabase auth API
    (GET /auth/v1/user). Tokens are opaque here; the auth backend decides.
    """

    def __init__(self, supabase_url: str, anon_key: str, timeout: float = HTTP_TIMEOUT) -> None:
        self.user_url = f"{supabase_url.rstrip('/')}/auth/v1/user"
        self.anon_key = anon_key
        self.timeout = timeout

    async def verify(self, access_token: str) -> AuthenticatedUser:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    self.user_url,
                    headers={
                        "apikey": self.anon_key,
                        "Authorization": f"Bearer {access_token}",
                    },
                )
        except httpx.HTTPError as e:
            logger.warning(f"Auth backend unreachable: {e}")
            raise AuthenticationError("Unauthorized") from e

        if response.status_code != 200:
            raise AuthenticationError(self._error_message(response))

        try:
            return AuthenticatedUser.model_validate(response.json())
        except ValueError as e:
            # pydantic.ValidationError and json.JSONDecodeError are both ValueErrors
            logger.warning(f"Unexpected auth backend payload: {e}")
            raise AuthenticationError("Unauthorized") from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            return "Unauthorized"
        if isinstance(payload, dict):
            for key in ("msg", "message", "error_description"):
                if isinstance(payload.get(key), str) and payload[key]:
                    return payload[key]
        return "Unauthorized"
