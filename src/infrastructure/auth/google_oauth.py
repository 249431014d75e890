"""Google OAuth 2.0 authorization-code client."""

from typing import Any
from urllib.parse import urlencode

import httpx
import structlog

from core.config import settings
from domain.entities.identity import ExternalIdentity

logger = structlog.get_logger()

AUTHORIZATION_ENDPOINT = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_ENDPOINT = "https://oauth2.googleapis.com/token"
USERINFO_ENDPOINT = "https://openidconnect.googleapis.com/v1/userinfo"


class OAuthExchangeError(Exception):
    """The provider rejected the code exchange or returned no identity."""


def _json_object(response: httpx.Response) -> dict[str, Any]:
    try:
        payload = response.json()
    except ValueError as exc:
        logger.warning("google_oauth_bad_response", url=str(response.url))
        raise OAuthExchangeError("Provider returned a non-JSON body") from exc
    if not isinstance(payload, dict):
        logger.warning("google_oauth_bad_response", url=str(response.url))
        raise OAuthExchangeError("Provider returned an unexpected body")
    return payload


class GoogleOAuthClient:
    """Authorization-code flow against Google's OpenID endpoints."""

    def __init__(
        self,
        client_id: str = settings.google_client_id,
        client_secret: str = settings.google_client_secret,
        redirect_uri: str = settings.google_callback_url,
        timeout: float = 10.0,
    ) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._redirect_uri = redirect_uri
        self._timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self._client_id and self._client_secret)

    def authorization_url(self, state: str) -> str:
        """Build the provider URL the browser is redirected to."""
        params = {
            "client_id": self._client_id,
            "redirect_uri": self._redirect_uri,
            "response_type": "code",
            "scope": "openid email profile",
            "state": state,
            "access_type": "online",
            "prompt": "select_account",
        }
        return f"{AUTHORIZATION_ENDPOINT}?{urlencode(params)}"

    async def fetch_identity(self, code: str) -> ExternalIdentity:
        """Exchange an authorization code and fetch the user's profile.

        Raises:
            OAuthExchangeError: On any transport or provider failure
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                token_response = await client.post(
                    TOKEN_ENDPOINT,
                    data={
                        "code": code,
                        "client_id": self._client_id,
                        "client_secret": self._client_secret,
                        "redirect_uri": self._redirect_uri,
                        "grant_type": "authorization_code",
                    },
                )
                token_response.raise_for_status()
                access_token = _json_object(token_response).get("access_token")
                if not access_token:
                    raise OAuthExchangeError("Provider returned no access token")

                userinfo_response = await client.get(
                    USERINFO_ENDPOINT,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
                userinfo_response.raise_for_status()
                profile = _json_object(userinfo_response)
        except httpx.HTTPError as exc:
            logger.warning("google_oauth_exchange_failed", error=str(exc))
            raise OAuthExchangeError(str(exc)) from exc

        return ExternalIdentity(
            email=profile.get("email"),
            display_name=profile.get("name"),
            subject=profile.get("sub"),
        )
