"""Google OAuth client adapter."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from wild_oasis.domain.models import OAuthIdentity

GOOGLE_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"


class OAuthClient(Protocol):
    """Interface for the OAuth identity provider."""

    def authorization_url(self, redirect_uri: str, state: str) -> str:
        """Return the consent-screen URL to redirect the browser to."""

    async def fetch_identity(self, code: str, redirect_uri: str) -> OAuthIdentity:
        """Exchange an authorization code for the user's email and name."""


@dataclass
class HttpxGoogleOAuthClient(OAuthClient):
    """Google OAuth client implemented with httpx."""

    client_id: str
    client_secret: str
    http_client: httpx.AsyncClient
    authorize_url: str = GOOGLE_AUTHORIZE_URL
    token_url: str = GOOGLE_TOKEN_URL
    userinfo_url: str = GOOGLE_USERINFO_URL

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        client_id: str,
        client_secret: str,
        authorize_url: str = GOOGLE_AUTHORIZE_URL,
        token_url: str = GOOGLE_TOKEN_URL,
        userinfo_url: str = GOOGLE_USERINFO_URL,
    ) -> "HttpxGoogleOAuthClient":
        """Create an OAuth client with a managed httpx session."""
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            http_client=httpx.AsyncClient(),
            authorize_url=authorize_url,
            token_url=token_url,
            userinfo_url=userinfo_url,
        )

    def authorization_url(self, redirect_uri: str, state: str) -> str:
        """Build the Google consent-screen URL."""
        params = {
            "client_id": self.client_id,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "scope": "openid email profile",
            "state": state,
        }
        return str(httpx.URL(self.authorize_url, params=params))

    async def fetch_identity(self, code: str, redirect_uri: str) -> OAuthIdentity:
        """Exchange the code for a token and read the userinfo endpoint."""
        token_response = await self.http_client.post(
            self.token_url,
            data={
                "code": code,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "redirect_uri": redirect_uri,
                "grant_type": "authorization_code",
            },
            timeout=10,
        )
        token_response.raise_for_status()
        access_token = token_response.json().get("access_token")
        if not access_token:
            raise RuntimeError("Google token response has no access_token")
        userinfo_response = await self.http_client.get(
            self.userinfo_url,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=10,
        )
        userinfo_response.raise_for_status()
        payload = userinfo_response.json()
        email = payload.get("email")
        if not email:
            raise RuntimeError("Google userinfo has no email")
        return OAuthIdentity(email=email, name=payload.get("name") or email)

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()
