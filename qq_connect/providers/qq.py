"""QQ Connect (QQ互联) OAuth provider."""

import json
import logging
from typing import Optional
from urllib.parse import parse_qs, urlencode

import httpx
from pydantic import ValidationError

from .. import config
from ..envelope import extract_callback_json, raise_for_error_envelope
from ..errors import ConfigError, DecodeError, ProviderError, TransportError
from ..models import ClientConfig, IdentitySet, ProfileInfo, TokenGrant
from .base import OAuthProvider, OAuthUserInfo

logger = logging.getLogger(__name__)

# Query parameters never written to logs in clear
SECRET_PARAMS = ("client_secret", "access_token", "refresh_token", "code")


def _redact(params: dict) -> str:
    """Render query params for logging with secret values masked."""
    return urlencode({k: ("***" if k in SECRET_PARAMS else v) for k, v in params.items()})


class QQProvider(OAuthProvider):
    """
    QQ Connect OAuth 2.0 provider.

    Flow:
    1. Redirect the user to get_authorization_url(state)
    2. Exchange the code from the callback with get_access_token(code)
    3. Resolve the user's OpenID / UnionID with get_openid(token)
    4. Fetch the QQ profile with get_profile(token, openid)

    Docs: https://wiki.connect.qq.com/
    """

    AUTHORIZE_URL = "https://graph.qq.com/oauth2.0/authorize"
    TOKEN_URL = "https://graph.qq.com/oauth2.0/token"
    ME_URL = "https://graph.qq.com/oauth2.0/me"
    USER_INFO_URL = "https://graph.qq.com/user/get_user_info"

    def __init__(
        self,
        app_id: str,
        app_key: str,
        redirect_uri: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = ClientConfig(app_id=app_id, app_key=app_key, redirect_uri=redirect_uri)
        self.timeout = timeout if timeout is not None else config.QQ_HTTP_TIMEOUT
        self._transport = transport

    @classmethod
    def from_env(cls, **kwargs) -> "QQProvider":
        """
        Create a provider from QQ_APP_ID, QQ_APP_KEY and QQ_REDIRECT_URI.

        Raises:
            ConfigError: If any of the variables is missing
        """
        settings = {
            "QQ_APP_ID": config.QQ_APP_ID,
            "QQ_APP_KEY": config.QQ_APP_KEY,
            "QQ_REDIRECT_URI": config.QQ_REDIRECT_URI,
        }
        missing = [key for key, value in settings.items() if not value]
        if missing:
            raise ConfigError(f"Missing environment variables: {', '.join(missing)}. See .env.example")
        return cls(config.QQ_APP_ID, config.QQ_APP_KEY, config.QQ_REDIRECT_URI, **kwargs)

    @property
    def name(self) -> str:
        return "qq"

    def get_authorization_url(self, state: str, scope: Optional[str] = None, **kwargs) -> str:
        """
        Generate the QQ login page URL.

        The user is sent back to redirect_uri with code and state.
        scope is a comma-separated list of API names (e.g. "get_user_info").
        """
        params = {
            "response_type": "code",
            "client_id": self.config.app_id,
            "redirect_uri": self.config.redirect_uri,
            "state": state,
        }
        if scope:
            params["scope"] = scope
        return f"{self.AUTHORIZE_URL}?{urlencode(params, safe=':/')}"

    async def _get(self, url: str, params: dict) -> httpx.Response:
        """Issue a GET, mapping any httpx failure to TransportError."""
        logger.debug(f"GET {url}?{_redact(params)}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            # str(e) carries the full URL, query secrets included
            reason = f"HTTP {e.response.status_code}"
            logger.error(f"Request to {url} failed: {reason}")
            raise TransportError(f"Request to {url} failed: {reason}") from e
        except httpx.HTTPError as e:
            reason = type(e).__name__
            logger.error(f"Request to {url} failed: {reason}")
            raise TransportError(f"Request to {url} failed: {reason}") from e
        return response

    async def _request_token(self, params: dict) -> TokenGrant:
        response = await self._get(self.TOKEN_URL, params)

        # Success is form-encoded: access_token=...&expires_in=...&refresh_token=...
        fields = parse_qs(response.text)
        access_token = fields.get("access_token", [""])[0]
        if not access_token:
            raise_for_error_envelope(extract_callback_json(response.content))

        expires_in = fields.get("expires_in", [None])[0]
        try:
            expires_in = int(expires_in) if expires_in is not None else None
        except ValueError as e:
            raise DecodeError(f"Invalid expires_in: {expires_in!r}") from e

        logger.info(f"Obtained QQ access token (expires_in={expires_in})")
        return TokenGrant(
            access_token=access_token,
            expires_in=expires_in,
            refresh_token=fields.get("refresh_token", [None])[0],
        )

    async def exchange_code(self, code: str) -> TokenGrant:
        """Exchange authorization code for access and refresh tokens."""
        return await self._request_token({
            "grant_type": "authorization_code",
            "client_id": self.config.app_id,
            "client_secret": self.config.app_key,
            "code": code,
            "redirect_uri": self.config.redirect_uri,
        })

    async def get_access_token(self, code: str) -> str:
        """
        Exchange authorization code for an access token.

        Raises:
            ProviderError: If QQ rejects the code
            TransportError: If the request fails
            DecodeError: If the response cannot be understood
        """
        grant = await self.exchange_code(code)
        return grant.access_token

    async def refresh_access_token(self, refresh_token: str) -> TokenGrant:
        """Renew an access token using the refresh token from a previous grant."""
        return await self._request_token({
            "grant_type": "refresh_token",
            "client_id": self.config.app_id,
            "client_secret": self.config.app_key,
            "refresh_token": refresh_token,
        })

    async def get_openid(self, access_token: str) -> IdentitySet:
        """
        Resolve client id, OpenID and UnionID for an access token.

        OpenID is unique per application. If the developer owns several
        applications under one QQ Connect account, UnionID identifies the
        same user across all of them.

        Raises:
            ProviderError: If QQ rejects the token
            TransportError: If the request fails
            DecodeError: If the response cannot be understood
        """
        response = await self._get(self.ME_URL, {"access_token": access_token, "unionid": "1"})
        payload = extract_callback_json(response.content)

        open_id = str(payload.get("openid") or "")
        if not open_id:
            raise_for_error_envelope(payload)

        logger.info(f"Resolved QQ openid {open_id}")
        return IdentitySet(
            client_id=str(payload.get("client_id") or ""),
            open_id=open_id,
            union_id=str(payload.get("unionid") or ""),
        )

    async def get_profile(self, access_token: str, openid: str) -> ProfileInfo:
        """
        Fetch the user's QQ profile: nickname, avatars, gender, location
        and yellow diamond (VIP) status.

        Raises:
            ProviderError: If ret is non-zero
            TransportError: If the request fails
            DecodeError: If the response cannot be understood
        """
        response = await self._get(self.USER_INFO_URL, {
            "access_token": access_token,
            "oauth_consumer_key": self.config.app_id,
            "openid": openid,
        })

        try:
            profile = ProfileInfo.model_validate(json.loads(response.content))
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            raise DecodeError(f"Invalid get_user_info response: {e}") from e

        if profile.status != 0:
            logger.warning(f"QQ get_user_info error {profile.status}: {profile.message}")
            raise ProviderError(profile.status, profile.message)

        return profile

    async def get_user_info(self, access_token: str) -> OAuthUserInfo:
        """Fetch QQ user info as a provider-neutral record."""
        identity = await self.get_openid(access_token)
        profile = await self.get_profile(access_token, identity.open_id)

        return OAuthUserInfo(
            provider="qq",
            provider_user_id=identity.open_id,
            email=None,  # QQ Connect never exposes e-mail
            name=profile.nickname or None,
            avatar_url=profile.avatar_url or None,
            union_id=identity.union_id or None,
        )
