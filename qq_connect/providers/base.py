"""Provider interface shared by OAuth login integrations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..models import TokenGrant


@dataclass
class OAuthUserInfo:
    """Who logged in, reduced to the fields every provider can supply."""

    provider: str
    provider_user_id: str
    email: Optional[str]
    name: Optional[str]
    avatar_url: Optional[str] = None
    union_id: Optional[str] = None


class OAuthProvider(ABC):
    """An authorization-code login integration."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short key used to tag users from this provider."""
        pass

    @abstractmethod
    def get_authorization_url(self, state: str, **kwargs) -> str:
        """
        Build the login page URL the browser is redirected to.

        state is echoed back on the callback so the caller can reject
        forged redirects.
        """
        pass

    @abstractmethod
    async def exchange_code(self, code: str) -> TokenGrant:
        """Trade the callback's code for a TokenGrant."""
        pass

    @abstractmethod
    async def get_user_info(self, access_token: str) -> OAuthUserInfo:
        """Resolve the account behind access_token."""
        pass
