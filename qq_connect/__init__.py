"""QQ Connect OAuth client."""

from .errors import ConfigError, DecodeError, ProviderError, QQConnectError, TransportError
from .models import ClientConfig, IdentitySet, ProfileInfo, TokenGrant
from .providers import OAuthProvider, OAuthUserInfo, QQProvider

__all__ = [
    "QQProvider",
    "OAuthProvider",
    "OAuthUserInfo",
    "ClientConfig",
    "TokenGrant",
    "IdentitySet",
    "ProfileInfo",
    "QQConnectError",
    "ConfigError",
    "TransportError",
    "ProviderError",
    "DecodeError",
]
