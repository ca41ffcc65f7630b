"""OAuth provider implementations."""

from .base import OAuthProvider, OAuthUserInfo
from .qq import QQProvider

__all__ = ["OAuthProvider", "OAuthUserInfo", "QQProvider"]
