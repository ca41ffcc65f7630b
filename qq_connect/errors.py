"""Exceptions raised by the QQ Connect client."""


class QQConnectError(Exception):
    """Base class for all qq_connect errors."""


class ConfigError(QQConnectError):
    """Client configuration is missing or empty."""


class TransportError(QQConnectError):
    """The HTTP request failed or the response body could not be read."""


class DecodeError(QQConnectError):
    """Response body matches neither a success shape nor an error envelope."""


class ProviderError(QQConnectError):
    """
    Error reported by QQ Connect itself.

    Carries the provider's numeric code and message verbatim, from either the
    callback envelope (error / error_description) or a get_user_info
    response (ret / msg).
    """

    def __init__(self, code: int, message: str):
        super().__init__(f"Error code {code}: {message}")
        self.code = code
        self.message = message
