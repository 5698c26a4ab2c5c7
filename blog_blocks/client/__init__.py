"""HTTP client and credential providers for the blog backend."""

from .credentials import BearerTokenAuth, CredentialProvider, StaticTokenProvider, TokenFileProvider
from .factory import create_http_client, credentials_from_config

__all__ = [
    "BearerTokenAuth",
    "CredentialProvider",
    "StaticTokenProvider",
    "TokenFileProvider",
    "create_http_client",
    "credentials_from_config",
]
