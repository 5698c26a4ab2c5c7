"""Construction of the configured backend HTTP client."""

from __future__ import annotations

import httpx

from blog_blocks.config import BlogApiConfig

from .credentials import BearerTokenAuth, CredentialProvider, StaticTokenProvider, TokenFileProvider


def credentials_from_config(config: BlogApiConfig) -> CredentialProvider:
    """Prefer an explicit token, then a token file; otherwise send no credential."""
    if config.token:
        return StaticTokenProvider(config.token)
    if config.token_file is not None:
        return TokenFileProvider(config.token_file)
    return StaticTokenProvider(None)


def create_http_client(
    config: BlogApiConfig | None = None,
    *,
    credentials: CredentialProvider | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Return an ``httpx.Client`` bound to the backend base URL with auth and stage headers."""
    cfg = config or BlogApiConfig()
    provider = credentials if credentials is not None else credentials_from_config(cfg)
    return httpx.Client(
        base_url=cfg.base_url or "",
        headers={"stage": cfg.stage or "", "Accept": "application/json"},
        auth=BearerTokenAuth(provider),
        timeout=cfg.timeout,
        transport=transport,
    )


__all__ = ["create_http_client", "credentials_from_config"]
