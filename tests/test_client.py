from __future__ import annotations

from pathlib import Path

import httpx

from blog_blocks.client import (
    StaticTokenProvider,
    TokenFileProvider,
    create_http_client,
    credentials_from_config,
)
from blog_blocks.config import BlogApiConfig


def _echo(captured: list[httpx.Request]):
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json={})

    return handler


def test_client_sends_bearer_token_and_stage(config: BlogApiConfig):
    captured: list[httpx.Request] = []
    client = create_http_client(config, transport=httpx.MockTransport(_echo(captured)))

    client.get("/blog", params={"id": 1})

    request = captured[0]
    assert str(request.url) == "https://blog.test/blog?id=1"
    assert request.headers["Authorization"] == "Bearer secret-token"
    assert request.headers["stage"] == "test"


def test_no_authorization_header_without_token():
    captured: list[httpx.Request] = []
    config = BlogApiConfig(base_url="https://blog.test")
    client = create_http_client(config, transport=httpx.MockTransport(_echo(captured)))

    client.get("/blog")

    assert "Authorization" not in captured[0].headers


def test_token_file_is_read_on_every_request(tmp_path: Path):
    token_path = tmp_path / "token"
    provider = TokenFileProvider(token_path)
    captured: list[httpx.Request] = []
    client = create_http_client(
        BlogApiConfig(base_url="https://blog.test"),
        credentials=provider,
        transport=httpx.MockTransport(_echo(captured)),
    )

    client.get("/blog")
    provider.store_token("first\n")
    client.get("/blog")
    provider.store_token("second")
    client.get("/blog")
    provider.clear()
    client.get("/blog")

    headers = [request.headers.get("Authorization") for request in captured]
    assert headers == [None, "Bearer first", "Bearer second", None]


def test_credentials_from_config_prefers_explicit_token(tmp_path: Path):
    token_path = tmp_path / "token"
    token_path.write_text("from-file", encoding="utf-8")

    explicit = credentials_from_config(BlogApiConfig(token="inline", token_file=token_path))
    from_file = credentials_from_config(BlogApiConfig(token_file=token_path))
    empty = credentials_from_config(BlogApiConfig())

    assert isinstance(explicit, StaticTokenProvider)
    assert explicit.get_token() == "inline"
    assert isinstance(from_file, TokenFileProvider)
    assert from_file.get_token() == "from-file"
    assert empty.get_token() is None
