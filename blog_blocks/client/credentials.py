"""Credential providers supplying the bearer token for backend requests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator, Protocol

import httpx


class CredentialProvider(Protocol):
    def get_token(self) -> str | None:
        ...


class StaticTokenProvider:
    """Always returns the token it was built with."""

    def __init__(self, token: str | None) -> None:
        self._token = token or None

    def get_token(self) -> str | None:
        return self._token


class TokenFileProvider:
    """Reads the token from a file on every request so refreshed tokens are picked up."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get_token(self) -> str | None:
        if not self._path.is_file():
            return None
        token = self._path.read_text(encoding="utf-8").strip()
        return token or None

    def store_token(self, token: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(token.strip(), encoding="utf-8")

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


class BearerTokenAuth(httpx.Auth):
    """Attach ``Authorization: Bearer <token>`` when the provider has a token."""

    def __init__(self, provider: CredentialProvider) -> None:
        self._provider = provider

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self._provider.get_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


__all__ = [
    "BearerTokenAuth",
    "CredentialProvider",
    "StaticTokenProvider",
    "TokenFileProvider",
]
