from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Callable

import httpx
import pytest
from sqlalchemy.engine import Engine

from blog_blocks.config import BlogApiConfig
from blog_blocks.db.engine import create_engine, create_session_factory
from blog_blocks.db.schema import Base, DbDocument, create_all
from blog_blocks.repositories import SqlDocumentRepository
from blog_blocks.store import DocumentStore, create_document_store

BLOG_ENV_VARS = (
    "BLOG_API_BASE_URL",
    "BLOG_API_STAGE",
    "BLOG_API_TOKEN",
    "BLOG_API_TOKEN_FILE",
    "BLOG_API_TIMEOUT",
    "BLOG_DEFAULT_CODE_LANGUAGE",
    "BLOG_MAX_UPLOAD_BYTES",
    "BLOG_DATABASE_URL",
)


@pytest.fixture(autouse=True)
def clean_blog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell configuration out of the tests."""
    for name in BLOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def postgres_url() -> str | None:
    """Return the Postgres test URL if provided via env."""
    return os.getenv("POSTGRES_TEST_URL")


@pytest.fixture
def engine(postgres_url: str | None) -> Iterator[Engine]:
    """Yield an engine targeting Postgres when configured; otherwise SQLite in-memory."""
    engine = create_engine(postgres_url) if postgres_url else create_engine()
    create_all(engine)
    try:
        yield engine
    finally:
        with engine.begin() as connection:
            if engine.dialect.name == "sqlite":
                Base.metadata.drop_all(bind=connection)
            else:
                connection.execute(DbDocument.__table__.delete())


@pytest.fixture
def session_factory(engine: Engine):
    return create_session_factory(engine)


@pytest.fixture
def config() -> BlogApiConfig:
    return BlogApiConfig(base_url="https://blog.test", stage="test", token="secret-token")


@pytest.fixture
def repository(session_factory) -> SqlDocumentRepository:
    return SqlDocumentRepository(session_factory)


@pytest.fixture
def document_store(session_factory, config: BlogApiConfig) -> DocumentStore:
    return create_document_store(session_factory, config=config)


@pytest.fixture
def mock_client(config: BlogApiConfig) -> Callable[..., httpx.Client]:
    """Build an authenticated client whose requests are answered by ``handler``."""
    from blog_blocks.client import create_http_client

    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        return create_http_client(config, transport=httpx.MockTransport(handler))

    return _factory
