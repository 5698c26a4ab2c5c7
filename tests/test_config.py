from __future__ import annotations

from pathlib import Path

import pytest

from blog_blocks.config import DEFAULT_BASE_URL, DEFAULT_MAX_UPLOAD_BYTES, DEFAULT_STAGE, BlogApiConfig
from blog_blocks.models.blocks import CodeLanguage


def test_defaults_without_environment():
    config = BlogApiConfig()

    assert config.base_url == DEFAULT_BASE_URL
    assert config.stage == DEFAULT_STAGE
    assert config.token is None
    assert config.token_file is None
    assert config.timeout == 10.0
    assert config.default_code_language is CodeLanguage.JAVASCRIPT
    assert config.max_upload_bytes == DEFAULT_MAX_UPLOAD_BYTES == 5 * 1024 * 1024
    assert config.database_url is None


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("BLOG_API_BASE_URL", "https://api.example")
    monkeypatch.setenv("BLOG_API_STAGE", "prod")
    monkeypatch.setenv("BLOG_API_TOKEN", "abc")
    monkeypatch.setenv("BLOG_API_TOKEN_FILE", str(tmp_path / "token"))
    monkeypatch.setenv("BLOG_API_TIMEOUT", "2.5")
    monkeypatch.setenv("BLOG_DEFAULT_CODE_LANGUAGE", "python")
    monkeypatch.setenv("BLOG_MAX_UPLOAD_BYTES", "1024")
    monkeypatch.setenv("BLOG_DATABASE_URL", "sqlite://")

    config = BlogApiConfig()

    assert config.base_url == "https://api.example"
    assert config.stage == "prod"
    assert config.token == "abc"
    assert config.token_file == tmp_path / "token"
    assert config.timeout == 2.5
    assert config.default_code_language is CodeLanguage.PYTHON
    assert config.max_upload_bytes == 1024
    assert config.database_url == "sqlite://"


def test_explicit_values_win_over_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BLOG_API_STAGE", "prod")

    config = BlogApiConfig(stage="test", default_code_language="c++")

    assert config.stage == "test"
    assert config.default_code_language is CodeLanguage.CPP


def test_invalid_language_is_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BLOG_DEFAULT_CODE_LANGUAGE", "cobol")

    with pytest.raises(ValueError):
        BlogApiConfig()
