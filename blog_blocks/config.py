"""Runtime configuration for the blog backend and editor defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from blog_blocks.models.blocks import DEFAULT_CODE_LANGUAGE, CodeLanguage

DEFAULT_BASE_URL = "https://zine-backend.ip-ddns.com"
DEFAULT_STAGE = "test"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024


@dataclass(slots=True)
class BlogApiConfig:
    """Runtime configuration; unset fields fall back to ``BLOG_*`` environment variables."""

    base_url: str | None = None
    stage: str | None = None
    token: str | None = None
    token_file: Path | None = None
    timeout: float | None = None
    default_code_language: CodeLanguage | None = None
    max_upload_bytes: int | None = None
    database_url: str | None = None
    upload_path: str = "/file/upload"
    delete_path: str = "/file/delete"

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = os.getenv("BLOG_API_BASE_URL", DEFAULT_BASE_URL)
        if self.stage is None:
            self.stage = os.getenv("BLOG_API_STAGE", DEFAULT_STAGE)
        if self.token is None:
            self.token = os.getenv("BLOG_API_TOKEN") or None
        if self.token_file is None:
            token_file = os.getenv("BLOG_API_TOKEN_FILE")
            self.token_file = Path(token_file).expanduser() if token_file else None
        if self.timeout is None:
            self.timeout = float(os.getenv("BLOG_API_TIMEOUT", DEFAULT_TIMEOUT))
        if self.default_code_language is None:
            self.default_code_language = CodeLanguage(
                os.getenv("BLOG_DEFAULT_CODE_LANGUAGE", DEFAULT_CODE_LANGUAGE.value)
            )
        else:
            self.default_code_language = CodeLanguage(self.default_code_language)
        if self.max_upload_bytes is None:
            self.max_upload_bytes = int(os.getenv("BLOG_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES))
        if self.database_url is None:
            self.database_url = os.getenv("BLOG_DATABASE_URL") or None


__all__ = ["BlogApiConfig", "DEFAULT_BASE_URL", "DEFAULT_MAX_UPLOAD_BYTES", "DEFAULT_STAGE"]
