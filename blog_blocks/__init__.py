"""Top-level package for the block-based blog editor core."""

__version__ = "0.1.0"

from .config import BlogApiConfig  # noqa: E402
from .editor import BlockSequence  # noqa: E402
from .models import Document  # noqa: E402
from .store import DocumentStore, create_document_store  # noqa: E402

__all__ = [
    "BlockSequence",
    "BlogApiConfig",
    "Document",
    "DocumentStore",
    "__version__",
    "create_document_store",
]
