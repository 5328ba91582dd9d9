"""
Shared test fixtures.

All fixtures build small in-memory corpora, so no external services are
needed for any test.
"""

from datetime import UTC, datetime

import pytest

from src.config import CollectionConfig, ContentMatchConfig
from src.core.document_store import InMemoryDocumentStore

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def linked_store() -> InMemoryDocumentStore:
    """
    Small linked corpus.

        focal.md -> a.md -> c.md
        b.md -> focal.md
        a.md -> image.png
        archive/old.md -> focal.md
    """
    store = InMemoryDocumentStore()
    store.add_document(
        "focal.md",
        content="Focal note about graph traversal",
        tags=["graphs"],
        links=["a"],
        modified=BASE_TIME,
    )
    store.add_document(
        "a.md",
        content="Note A links onward",
        links=["c", "image.png"],
        modified=BASE_TIME,
    )
    store.add_document("b.md", content="Note B points back", links=["focal"], modified=BASE_TIME)
    store.add_document("c.md", content="Note C is two hops away", modified=BASE_TIME)
    store.add_document("image.png", content="binary", modified=BASE_TIME)
    store.add_document(
        "archive/old.md", content="Archived note", links=["focal"], modified=BASE_TIME
    )
    return store


@pytest.fixture
def collection_config() -> CollectionConfig:
    """Both link directions, depth 1, no exclusions."""
    return CollectionConfig(max_depth=1, include_forward_links=True, include_backlinks=True)


@pytest.fixture
def match_config() -> ContentMatchConfig:
    """Low threshold content-match configuration."""
    return ContentMatchConfig(similarity_threshold=0.1, max_results=10)
