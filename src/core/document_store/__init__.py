"""
Document store implementations for ContextCrafter.

Provides the abstract store interface collectors depend on.

Available backends:
- InMemoryDocumentStore: Dictionary-backed store for tests and in-memory corpora
"""

from src.core.document_store.base import DocumentStore
from src.core.document_store.memory_store import InMemoryDocumentStore

__all__ = [
    "DocumentStore",
    "InMemoryDocumentStore",
]
