"""
Data models for ContextCrafter.

Core models:
- DocumentRef: Document identity (normalized path)
- NoteMetadata: Tags, frontmatter, timestamps and links of a document
- RelationshipType: How a document entered a collection
- NoteContext: Immutable snapshot of one collected document
- CollectionStats, CollectionResult: Collector output
- calculate_stats, build_result: Shared result assembler
"""

from src.models.collection import (
    CollectionResult,
    CollectionStats,
    NoteContext,
    RelationshipType,
    build_result,
    calculate_stats,
)
from src.models.document import DocumentRef, NoteMetadata

__all__ = [
    # Document models
    "DocumentRef",
    "NoteMetadata",
    # Collection models
    "RelationshipType",
    "NoteContext",
    "CollectionStats",
    "CollectionResult",
    "calculate_stats",
    "build_result",
]
