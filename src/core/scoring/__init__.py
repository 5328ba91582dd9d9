"""
Scoring engines for content-based discovery.

- similarity: lexical and tag-set Jaccard primitives
- relevance: weighted combination with link and temporal signals
"""

from src.core.scoring.relevance import (
    LEXICAL_WEIGHT,
    LINK_WEIGHT,
    TAG_WEIGHT,
    TEMPORAL_WEIGHT,
    RelevanceBreakdown,
    RelevanceScorer,
    ScoringInput,
)
from src.core.scoring.similarity import jaccard, lexical_similarity, tag_overlap

__all__ = [
    "RelevanceScorer",
    "RelevanceBreakdown",
    "ScoringInput",
    "TAG_WEIGHT",
    "LEXICAL_WEIGHT",
    "LINK_WEIGHT",
    "TEMPORAL_WEIGHT",
    "jaccard",
    "lexical_similarity",
    "tag_overlap",
]
