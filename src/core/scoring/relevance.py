"""
Relevance scoring of a candidate document against a focal document.

Combines four signals with fixed weights:
- Shared tags (40%)
- Keyword overlap (30%)
- Link relationship (20%)
- Temporal proximity (10%)
"""

import math
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from src.core.scoring.similarity import lexical_similarity, tag_overlap
from src.core.tokenizer import Tokenizer
from src.models.document import NoteMetadata

TAG_WEIGHT = 0.4
LEXICAL_WEIGHT = 0.3
LINK_WEIGHT = 0.2
TEMPORAL_WEIGHT = 0.1

# Modification times this many days apart score 0 on temporal proximity
TEMPORAL_WINDOW_DAYS = 30

SECONDS_PER_DAY = 24 * 3600


class ScoringInput(BaseModel):
    """Content and metadata snapshot of one side of a comparison."""

    model_config = ConfigDict(frozen=True)

    content: str
    metadata: NoteMetadata


class RelevanceBreakdown(BaseModel):
    """Sub-scores of one comparison and their weighted total."""

    tag_score: float = Field(..., ge=0.0, le=1.0)
    lexical_score: float = Field(..., ge=0.0, le=1.0)
    link_score: float = Field(..., ge=0.0, le=1.0)
    temporal_score: float = Field(..., ge=0.0, le=1.0)

    @property
    def total(self) -> float:
        # fsum keeps four perfect signals at exactly 1.0
        return math.fsum(
            [
                self.tag_score * TAG_WEIGHT,
                self.lexical_score * LEXICAL_WEIGHT,
                self.link_score * LINK_WEIGHT,
                self.temporal_score * TEMPORAL_WEIGHT,
            ]
        )


class RelevanceScorer:
    """
    Scores how relevant a candidate document is to a focal document.

    Stateless apart from its tokenizer; safe to share across collections.
    """

    def __init__(self, tokenizer: Tokenizer | None = None):
        self.tokenizer = tokenizer or Tokenizer()

    def score(self, focal: ScoringInput, candidate: ScoringInput) -> float:
        """
        Weighted relevance score.

        Args:
            focal: Focal document snapshot
            candidate: Candidate document snapshot

        Returns:
            Score in [0, 1]
        """
        return self.breakdown(focal, candidate).total

    def breakdown(self, focal: ScoringInput, candidate: ScoringInput) -> RelevanceBreakdown:
        """
        Compute every sub-score of a comparison.

        Args:
            focal: Focal document snapshot
            candidate: Candidate document snapshot

        Returns:
            RelevanceBreakdown with the four signals
        """
        return RelevanceBreakdown(
            tag_score=tag_overlap(focal.metadata.tags, candidate.metadata.tags),
            lexical_score=lexical_similarity(focal.content, candidate.content, self.tokenizer),
            link_score=self.link_relationship(focal.metadata, candidate.metadata),
            temporal_score=self.temporal_proximity(focal.metadata, candidate.metadata),
        )

    @staticmethod
    def link_relationship(meta1: NoteMetadata, meta2: NoteMetadata) -> float:
        """
        Score explicit cross-references between two documents.

        A document "links to" the other when any of its raw link texts is a
        substring of one of the other's incoming-link paths. The match is
        loose on purpose: link text and resolved paths rarely share exact
        formatting. Blank link texts never match.

        Returns:
            1.0 if bidirectional, 0.5 if one-directional, 0.0 otherwise
        """
        first_links_second = any(
            link and link in incoming
            for link in meta1.outgoing_links
            for incoming in meta2.incoming_links
        )
        second_links_first = any(
            link and link in incoming
            for link in meta2.outgoing_links
            for incoming in meta1.incoming_links
        )

        if first_links_second and second_links_first:
            return 1.0
        if first_links_second or second_links_first:
            return 0.5
        return 0.0

    @staticmethod
    def temporal_proximity(meta1: NoteMetadata, meta2: NoteMetadata) -> float:
        """
        Linear decay over modification-time distance.

        1.0 for the same instant, 0.0 at TEMPORAL_WINDOW_DAYS or more apart.
        """
        modified1 = _as_aware(meta1.modified)
        modified2 = _as_aware(meta2.modified)

        days_apart = abs((modified1 - modified2).total_seconds()) / SECONDS_PER_DAY
        return max(0.0, 1.0 - days_apart / TEMPORAL_WINDOW_DAYS)


def _as_aware(value: datetime) -> datetime:
    # Naive timestamps are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
