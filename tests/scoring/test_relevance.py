"""
Tests for RelevanceScorer.

Tests cover:
1. Fixed weights and the weighted total
2. Link-relationship signal (including its known-fuzzy matching)
3. Temporal proximity decay
4. Symmetry of the content signals
"""

from datetime import UTC, datetime, timedelta

import pytest

from src.core.scoring import (
    LEXICAL_WEIGHT,
    LINK_WEIGHT,
    TAG_WEIGHT,
    TEMPORAL_WEIGHT,
    RelevanceScorer,
    ScoringInput,
)
from src.models import NoteMetadata

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


def make_input(
    content: str = "",
    tags: list[str] | None = None,
    modified: datetime = BASE_TIME,
    outgoing: list[str] | None = None,
    incoming: list[str] | None = None,
) -> ScoringInput:
    return ScoringInput(
        content=content,
        metadata=NoteMetadata(
            tags=tags or [],
            modified=modified,
            outgoing_links=outgoing or [],
            incoming_links=incoming or [],
        ),
    )


class TestWeights:
    """Tests for the weighting scheme."""

    def test_weights_sum_to_one(self):
        assert TAG_WEIGHT + LEXICAL_WEIGHT + LINK_WEIGHT + TEMPORAL_WEIGHT == pytest.approx(1.0)
        assert (TAG_WEIGHT, LEXICAL_WEIGHT, LINK_WEIGHT, TEMPORAL_WEIGHT) == (0.4, 0.3, 0.2, 0.1)

    def test_maximum_score_is_one(self):
        """All four signals at 1.0 give exactly the maximum."""
        focal = make_input(
            "graph traversal notes", ["graphs"], outgoing=["notes"], incoming=["notes/other.md"]
        )
        other = make_input(
            "graph traversal notes", ["graphs"], outgoing=["notes"], incoming=["notes/focal.md"]
        )

        breakdown = RelevanceScorer().breakdown(focal, other)

        assert breakdown.tag_score == 1.0
        assert breakdown.lexical_score == 1.0
        assert breakdown.link_score == 1.0
        assert breakdown.temporal_score == 1.0
        assert RelevanceScorer().score(focal, other) == 1.0

    def test_unrelated_documents_score_zero(self):
        focal = make_input("graph traversal", ["graphs"])
        other = make_input("sourdough bread", ["cooking"], modified=BASE_TIME - timedelta(days=45))

        assert RelevanceScorer().score(focal, other) == 0.0

    def test_weighted_sum(self):
        """Score equals the weighted sum of the breakdown."""
        focal = make_input("graph queue stack", ["python", "graphs"])
        other = make_input(
            "graph queue heap tree", ["python"], modified=BASE_TIME + timedelta(days=15)
        )

        scorer = RelevanceScorer()
        breakdown = scorer.breakdown(focal, other)

        assert breakdown.tag_score == pytest.approx(0.5)
        assert breakdown.lexical_score == pytest.approx(0.4)
        assert breakdown.link_score == 0.0
        assert breakdown.temporal_score == pytest.approx(0.5)
        assert scorer.score(focal, other) == pytest.approx(0.2 + 0.12 + 0.0 + 0.05)


class TestLinkRelationship:
    """Tests for the link-relationship signal."""

    def test_none(self):
        meta1 = make_input(outgoing=["x"]).metadata
        meta2 = make_input(incoming=["y.md"]).metadata
        assert RelevanceScorer.link_relationship(meta1, meta2) == 0.0

    def test_one_directional(self):
        meta1 = make_input(outgoing=["target"]).metadata
        meta2 = make_input(incoming=["folder/target.md"]).metadata

        assert RelevanceScorer.link_relationship(meta1, meta2) == 0.5
        assert RelevanceScorer.link_relationship(meta2, meta1) == 0.5

    def test_bidirectional(self):
        meta1 = make_input(outgoing=["two"], incoming=["one.md"]).metadata
        meta2 = make_input(outgoing=["one"], incoming=["two.md"]).metadata

        assert RelevanceScorer.link_relationship(meta1, meta2) == 1.0

    def test_substring_match_is_known_fuzzy(self):
        """
        Link text is matched by substring containment.

        "art" is contained in "notes/party.md", so this counts as a link even
        though nothing links to a note called "art". Kept loose on purpose.
        """
        meta1 = make_input(outgoing=["art"]).metadata
        meta2 = make_input(incoming=["notes/party.md"]).metadata

        assert RelevanceScorer.link_relationship(meta1, meta2) == 0.5

    def test_differing_link_syntax_is_missed(self):
        """Link text with an alias suffix does not match the resolved path."""
        meta1 = make_input(outgoing=["target|Alias"]).metadata
        meta2 = make_input(incoming=["target.md"]).metadata

        assert RelevanceScorer.link_relationship(meta1, meta2) == 0.0

    def test_blank_link_text_ignored(self):
        meta1 = make_input(outgoing=[""]).metadata
        meta2 = make_input(incoming=["target.md"]).metadata

        assert RelevanceScorer.link_relationship(meta1, meta2) == 0.0


class TestTemporalProximity:
    """Tests for the temporal decay signal."""

    @pytest.mark.parametrize(
        ("days", "expected"),
        [(0, 1.0), (3, 0.9), (15, 0.5), (29.97, 0.001), (30, 0.0), (365, 0.0)],
    )
    def test_linear_decay(self, days, expected):
        meta1 = make_input().metadata
        meta2 = make_input(modified=BASE_TIME + timedelta(days=days)).metadata

        assert RelevanceScorer.temporal_proximity(meta1, meta2) == pytest.approx(expected)

    def test_order_does_not_matter(self):
        earlier = make_input(modified=BASE_TIME - timedelta(days=6)).metadata
        later = make_input().metadata

        assert RelevanceScorer.temporal_proximity(earlier, later) == pytest.approx(0.8)
        assert RelevanceScorer.temporal_proximity(later, earlier) == pytest.approx(0.8)

    def test_naive_timestamps_treated_as_utc(self):
        naive = make_input(modified=datetime(2024, 6, 1, 12, 0)).metadata
        aware = make_input().metadata

        assert RelevanceScorer.temporal_proximity(naive, aware) == 1.0


class TestSymmetry:
    """The tag, lexical and temporal sub-scores do not depend on argument order."""

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (
                make_input("graph traversal in linked notes", ["Graphs", "bfs"]),
                make_input(
                    "notes about queue traversal",
                    ["graphs"],
                    modified=BASE_TIME + timedelta(days=4),
                ),
            ),
            (
                make_input("", [], outgoing=["b"]),
                make_input("sourdough", ["cooking"], modified=BASE_TIME - timedelta(days=40)),
            ),
        ],
    )
    def test_content_signals_symmetric(self, a, b):
        scorer = RelevanceScorer()
        forward = scorer.breakdown(a, b)
        backward = scorer.breakdown(b, a)

        assert forward.tag_score == backward.tag_score
        assert forward.lexical_score == backward.lexical_score
        assert forward.temporal_score == backward.temporal_score
