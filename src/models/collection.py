"""
Collection result models and the shared result assembler.

Every collector produces the same shape: an ordered list of NoteContext
records, aggregate CollectionStats and a truncation flag.
"""

from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from src.core.tokenizer.tokenizer import estimate_tokens_for_length
from src.models.document import DocumentRef, NoteMetadata
from src.utils.paths import normalize_path


class RelationshipType(str, Enum):
    """How a document entered the collection."""

    ROOT = "root"  # The focal document itself
    FORWARD_LINK = "forward-link"  # Reached via an outgoing link
    BACKLINK = "backlink"  # Reached via an incoming link
    MANUAL = "manual"  # Explicitly chosen by the caller
    CONTENT_MATCH = "content-match"  # Reached via relevance scoring


class NoteContext(BaseModel):
    """
    Immutable snapshot of one collected document.

    Content and metadata are read once, when the document is visited.
    """

    model_config = ConfigDict(frozen=True)

    document: DocumentRef
    content: str
    metadata: NoteMetadata
    depth: int = Field(..., ge=0, description="Edge distance from the focal document")
    relationship_type: RelationshipType

    @property
    def path(self) -> str:
        return self.document.path


class CollectionStats(BaseModel):
    """Aggregate statistics over a set of collected notes."""

    total_notes: int = 0
    total_tokens_estimate: int = 0
    depth_distribution: dict[int, int] = Field(default_factory=dict)


class CollectionResult(BaseModel):
    """Output of a single collection run."""

    notes: list[NoteContext] = Field(default_factory=list)
    stats: CollectionStats = Field(default_factory=CollectionStats)
    truncated: bool = Field(default=False, description="A safety bound stopped collection early")

    @property
    def root(self) -> NoteContext | None:
        """The focal document's context, if present."""
        for note in self.notes:
            if note.relationship_type == RelationshipType.ROOT:
                return note
        return None

    @property
    def paths(self) -> list[str]:
        """Document paths in result order."""
        return [note.path for note in self.notes]

    def exclude(self, paths: Iterable[str | DocumentRef]) -> "CollectionResult":
        """
        Drop notes by path and recompute stats.

        Depth-0 notes are kept regardless, so the focal document can never be
        excluded. Used to apply a caller's saved exclusion list. Blank entries
        are ignored.

        Args:
            paths: Paths or refs to remove

        Returns:
            New CollectionResult over the remaining notes
        """
        excluded = {p.path if isinstance(p, DocumentRef) else normalize_path(p) for p in paths}
        excluded.discard("")
        kept = [note for note in self.notes if note.depth == 0 or note.path not in excluded]
        return build_result(kept, truncated=self.truncated)


def calculate_stats(notes: Iterable[NoteContext]) -> CollectionStats:
    """
    Compute stats for a note list in a single pass.

    The token estimate is ceil(total characters / 4), recomputed from the
    given notes every time.

    Args:
        notes: Collected notes

    Returns:
        CollectionStats for exactly these notes
    """
    depth_distribution: dict[int, int] = {}
    total_notes = 0
    total_chars = 0

    for note in notes:
        depth_distribution[note.depth] = depth_distribution.get(note.depth, 0) + 1
        total_chars += len(note.content)
        total_notes += 1

    return CollectionStats(
        total_notes=total_notes,
        total_tokens_estimate=estimate_tokens_for_length(total_chars),
        depth_distribution=depth_distribution,
    )


def build_result(notes: list[NoteContext], truncated: bool = False) -> CollectionResult:
    """Wrap an ordered note list into a CollectionResult with fresh stats."""
    return CollectionResult(notes=list(notes), stats=calculate_stats(notes), truncated=truncated)
