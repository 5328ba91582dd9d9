"""
Content-based collection.

Ranks the whole corpus against a focal document with RelevanceScorer and
keeps the top matches above a threshold. Used when explicit links are
missing or too sparse.
"""

import asyncio
import time

from src.config import CollectionConfig, ContentMatchConfig
from src.core.document_store import DocumentStore
from src.core.scoring import RelevanceScorer, ScoringInput
from src.models.collection import CollectionResult, NoteContext, RelationshipType, build_result
from src.models.document import DocumentRef
from src.services.base_collector import BaseCollector, require_focal
from src.utils.exceptions import DocumentUnreadableError
from src.utils.logger import get_logger

logger = get_logger(__name__)


class ContentCollector(BaseCollector):
    """
    Single-hop relevance collector.

    Result: the focal document at depth 0, then matches at depth 1 tagged
    content-match, ordered by descending score (ties keep corpus order).
    """

    def __init__(
        self,
        document_store: DocumentStore,
        config: CollectionConfig | None = None,
        match_config: ContentMatchConfig | None = None,
        scorer: RelevanceScorer | None = None,
    ):
        """
        Initialize content collector.

        Args:
            document_store: Store to read the corpus from
            config: Folder exclusion and document-kind rules
            match_config: Threshold and result cap
            scorer: Relevance scorer (defaults to RelevanceScorer())
        """
        super().__init__(document_store, config)
        self.match_config = match_config or ContentMatchConfig()
        self.scorer = scorer or RelevanceScorer()

    async def collect(
        self,
        focal: DocumentRef | str | None,
        match_config: ContentMatchConfig | None = None,
        config: CollectionConfig | None = None,
    ) -> CollectionResult:
        """
        Collect the documents most relevant to the focal document.

        Args:
            focal: Focal document
            match_config: Optional per-call threshold and result cap
            config: Optional per-call exclusion rules

        Returns:
            CollectionResult with the root followed by ranked matches

        Raises:
            NoFocalDocumentError: If no focal document is given
            DocumentUnreadableError: If the focal document itself cannot be read
        """
        root_ref = require_focal(focal)
        match_config = match_config or self.match_config
        config = config or self.config
        extensions = self.traversable_extensions(config)

        start = time.time()
        root = await self.build_note_context(root_ref, 0, RelationshipType.ROOT)
        focal_input = ScoringInput(content=root.content, metadata=root.metadata)

        candidates = [
            ref
            for ref in await self.document_store.list_all()
            if ref.path != root_ref.path
            and self.is_traversable(ref, extensions)
            and not self.is_excluded(ref, config.exclude_folders)
        ]

        if not candidates:
            logger.debug(f"No eligible candidates for {root_ref.path}, returning root only")
            return build_result([root])

        # Reads are independent; ordering is restored from the candidate list below
        snapshots = await asyncio.gather(
            *(self._read_candidate(ref) for ref in candidates),
            return_exceptions=True,
        )

        scored: list[tuple[NoteContext, float]] = []
        for ref, snapshot in zip(candidates, snapshots, strict=True):
            if isinstance(snapshot, DocumentUnreadableError):
                logger.warning(f"Skipping unreadable document: {snapshot.message}")
                continue
            if isinstance(snapshot, BaseException):
                raise snapshot
            candidate_input = ScoringInput(content=snapshot.content, metadata=snapshot.metadata)
            scored.append((snapshot, self.scorer.score(focal_input, candidate_input)))

        # Stable sort keeps corpus order between equal scores
        relevant = [item for item in scored if item[1] >= match_config.similarity_threshold]
        relevant.sort(key=lambda item: item[1], reverse=True)
        matches = [note for note, _ in relevant[: match_config.max_results]]

        elapsed = (time.time() - start) * 1000
        logger.info(
            f"Content collection from {root_ref.path}: {len(candidates)} candidates, "
            f"{len(relevant)} above {match_config.similarity_threshold}, "
            f"{len(matches)} kept, {elapsed:.1f}ms"
        )

        return build_result([root, *matches])

    async def _read_candidate(self, ref: DocumentRef) -> NoteContext:
        return await self.build_note_context(ref, 1, RelationshipType.CONTENT_MATCH)
