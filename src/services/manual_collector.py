"""Manual collection: the caller picks the documents explicitly."""

from collections.abc import Iterable

from src.models.collection import CollectionResult, NoteContext, RelationshipType, build_result
from src.models.document import DocumentRef
from src.services.base_collector import BaseCollector, as_ref
from src.utils.exceptions import DocumentUnreadableError
from src.utils.logger import get_logger

logger = get_logger(__name__)


class ManualCollector(BaseCollector):
    """
    Wraps an explicit selection into a CollectionResult.

    No traversal: every selected document becomes a depth-0 context tagged
    manual, in selection order. Duplicates, non-collectable kinds and
    unreadable documents are dropped.
    """

    async def collect(self, selected: Iterable[DocumentRef | str]) -> CollectionResult:
        """
        Collect the selected documents.

        Args:
            selected: Documents chosen by the caller

        Returns:
            CollectionResult (empty if nothing was selected)
        """
        extensions = self.traversable_extensions(self.config)
        seen: set[str] = set()
        results: list[NoteContext] = []

        for document in selected:
            ref = as_ref(document)
            if ref.path in seen or not self.is_traversable(ref, extensions):
                continue
            seen.add(ref.path)

            try:
                results.append(await self.build_note_context(ref, 0, RelationshipType.MANUAL))
            except DocumentUnreadableError as e:
                logger.warning(f"Skipping unreadable document: {e.message}")

        logger.info(f"Manual collection: {len(results)} notes")
        return build_result(results)
