"""
Link-graph collection.

Breadth-first traversal from a focal document over forward links and
backlinks, bounded by a clamped depth and a fixed node ceiling.
"""

import time
from collections import deque

from src.config import CollectionConfig
from src.models.collection import CollectionResult, NoteContext, RelationshipType, build_result
from src.models.document import DocumentRef
from src.services.base_collector import BaseCollector, require_focal
from src.utils.exceptions import DocumentUnreadableError
from src.utils.logger import get_logger

logger = get_logger(__name__)

# Safety limits
MAX_NODES = 500
MIN_DEPTH = 1
MAX_DEPTH = 3


def clamp_depth(requested: int) -> int:
    """Clamp a requested traversal depth into [MIN_DEPTH, MAX_DEPTH]."""
    return min(max(MIN_DEPTH, requested), MAX_DEPTH)


class GraphCollector(BaseCollector):
    """
    Collects the link neighbourhood of a focal document.

    Traversal:
    - FIFO queue of (document, depth, role), visited set keyed by path
    - Forward links are enqueued before backlinks at each expansion
    - A document reached by several edges is visited once, first dequeue wins
    - Stops with truncated=True once MAX_NODES notes have been collected
    """

    async def collect(
        self,
        focal: DocumentRef | str | None,
        config: CollectionConfig | None = None,
    ) -> CollectionResult:
        """
        Collect the focal document and its linked neighbourhood.

        Args:
            focal: Focal document
            config: Optional per-call configuration (overrides the collector's)

        Returns:
            CollectionResult in visitation order, root first

        Raises:
            NoFocalDocumentError: If no focal document is given
            DocumentUnreadableError: If the focal document itself cannot be read
        """
        root = require_focal(focal)
        config = config or self.config
        max_depth = clamp_depth(config.max_depth)
        extensions = self.traversable_extensions(config)

        start = time.time()
        visited: set[str] = set()
        queue: deque[tuple[DocumentRef, int, RelationshipType]] = deque()
        results: list[NoteContext] = []
        truncated = False

        queue.append((root, 0, RelationshipType.ROOT))

        while queue:
            # Safety cap to prevent runaway collection in dense corpora
            if len(results) >= MAX_NODES:
                logger.warning(f"Hit max node limit ({MAX_NODES}), stopping collection")
                truncated = True
                break

            ref, depth, relationship_type = queue.popleft()

            if depth > 0:
                # Attachments and other kinds never count as visited
                if not self.is_traversable(ref, extensions):
                    logger.debug(f"Skipping non-traversable document: {ref.path}")
                    continue
                if ref.path in visited:
                    continue
                if self.is_excluded(ref, config.exclude_folders):
                    logger.debug(f"Skipping excluded document: {ref.path}")
                    continue
                if depth > max_depth:
                    continue

            visited.add(ref.path)

            try:
                results.append(await self.build_note_context(ref, depth, relationship_type))
            except DocumentUnreadableError as e:
                if depth == 0:
                    raise
                logger.warning(f"Skipping unreadable document: {e.message}")
                continue

            # Only traverse links if not at max depth
            if depth < max_depth:
                try:
                    await self._expand(ref, depth, config, visited, queue)
                except DocumentUnreadableError as e:
                    logger.warning(f"Skipping links of {ref.path}: {e.message}")

        elapsed = (time.time() - start) * 1000
        logger.info(
            f"Graph collection from {root.path}: {len(results)} notes, "
            f"depth={max_depth}, truncated={truncated}, {elapsed:.1f}ms"
        )

        return build_result(results, truncated=truncated)

    async def _expand(
        self,
        ref: DocumentRef,
        depth: int,
        config: CollectionConfig,
        visited: set[str],
        queue: deque[tuple[DocumentRef, int, RelationshipType]],
    ) -> None:
        """Enqueue unvisited neighbours of a document, forward links first."""
        if config.include_forward_links:
            for linked in await self.document_store.forward_links(ref):
                if linked.path not in visited:
                    queue.append((linked, depth + 1, RelationshipType.FORWARD_LINK))

        if config.include_backlinks:
            for linked in await self.document_store.backlinks(ref):
                if linked.path not in visited:
                    queue.append((linked, depth + 1, RelationshipType.BACKLINK))
