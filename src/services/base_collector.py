"""
Shared plumbing for collectors.

Reads note snapshots from the document store and applies the folder and
document-kind eligibility rules every strategy shares.
"""

from collections.abc import Iterable

from src.config import CollectionConfig
from src.core.document_store import DocumentStore
from src.models.collection import NoteContext, RelationshipType
from src.models.document import DocumentRef
from src.utils.exceptions import NoFocalDocumentError
from src.utils.paths import is_in_excluded_folder


def as_ref(document: DocumentRef | str) -> DocumentRef:
    """Coerce a path string or ref into a DocumentRef."""
    if isinstance(document, DocumentRef):
        return document
    return DocumentRef(path=document)


def require_focal(focal: DocumentRef | str | None) -> DocumentRef:
    """
    Validate the focal document designated by the caller.

    Raises:
        NoFocalDocumentError: If no focal document was given
    """
    if focal is None or (isinstance(focal, str) and not focal.strip()):
        raise NoFocalDocumentError("No focal document designated")
    return as_ref(focal)


class BaseCollector:
    """Base class holding the store and eligibility rules."""

    def __init__(self, document_store: DocumentStore, config: CollectionConfig | None = None):
        """
        Initialize collector.

        Args:
            document_store: Store to read documents and links from
            config: Collection configuration (defaults used if omitted)
        """
        self.document_store = document_store
        self.config = config or CollectionConfig()

    async def build_note_context(
        self,
        ref: DocumentRef,
        depth: int,
        relationship_type: RelationshipType,
    ) -> NoteContext:
        """
        Snapshot a document's content and metadata.

        Raises:
            DocumentUnreadableError: If the store cannot read the document
        """
        content = await self.document_store.read(ref)
        metadata = await self.document_store.metadata(ref)
        return NoteContext(
            document=ref,
            content=content,
            metadata=metadata,
            depth=depth,
            relationship_type=relationship_type,
        )

    @staticmethod
    def traversable_extensions(config: CollectionConfig) -> frozenset[str]:
        """Normalized set of collectable document kinds."""
        return frozenset(ext.strip().lower().lstrip(".") for ext in config.traversable_extensions)

    @staticmethod
    def is_traversable(ref: DocumentRef, extensions: frozenset[str]) -> bool:
        """Whether the document kind may be collected at all."""
        return ref.extension in extensions

    @staticmethod
    def is_excluded(ref: DocumentRef, exclude_folders: Iterable[str]) -> bool:
        return is_in_excluded_folder(ref.path, exclude_folders)
