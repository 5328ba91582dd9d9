"""
Base interface for document storage.

Collectors only talk to documents through this interface. Any backing
(file-system index, database, in-memory double) can satisfy it, as long as
it reflects a consistent snapshot for the duration of one collection call.
"""

from abc import ABC, abstractmethod

from src.models.document import DocumentRef, NoteMetadata


class DocumentStore(ABC):
    """Abstract base class for document store implementations."""

    # ═══════════════════════════════════════════════════════════
    # DOCUMENT ACCESS
    # ═══════════════════════════════════════════════════════════

    @abstractmethod
    async def list_all(self) -> list[DocumentRef]:
        """
        List every document in the corpus.

        Returns:
            Document refs in stable enumeration order
        """
        pass

    @abstractmethod
    async def read(self, ref: DocumentRef) -> str:
        """
        Read the raw content of a document.

        Args:
            ref: Document reference

        Returns:
            Document text

        Raises:
            DocumentUnreadableError: If the document cannot be read
        """
        pass

    @abstractmethod
    async def metadata(self, ref: DocumentRef) -> NoteMetadata:
        """
        Get the structural metadata of a document.

        Args:
            ref: Document reference

        Returns:
            NoteMetadata snapshot

        Raises:
            DocumentUnreadableError: If metadata cannot be extracted
        """
        pass

    # ═══════════════════════════════════════════════════════════
    # LINK GRAPH
    # ═══════════════════════════════════════════════════════════

    @abstractmethod
    async def forward_links(self, ref: DocumentRef) -> list[DocumentRef]:
        """
        Get resolved targets of a document's outgoing links.

        Args:
            ref: Document reference

        Returns:
            Linked documents, in link order
        """
        pass

    @abstractmethod
    async def backlinks(self, ref: DocumentRef) -> list[DocumentRef]:
        """
        Get documents that link to a document.

        Args:
            ref: Document reference

        Returns:
            Linking documents
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the store."""
        return None
