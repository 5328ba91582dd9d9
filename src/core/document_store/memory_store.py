"""
In-memory document store.

Holds documents, their metadata and raw link text in plain dictionaries.
Used by tests and by callers that already have a corpus in memory.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

from src.core.document_store.base import DocumentStore
from src.models.document import DocumentRef, NoteMetadata
from src.utils.exceptions import DocumentUnreadableError
from src.utils.logger import get_logger
from src.utils.paths import normalize_path

logger = get_logger(__name__)


class _StoredDocument(BaseModel):
    ref: DocumentRef
    content: str
    tags: list[str]
    frontmatter: dict[str, Any] | None
    links: list[str]
    created: datetime | None
    modified: datetime = Field(default_factory=lambda: datetime.now(UTC))


class InMemoryDocumentStore(DocumentStore):
    """
    Dictionary-backed document store.

    Links are raw link text, resolved the way a note vault resolves them:
    1. Exact path
    2. Path with ".md" appended
    3. First document (in insertion order) with the same base name

    "#heading" and "|alias" suffixes are ignored during resolution.
    Unresolvable links stay in the document's outgoing_links but produce
    no graph edge.
    """

    def __init__(self):
        self._documents: dict[str, _StoredDocument] = {}
        # Resolved edges, rebuilt lazily after any mutation
        self._forward: dict[str, list[str]] | None = None
        self._backward: dict[str, list[str]] | None = None

    def __contains__(self, path: object) -> bool:
        if isinstance(path, DocumentRef):
            return path.path in self._documents
        if isinstance(path, str):
            return normalize_path(path) in self._documents
        return False

    def __len__(self) -> int:
        return len(self._documents)

    def add_document(
        self,
        path: str,
        content: str = "",
        tags: list[str] | None = None,
        frontmatter: dict[str, Any] | None = None,
        links: list[str] | None = None,
        created: datetime | None = None,
        modified: datetime | None = None,
    ) -> DocumentRef:
        """
        Add or replace a document.

        Args:
            path: Document path (identity)
            content: Raw text
            tags: Tag names, deduplicated in order
            frontmatter: Frontmatter mapping
            links: Raw link text of outgoing links
            created: Creation timestamp
            modified: Modification timestamp (defaults to now)

        Returns:
            Reference to the stored document
        """
        ref = DocumentRef(path=path)
        self._documents[ref.path] = _StoredDocument(
            ref=ref,
            content=content,
            tags=list(dict.fromkeys(tags or [])),
            frontmatter=frontmatter,
            links=list(links or []),
            created=created,
            modified=modified or datetime.now(UTC),
        )
        self._invalidate()
        return ref

    def remove_document(self, path: str | DocumentRef) -> None:
        """Remove a document; links pointing at it become unresolved."""
        key = path.path if isinstance(path, DocumentRef) else normalize_path(path)
        if self._documents.pop(key, None) is not None:
            self._invalidate()

    # ═══════════════════════════════════════════════════════════
    # DocumentStore interface
    # ═══════════════════════════════════════════════════════════

    async def list_all(self) -> list[DocumentRef]:
        return [doc.ref for doc in self._documents.values()]

    async def read(self, ref: DocumentRef) -> str:
        return self._get(ref).content

    async def metadata(self, ref: DocumentRef) -> NoteMetadata:
        doc = self._get(ref)
        _, backward = self._edges()
        return NoteMetadata(
            frontmatter=dict(doc.frontmatter) if doc.frontmatter is not None else None,
            tags=list(doc.tags),
            created=doc.created,
            modified=doc.modified,
            outgoing_links=list(doc.links),
            incoming_links=list(backward.get(doc.ref.path, [])),
        )

    async def forward_links(self, ref: DocumentRef) -> list[DocumentRef]:
        forward, _ = self._edges()
        return [self._documents[path].ref for path in forward.get(ref.path, [])]

    async def backlinks(self, ref: DocumentRef) -> list[DocumentRef]:
        _, backward = self._edges()
        return [self._documents[path].ref for path in backward.get(ref.path, [])]

    # ═══════════════════════════════════════════════════════════
    # Internals
    # ═══════════════════════════════════════════════════════════

    def _get(self, ref: DocumentRef) -> _StoredDocument:
        doc = self._documents.get(ref.path)
        if doc is None:
            raise DocumentUnreadableError(ref.path, "not in store")
        return doc

    def _invalidate(self) -> None:
        self._forward = None
        self._backward = None

    def _edges(self) -> tuple[dict[str, list[str]], dict[str, list[str]]]:
        if self._forward is None or self._backward is None:
            self._rebuild_edges()
        return self._forward, self._backward

    def _rebuild_edges(self) -> None:
        by_basename: dict[str, str] = {}
        for path, doc in self._documents.items():
            by_basename.setdefault(doc.ref.basename, path)

        forward: dict[str, list[str]] = {}
        backward: dict[str, list[str]] = {}

        for path, doc in self._documents.items():
            targets: dict[str, None] = {}
            for link in doc.links:
                target = self._resolve(link, by_basename)
                if target is not None:
                    targets[target] = None
            forward[path] = list(targets)
            for target in targets:
                backward.setdefault(target, []).append(path)

        self._forward = forward
        self._backward = backward
        logger.debug(f"Rebuilt link index for {len(self._documents)} documents")

    def _resolve(self, link: str, by_basename: dict[str, str]) -> str | None:
        target = link.split("|", 1)[0].split("#", 1)[0].strip()
        if not target:
            return None

        target = normalize_path(target)
        if target in self._documents:
            return target
        if f"{target}.md" in self._documents:
            return f"{target}.md"

        name = target.rsplit("/", 1)[-1]
        if name.lower().endswith(".md"):
            name = name[:-3]
        return by_basename.get(name)
