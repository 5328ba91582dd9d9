"""
Tests for InMemoryDocumentStore.

Tests cover:
1. Document lifecycle (add, replace, remove)
2. Link resolution rules
3. Backlinks and incoming-link metadata
4. Unreadable documents
"""

from datetime import UTC, datetime

import pytest

from src.core.document_store import DocumentStore, InMemoryDocumentStore
from src.models import DocumentRef
from src.utils.exceptions import DocumentUnreadableError, StoreError

BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.mark.unit
@pytest.mark.asyncio
class TestDocuments:
    """Tests for document storage."""

    async def test_is_document_store(self, store):
        assert isinstance(store, DocumentStore)

    async def test_add_and_read(self, store):
        ref = store.add_document(
            "notes/a.md",
            content="hello",
            tags=["x", "y", "x"],
            frontmatter={"title": "A"},
            created=BASE_TIME,
            modified=BASE_TIME,
        )

        assert ref == DocumentRef(path="notes/a.md")
        assert await store.read(ref) == "hello"

        metadata = await store.metadata(ref)
        assert metadata.tags == ["x", "y"]
        assert metadata.frontmatter == {"title": "A"}
        assert metadata.created == BASE_TIME
        assert metadata.modified == BASE_TIME

    async def test_list_all_in_insertion_order(self, store):
        store.add_document("b.md")
        store.add_document("a.md")
        store.add_document("c.md")

        assert [ref.path for ref in await store.list_all()] == ["b.md", "a.md", "c.md"]
        assert len(store) == 3
        assert "a.md" in store
        assert DocumentRef(path="c.md") in store

    async def test_replace_document(self, store):
        store.add_document("a.md", content="old")
        store.add_document("a.md", content="new")

        assert await store.read(DocumentRef(path="a.md")) == "new"
        assert len(store) == 1

    async def test_remove_document(self, store):
        store.add_document("a.md", links=["b"])
        store.add_document("b.md")
        store.remove_document("b.md")

        a = DocumentRef(path="a.md")
        assert "b.md" not in store
        assert await store.forward_links(a) == []
        assert (await store.metadata(a)).outgoing_links == ["b"]

    async def test_missing_document_unreadable(self, store):
        missing = DocumentRef(path="missing.md")

        with pytest.raises(DocumentUnreadableError) as exc_info:
            await store.read(missing)
        assert exc_info.value.path == "missing.md"
        assert isinstance(exc_info.value, StoreError)

        with pytest.raises(DocumentUnreadableError):
            await store.metadata(missing)

    async def test_metadata_is_a_copy(self, store):
        ref = store.add_document("a.md", tags=["x"], frontmatter={"k": 1})

        metadata = await store.metadata(ref)
        metadata.tags.append("y")
        metadata.frontmatter["k"] = 2

        fresh = await store.metadata(ref)
        assert fresh.tags == ["x"]
        assert fresh.frontmatter == {"k": 1}


@pytest.mark.unit
@pytest.mark.asyncio
class TestLinkResolution:
    """Tests for resolving raw link text."""

    async def test_exact_path(self, store):
        store.add_document("focal.md", links=["notes/target.md"])
        store.add_document("notes/target.md")

        links = await store.forward_links(DocumentRef(path="focal.md"))
        assert [ref.path for ref in links] == ["notes/target.md"]

    async def test_extension_added(self, store):
        store.add_document("focal.md", links=["notes/target"])
        store.add_document("notes/target.md")

        links = await store.forward_links(DocumentRef(path="focal.md"))
        assert [ref.path for ref in links] == ["notes/target.md"]

    async def test_basename(self, store):
        store.add_document("focal.md", links=["target"])
        store.add_document("deep/folder/target.md")

        links = await store.forward_links(DocumentRef(path="focal.md"))
        assert [ref.path for ref in links] == ["deep/folder/target.md"]

    async def test_heading_and_alias_ignored(self, store):
        store.add_document("focal.md", links=["target#Section", "other|Shown text"])
        store.add_document("target.md")
        store.add_document("other.md")

        links = await store.forward_links(DocumentRef(path="focal.md"))
        assert [ref.path for ref in links] == ["target.md", "other.md"]

    async def test_attachment_link(self, store):
        store.add_document("focal.md", links=["diagram.png"])
        store.add_document("diagram.png")

        links = await store.forward_links(DocumentRef(path="focal.md"))
        assert [ref.path for ref in links] == ["diagram.png"]

    async def test_unresolved_links(self, store):
        store.add_document("focal.md", links=["nowhere", "", "#only-heading"])

        ref = DocumentRef(path="focal.md")
        assert await store.forward_links(ref) == []
        assert (await store.metadata(ref)).outgoing_links == ["nowhere", "", "#only-heading"]

    async def test_duplicate_links_collapse(self, store):
        store.add_document("focal.md", links=["target", "target.md", "target#h"])
        store.add_document("target.md")

        links = await store.forward_links(DocumentRef(path="focal.md"))
        assert [ref.path for ref in links] == ["target.md"]

    async def test_link_added_before_target(self, store):
        """Resolution happens against the current corpus."""
        store.add_document("focal.md", links=["late"])
        focal = DocumentRef(path="focal.md")
        assert await store.forward_links(focal) == []

        store.add_document("late.md")
        assert [ref.path for ref in await store.forward_links(focal)] == ["late.md"]


@pytest.mark.unit
@pytest.mark.asyncio
class TestBacklinks:
    """Tests for reverse-link lookup."""

    async def test_backlinks(self, linked_store):
        focal = DocumentRef(path="focal.md")

        backlinks = await linked_store.backlinks(focal)
        assert [ref.path for ref in backlinks] == ["b.md", "archive/old.md"]

    async def test_incoming_links_metadata(self, linked_store):
        metadata = await linked_store.metadata(DocumentRef(path="c.md"))

        assert metadata.incoming_links == ["a.md"]
        assert metadata.outgoing_links == []

    async def test_no_backlinks(self, linked_store):
        assert await linked_store.backlinks(DocumentRef(path="b.md")) == []

    async def test_close_is_noop(self, linked_store):
        await linked_store.close()
        assert len(linked_store) == 6
