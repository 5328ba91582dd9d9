"""
Document identity and metadata models.

Documents themselves live in a DocumentStore. The core only ever holds a
DocumentRef (the identity) and NoteMetadata snapshots read from the store.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.utils.paths import folder_segments, normalize_path


class DocumentRef(BaseModel):
    """
    Reference to a document in the corpus.

    The normalized path is the document identity: two refs with the same
    path are the same document. Frozen so refs can be used in sets and as
    dictionary keys.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1, description="Corpus-relative document path")

    @field_validator("path", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> Any:
        if isinstance(value, str):
            return normalize_path(value)
        return value

    @property
    def name(self) -> str:
        """File name including extension."""
        return self.path.rsplit("/", 1)[-1]

    @property
    def basename(self) -> str:
        """File name without extension."""
        name = self.name
        if "." in name[1:]:
            return name.rsplit(".", 1)[0]
        return name

    @property
    def extension(self) -> str:
        """Lower-case extension without the dot, or empty string."""
        name = self.name
        if "." in name[1:]:
            return name.rsplit(".", 1)[1].lower()
        return ""

    @property
    def folders(self) -> list[str]:
        """Folder segments, outermost first."""
        return folder_segments(self.path)

    def __str__(self) -> str:
        return self.path


class NoteMetadata(BaseModel):
    """
    Structural metadata snapshot of a document.

    outgoing_links holds raw link text as written in the document, while
    incoming_links holds the paths of documents that link here.
    """

    frontmatter: dict[str, Any] | None = Field(
        default=None, description="Frontmatter mapping, None if absent"
    )
    tags: list[str] = Field(default_factory=list, description="Deduplicated tag names")
    created: datetime | None = Field(default=None, description="Creation timestamp")
    modified: datetime = Field(..., description="Last modification timestamp")
    outgoing_links: list[str] = Field(default_factory=list, description="Raw link text")
    incoming_links: list[str] = Field(
        default_factory=list, description="Paths of documents linking here"
    )
