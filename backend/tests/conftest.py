from datetime import datetime, timezone

import pytest

from documents.domain.entities import Author, Document
from documents.infrastructure.document_store import DocumentStore

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_document(
    title: str | None = None,
    content: str | None = None,
    author_id: str = "u0",
    id: str | None = None,
    created: datetime | None = None,
) -> Document:
    return Document(
        title=title,
        content=content,
        author=Author(id=author_id, name=f"Author {author_id}"),
        id=id,
        created=created,
    )


@pytest.fixture
def store() -> DocumentStore:
    return DocumentStore()


@pytest.fixture
def seeded_store() -> DocumentStore:
    """Store holding A (title match), B (content match) and C (author match)."""
    storage = {
        "a": make_document(title="Report Q1", content="numbers", author_id="u9", id="a", created=T0),
        "b": make_document(title="Memo", content="urgent matter", author_id="u8", id="b", created=T0),
        "c": make_document(title="Notes", content="misc", author_id="u1", id="c", created=T0),
    }
    return DocumentStore(storage)
