import logging
from collections.abc import Collection
from datetime import datetime, timezone
from uuid import uuid4

from documents.domain.entities import Document, SearchRequest
from shared.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class DocumentStore:
    """In-memory document repository keyed by document id.

    Not thread-safe: callers sharing one store across threads must guard it
    with their own lock.
    """

    def __init__(self, storage: dict[str, Document] | None = None):
        self.storage = storage if storage is not None else {}

    def __len__(self) -> int:
        return len(self.storage)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self.storage

    def save(self, document: Document) -> Document:
        """Upsert a document, assigning id and created timestamp when absent.

        The created timestamp of an already stored document is kept, so a
        later save under the same id only replaces title, content and author.
        """
        if document is None:
            raise InvalidArgumentError("document")

        if not document.id:
            document.id = str(uuid4())
            logger.debug("Assigned id %s to new document", document.id)

        existing = self.storage.get(document.id)
        if existing is not None and existing.created is not None:
            document.created = existing.created
        elif document.created is None:
            document.created = datetime.now(timezone.utc)

        self.storage[document.id] = document
        logger.debug(
            "%s document %s", "Replaced" if existing is not None else "Inserted", document.id
        )
        return document

    def search(self, request: SearchRequest) -> list[Document]:
        """Return documents matching at least one populated criterion.

        Criteria are OR-ed: a request with both title prefixes and author
        ids returns the union of both matches. An empty request matches
        nothing.
        """
        if request is None:
            raise InvalidArgumentError("request")

        matches = [doc for doc in self.storage.values() if _matches(doc, request)]
        logger.debug("Search matched %d of %d documents", len(matches), len(self.storage))
        return matches

    def find_by_id(self, document_id: str) -> Document | None:
        return self.storage.get(document_id)


def _matches(document: Document, request: SearchRequest) -> bool:
    return (
        _matches_title_prefixes(document, request.title_prefixes)
        or _matches_content(document, request.contains_contents)
        or _matches_author(document, request.author_ids)
        or _created_after(document, request.created_from)
        or _created_before(document, request.created_to)
    )


def _matches_title_prefixes(document: Document, prefixes: Collection[str] | None) -> bool:
    if not prefixes or document.title is None:
        return False
    title = document.title.lower()
    return any(title.startswith(prefix.lower()) for prefix in prefixes)


def _matches_content(document: Document, values: Collection[str] | None) -> bool:
    if not values or document.content is None:
        return False
    content = document.content.lower()
    return any(value.lower() in content for value in values)


def _matches_author(document: Document, author_ids: Collection[str] | None) -> bool:
    if not author_ids or document.author is None:
        return False
    return document.author.id in author_ids


def _created_after(document: Document, bound: datetime | None) -> bool:
    if bound is None or document.created is None:
        return False
    return _as_utc(document.created) > _as_utc(bound)


def _created_before(document: Document, bound: datetime | None) -> bool:
    if bound is None or document.created is None:
        return False
    return _as_utc(document.created) < _as_utc(bound)


def _as_utc(value: datetime) -> datetime:
    # naive timestamps are taken to be UTC so they compare with stored ones
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value
