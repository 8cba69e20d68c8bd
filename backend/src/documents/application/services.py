import logging

from documents.domain.entities import Document, SearchRequest
from documents.domain.repository import DocumentRepository
from shared.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def save_document(repo: DocumentRepository, document: Document) -> Document:
    saved = repo.save(document)
    logger.info("Saved document %s", saved.id)
    return saved


def search_documents(repo: DocumentRepository, request: SearchRequest) -> list[Document]:
    return repo.search(request)


def find_document(repo: DocumentRepository, document_id: str) -> Document | None:
    return repo.find_by_id(document_id)


def get_document(repo: DocumentRepository, document_id: str) -> Document:
    doc = repo.find_by_id(document_id)
    if not doc:
        raise NotFoundError("Document", document_id)
    return doc
