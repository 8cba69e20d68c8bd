from typing import Protocol

from documents.domain.entities import Document, SearchRequest


class DocumentRepository(Protocol):
    def save(self, document: Document) -> Document: ...

    def search(self, request: SearchRequest) -> list[Document]: ...

    def find_by_id(self, document_id: str) -> Document | None: ...
