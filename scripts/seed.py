"""Seed script — fills an in-memory store with sample documents and runs a search.

Usage:
    python scripts/seed.py                    # searches titles starting with "getting"
    python scripts/seed.py api architecture   # custom title prefixes
"""

import sys

from documents.application.services import save_document, search_documents
from documents.domain.entities import Author, Document, SearchRequest
from documents.infrastructure.document_store import DocumentStore
from shared.log_config import configure_logging

PREFIXES = sys.argv[1:] or ["getting"]

AUTHORS = {
    "alice": Author(id="alice", name="Alice Smith"),
    "bob": Author(id="bob", name="Bob Jones"),
}

DOCUMENTS = [
    {"title": "Getting Started Guide", "content": "Install and run.", "author": "alice"},
    {"title": "API Reference", "content": "Every endpoint, listed.", "author": "alice"},
    {"title": "Architecture Notes", "content": "Urgent: revisit caching.", "author": "bob"},
]


def seed(store: DocumentStore) -> None:
    for doc in DOCUMENTS:
        saved = save_document(
            store,
            Document(title=doc["title"], content=doc["content"], author=AUTHORS[doc["author"]]),
        )
        print(f"  Saved '{saved.title}' ({saved.id})")


def main() -> None:
    configure_logging()
    store = DocumentStore()

    print("Documents:")
    seed(store)

    print(f"\nSearch for title prefixes {PREFIXES}:")
    for doc in search_documents(store, SearchRequest(title_prefixes=PREFIXES)):
        print(f"  {doc.title} by {doc.author.name}")

    print("\nDone!")


if __name__ == "__main__":
    main()
