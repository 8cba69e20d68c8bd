import logging

import pytest

from conftest import make_document
from documents.application.services import (
    find_document,
    get_document,
    save_document,
    search_documents,
)
from documents.domain.entities import SearchRequest
from shared.exceptions import InvalidArgumentError, NotFoundError


def test_save_document(store):
    doc = save_document(store, make_document(title="My Doc"))
    assert doc.id is not None
    assert doc.created is not None
    assert doc.title == "My Doc"


def test_save_document_logs(store, caplog):
    with caplog.at_level(logging.INFO, logger="documents.application.services"):
        doc = save_document(store, make_document(title="Logged"))
    assert f"Saved document {doc.id}" in caplog.text


def test_save_document_none(store):
    with pytest.raises(InvalidArgumentError):
        save_document(store, None)


def test_get_document(store):
    created = save_document(store, make_document(title="My Doc"))
    doc = get_document(store, created.id)
    assert doc.id == created.id
    assert doc.title == "My Doc"


def test_get_document_not_found(store):
    with pytest.raises(NotFoundError, match="Document not found: nope"):
        get_document(store, "nope")


def test_find_document(store):
    created = save_document(store, make_document(title="My Doc"))
    assert find_document(store, created.id) is created
    assert find_document(store, "nope") is None


def test_search_documents(seeded_store):
    results = search_documents(seeded_store, SearchRequest(contains_contents=["urgent"]))
    assert [doc.id for doc in results] == ["b"]


def test_search_documents_none(seeded_store):
    with pytest.raises(InvalidArgumentError):
        search_documents(seeded_store, None)
