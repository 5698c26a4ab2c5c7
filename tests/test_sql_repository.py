from __future__ import annotations

import pytest

from blog_blocks.models.document import DocumentRecord, RecordTimestamp
from blog_blocks.repositories import DocumentNotFoundError, RepositoryError


def _record(name: str, *, parent: int | None = None, content: str = "") -> DocumentRecord:
    return DocumentRecord(
        blog_name=name,
        blog_description=f"{name} description",
        content=content,
        parent_blog=parent,
        created_at=RecordTimestamp(seconds=1_700_000_000, nanos=123),
    )


def test_create_assigns_id_and_round_trips(repository):
    created = repository.create_document(_record("First", content="[]"))

    loaded = repository.get_document(created.blog_id)

    assert created.blog_id is not None
    assert loaded == created
    assert loaded.created_at == RecordTimestamp(seconds=1_700_000_000, nanos=123)


def test_get_missing_document_raises(repository):
    with pytest.raises(DocumentNotFoundError):
        repository.get_document(999)


def test_list_documents_separates_roots_and_children(repository):
    root = repository.create_document(_record("Root"))
    other = repository.create_document(_record("Other"))
    child = repository.create_document(_record("Child", parent=root.blog_id))

    roots = repository.list_documents()
    children = repository.list_documents(root.blog_id)

    assert [record.blog_id for record in roots] == [root.blog_id, other.blog_id]
    assert [record.blog_id for record in children] == [child.blog_id]


def test_create_with_unknown_parent_fails(repository):
    with pytest.raises(DocumentNotFoundError):
        repository.create_document(_record("Orphan", parent=12345))


def test_update_replaces_fields_and_keeps_created_at(repository):
    created = repository.create_document(_record("Draft"))

    updated = repository.update_document(
        created.blog_id,
        DocumentRecord(blog_name="Final", content='[{"id":"a","type":"text","content":"x","order":0}]'),
    )

    assert updated.blog_name == "Final"
    assert updated.created_at == created.created_at
    assert repository.get_document(created.blog_id).blog_name == "Final"


def test_update_missing_document_raises(repository):
    with pytest.raises(DocumentNotFoundError):
        repository.update_document(404, _record("Ghost"))


def test_update_rejects_self_parent(repository):
    created = repository.create_document(_record("Loop"))

    with pytest.raises(RepositoryError):
        repository.update_document(created.blog_id, _record("Loop", parent=created.blog_id))


def test_delete_removes_descendants(repository):
    root = repository.create_document(_record("Root"))
    child = repository.create_document(_record("Child", parent=root.blog_id))
    grandchild = repository.create_document(_record("Grandchild", parent=child.blog_id))
    keeper = repository.create_document(_record("Keeper"))

    repository.delete_documents([root.blog_id])

    for removed in (root, child, grandchild):
        with pytest.raises(DocumentNotFoundError):
            repository.get_document(removed.blog_id)
    assert repository.get_document(keeper.blog_id).blog_name == "Keeper"


def test_delete_with_unknown_id_changes_nothing(repository):
    created = repository.create_document(_record("Stay"))

    with pytest.raises(DocumentNotFoundError):
        repository.delete_documents([created.blog_id, 777])

    assert repository.get_document(created.blog_id).blog_name == "Stay"
