"""
Tests for DriveStore

The pool is mocked: these tests pin the statements issued, their
parameters, row mapping and the not-found/timeout behavior.
"""
import asyncio
import asyncpg
import pytest
from unittest.mock import AsyncMock

from storage.drive_store import (
    CREATE_DOCUMENT_SQL,
    CREATE_FOLDER_SQL,
    GET_DOCUMENT_SQL,
    LIST_DOCUMENTS_SQL,
    LIST_FOLDERS_SQL,
    UPDATE_DOCUMENT_SQL,
    DocumentNotFoundError,
    DriveStore,
)
from tests.factories import CHILD_FOLDER_ID, DOCUMENT_ID, FOLDER_ID, document_row, folder_row


class TestStatements:
    """SQL shape of the statements"""

    def test_listing_queries_select_root_predicate_and_order(self):
        """Null parent selects root rows; folders by name, documents newest first"""
        assert "$1::uuid IS NULL AND parent_id IS NULL" in LIST_FOLDERS_SQL
        assert "ORDER BY name" in LIST_FOLDERS_SQL
        assert "$1::uuid IS NULL AND folder_id IS NULL" in LIST_DOCUMENTS_SQL
        assert "ORDER BY updated_at DESC" in LIST_DOCUMENTS_SQL
        assert "content" not in LIST_DOCUMENTS_SQL

    def test_update_refreshes_updated_at_only(self):
        assert "updated_at = NOW()" in UPDATE_DOCUMENT_SQL
        assert "created_at =" not in UPDATE_DOCUMENT_SQL


@pytest.mark.asyncio
class TestListDrive:
    """Tests for list_drive"""

    async def test_root_listing_passes_null_parent(self, mock_pool):
        store = DriveStore(mock_pool)

        listing = await store.list_drive()

        assert listing.folders == []
        assert listing.documents == []
        calls = mock_pool.fetch.await_args_list
        assert calls[0].args == (LIST_FOLDERS_SQL, None)
        assert calls[1].args == (LIST_DOCUMENTS_SQL, None)

    async def test_listing_maps_rows(self, mock_pool):
        mock_pool.fetch.side_effect = [
            [folder_row(folder_id=CHILD_FOLDER_ID, name="A", parent_id=FOLDER_ID)],
            [document_row(folder_id=FOLDER_ID, with_content=False)],
        ]
        store = DriveStore(mock_pool)

        listing = await store.list_drive(str(FOLDER_ID))

        assert [f.name for f in listing.folders] == ["A"]
        assert listing.folders[0].parent_id == FOLDER_ID
        assert listing.documents[0].id == DOCUMENT_ID
        assert listing.documents[0].content is None
        assert mock_pool.fetch.await_args_list[0].args[1] == str(FOLDER_ID)

    async def test_listing_error_propagates(self, mock_pool):
        mock_pool.fetch.side_effect = ConnectionError("db down")
        store = DriveStore(mock_pool)

        with pytest.raises(ConnectionError):
            await store.list_drive()

    async def test_listing_bounded_by_timeout(self, mock_pool):
        async def slow_fetch(*args):
            await asyncio.sleep(1)
            return []

        mock_pool.fetch = AsyncMock(side_effect=slow_fetch)
        store = DriveStore(mock_pool, query_timeout=0.01)

        with pytest.raises(asyncio.TimeoutError):
            await store.list_drive()


@pytest.mark.asyncio
class TestCreate:
    """Tests for create_folder / create_document"""

    async def test_create_folder(self, mock_pool):
        mock_pool.fetchrow.return_value = folder_row(name="Reports")
        store = DriveStore(mock_pool)

        folder = await store.create_folder("Reports", None)

        assert folder.id == FOLDER_ID
        assert folder.name == "Reports"
        mock_pool.fetchrow.assert_awaited_once_with(CREATE_FOLDER_SQL, "Reports", None)

    async def test_create_nested_folder(self, mock_pool):
        mock_pool.fetchrow.return_value = folder_row(folder_id=CHILD_FOLDER_ID, parent_id=FOLDER_ID)
        store = DriveStore(mock_pool)

        folder = await store.create_folder("Child", str(FOLDER_ID))

        assert folder.parent_id == FOLDER_ID
        mock_pool.fetchrow.assert_awaited_once_with(CREATE_FOLDER_SQL, "Child", str(FOLDER_ID))

    async def test_create_document(self, mock_pool):
        mock_pool.fetchrow.return_value = document_row(title="Plan", content="step 1")
        store = DriveStore(mock_pool)

        doc = await store.create_document("Plan", "step 1", None)

        assert doc.title == "Plan"
        assert doc.content == "step 1"
        mock_pool.fetchrow.assert_awaited_once_with(CREATE_DOCUMENT_SQL, "Plan", "step 1", None)


@pytest.mark.asyncio
class TestGetDocument:
    """Tests for get_document"""

    async def test_found(self, mock_pool):
        mock_pool.fetchrow.return_value = document_row(content="full text")
        store = DriveStore(mock_pool)

        doc = await store.get_document(str(DOCUMENT_ID))

        assert doc.content == "full text"
        mock_pool.fetchrow.assert_awaited_once_with(GET_DOCUMENT_SQL, str(DOCUMENT_ID))

    async def test_missing_row_raises_not_found(self, mock_pool):
        store = DriveStore(mock_pool)

        with pytest.raises(DocumentNotFoundError) as exc_info:
            await store.get_document(str(DOCUMENT_ID))

        assert exc_info.value.document_id == str(DOCUMENT_ID)

    async def test_malformed_id_reaches_database(self, mock_pool):
        """A non-UUID id is a database error, not a missing row"""
        mock_pool.fetchrow.side_effect = asyncpg.DataError(
            "invalid input for query argument $1: 'random-nonexistent-id'"
        )
        store = DriveStore(mock_pool)

        with pytest.raises(asyncpg.DataError):
            await store.get_document("random-nonexistent-id")

        mock_pool.fetchrow.assert_awaited_once_with(GET_DOCUMENT_SQL, "random-nonexistent-id")

    async def test_other_errors_are_not_not_found(self, mock_pool):
        mock_pool.fetchrow.side_effect = RuntimeError("connection reset")
        store = DriveStore(mock_pool)

        with pytest.raises(RuntimeError):
            await store.get_document(DOCUMENT_ID)


@pytest.mark.asyncio
class TestUpdateDocument:
    """Tests for update_document"""

    async def test_update_returns_post_update_row(self, mock_pool, later):
        mock_pool.fetchrow.return_value = document_row(
            title="New", content="v2", folder_id=FOLDER_ID, updated_at=later
        )
        store = DriveStore(mock_pool)

        doc = await store.update_document(str(DOCUMENT_ID), "New", "v2", str(FOLDER_ID))

        assert doc.title == "New"
        assert doc.folder_id == FOLDER_ID
        assert doc.updated_at == later
        assert doc.updated_at > doc.created_at
        mock_pool.fetchrow.assert_awaited_once_with(
            UPDATE_DOCUMENT_SQL, str(DOCUMENT_ID), "New", "v2", str(FOLDER_ID)
        )

    async def test_no_row_matched_raises_not_found(self, mock_pool):
        store = DriveStore(mock_pool)

        with pytest.raises(DocumentNotFoundError):
            await store.update_document(str(DOCUMENT_ID), "T", "", None)

    async def test_uuid_instances_sent_as_text(self, mock_pool):
        mock_pool.fetchrow.return_value = document_row()
        store = DriveStore(mock_pool)

        await store.update_document(DOCUMENT_ID, "T", "", None)

        assert mock_pool.fetchrow.await_args.args[1] == str(DOCUMENT_ID)
