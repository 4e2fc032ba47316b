# /tests/test_database_service.py

import time

import pytest

from student_db.services.database_service import DatabaseService
from student_db.services.faults import StorageFault


@pytest.fixture
def slow_database(tmp_path):
    """A store whose calls give up after a tenth of a second."""
    service = DatabaseService(f"sqlite:///{tmp_path / 'slow.sqlite3'}", timeout=0.1)
    yield service
    service.dispose()


def _sleepy_search(query):
    time.sleep(0.5)
    return []


@pytest.mark.asyncio
async def test_store_call_that_outlives_the_timeout_raises_storage_fault(slow_database, mocker):
    mocker.patch.object(slow_database.student_repo, "search_all", side_effect=_sleepy_search)

    with pytest.raises(StorageFault, match="did not respond within 0.1 seconds"):
        await slow_database.search_all("")


@pytest.mark.asyncio
async def test_fast_store_calls_are_unaffected_by_the_timeout(slow_database):
    student_id = await slow_database.insert({"name": "Asha Rao", "place": "Pune", "contact": 9876543210, "imagePath": "/photos/a.jpg"})

    assert [s.id for s in await slow_database.search_all("")] == [student_id]


@pytest.mark.asyncio
async def test_no_timeout_by_default(database):
    assert database.timeout is None
    assert await database.search_all("") == []
