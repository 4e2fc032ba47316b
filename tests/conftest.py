# /tests/conftest.py

import pytest
from PIL import Image

from student_db.models.student_model import StudentDraft
from student_db.services.asset_store import AssetStore
from student_db.services.database_service import DatabaseService
from student_db.services.directory_service import DirectoryService


@pytest.fixture
def make_photo(tmp_path):
    """
    Returns a factory that writes a small PNG into a 'picker' folder, the way
    the gallery or camera would hand one over.
    """
    picker_dir = tmp_path / "picker"
    picker_dir.mkdir()

    def _make(name: str = "pick.png", color=(200, 40, 40)) -> str:
        path = picker_dir / name
        Image.new("RGB", (16, 16), color).save(path, format="PNG")
        return str(path)

    return _make


@pytest.fixture
def database(tmp_path):
    """A fresh on-disk SQLite store for EACH test function."""
    service = DatabaseService(f"sqlite:///{tmp_path / 'students.sqlite3'}")
    yield service
    service.dispose()


@pytest.fixture
def assets(tmp_path):
    return AssetStore(tmp_path / "photos")


@pytest.fixture
def directory(database, assets):
    return DirectoryService(database, assets)


@pytest.fixture
def draft_for(make_photo):
    """Builds a create draft with a freshly picked photo."""

    def _draft(name="Asha Rao", place="Pune", contact="9876543210", photo: bool = True) -> StudentDraft:
        return StudentDraft(
            name=name,
            place=place,
            contact=contact,
            staged_image_path=make_photo(f"{name.replace(' ', '_')}.png") if photo else None,
        )

    return _draft
