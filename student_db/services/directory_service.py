# /student_db/services/directory_service.py

"""
This service module is the single gateway for student data as the rest of the
application sees it.

It owns the in-memory projection of the store (the student list and the
loading flag), validates every write, persists photos before the records that
point at them, and tells subscribers after each state change. Everything runs
on one event loop; an internal lock queues overlapping calls so a mutation
can never write the cache between another call's notifications.
"""

import asyncio
from typing import Optional, Tuple

from ..models.directory_model import DirectoryState, OperationResult, SearchResult
from ..models.student_model import Student, StudentDraft, validate_fields
from ..utils.logging import get_logger
from .asset_store import AssetStore
from .change_notifier import ChangeNotifier
from .database_service import DatabaseService
from .faults import MissingAssetFault, StorageFault

logger = get_logger("directory")

UPDATED_MESSAGE = "Student updated successfully"
# Rows-affected of 0 is reported as a success with no effect, not as "not found".
UPDATE_NO_MATCH_MESSAGE = "No matching student was found, so nothing was changed."
DELETED_MESSAGE = "Student deleted successfully"
DELETE_NO_MATCH_MESSAGE = "No matching student was found, so nothing was deleted."


class DirectoryService(ChangeNotifier):
    def __init__(self, database: DatabaseService, assets: AssetStore):
        super().__init__()
        self.db = database
        self.assets = assets
        self._students: Tuple[Student, ...] = ()
        self._is_loading = False
        self._lock = asyncio.Lock()

    # --- State accessors ---

    @property
    def state(self) -> DirectoryState:
        return DirectoryState(students=self._students, is_loading=self._is_loading)

    @property
    def students(self) -> Tuple[Student, ...]:
        return self._students

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    def _set_loading(self, value: bool) -> None:
        self._is_loading = value
        self._notify()

    # --- Reads ---

    async def refresh(self) -> DirectoryState:
        """
        Reloads every student from the store. Subscribers see a loading-start
        and a loading-end notification; the end one is sent even when the
        store fails, and the cached list is then left as it was.
        """
        async with self._lock:
            await self._reload()
        return self.state

    async def _reload(self) -> None:
        self._set_loading(True)
        try:
            self._students = tuple(await self.db.search_all(""))
        finally:
            self._set_loading(False)

    async def search(self, query: str) -> SearchResult:
        """
        Name search for the search screen. A blank query is the idle state,
        not a full listing. Neither the cache nor the loading flag is touched.
        """
        text = (query or "").strip()
        if not text:
            return SearchResult(query="")
        matches = await self.db.search_all(text)
        return SearchResult(query=text, students=tuple(matches), no_results=not matches)

    def photo_for(self, student: Student) -> Optional[str]:
        return self.assets.resolve(student.imagePath)

    # --- Writes ---

    async def create(self, draft: StudentDraft) -> Student:
        """
        Validates the draft, stores its photo, then inserts the record.

        The photo is persisted first so a committed record never points at a
        missing file. If the insert then fails the stored photo is orphaned;
        it is logged, not removed.
        """
        fields = validate_fields(draft.name, draft.place, draft.contact)
        if not draft.staged_image_path:
            raise MissingAssetFault()

        async with self._lock:
            image_path = await asyncio.to_thread(self.assets.persist, draft.staged_image_path)
            record = {**fields.model_dump(), "imagePath": image_path}
            try:
                new_id = await self.db.insert(record)
            except StorageFault:
                logger.warning("Photo %s is orphaned: the student record was not saved", image_path)
                raise

            student = Student(id=new_id, **record)
            self._students = self._students + (student,)
            logger.info("Created student %s (%s)", student.id, student.name)
            self._notify()
        return student

    async def update(self, student_id: int, draft: StudentDraft) -> OperationResult:
        """
        Replaces every field of a student. A newly staged photo is persisted
        and replaces the reference; the old file is left in place. A draft
        with no photo at all keeps whatever the stored row references.

        On success the whole list is reloaded from the store rather than
        patched, so the cache always matches the store exactly.
        """
        fields = validate_fields(draft.name, draft.place, draft.contact)

        async with self._lock:
            image_path = draft.current_image_path
            if draft.has_new_asset:
                image_path = await asyncio.to_thread(self.assets.persist, draft.staged_image_path)
            record = {"id": student_id, **fields.model_dump()}
            if image_path:
                record["imagePath"] = image_path

            self._set_loading(True)
            try:
                rows = await self.db.update(record)
                if rows > 0:
                    self._students = tuple(await self.db.search_all(""))
            finally:
                self._set_loading(False)

        if rows > 0:
            logger.info("Updated student %s", student_id)
            return OperationResult(success=True, rows_affected=rows, message=UPDATED_MESSAGE)
        logger.info("Update of student %s matched no row", student_id)
        return OperationResult(success=True, rows_affected=0, message=UPDATE_NO_MATCH_MESSAGE)

    async def delete(self, student_id: int) -> OperationResult:
        """
        Deletes a student and drops it from the cached list in place, keeping
        the order of the others. The loading flag is always cleared again,
        whatever the store did.
        """
        async with self._lock:
            self._set_loading(True)
            try:
                rows = await self.db.delete(student_id)
                if rows > 0:
                    self._students = tuple(s for s in self._students if s.id != student_id)
            finally:
                self._set_loading(False)

        if rows > 0:
            logger.info("Deleted student %s", student_id)
            return OperationResult(success=True, rows_affected=rows, message=DELETED_MESSAGE)
        return OperationResult(success=False, rows_affected=0, message=DELETE_NO_MATCH_MESSAGE)
