# /student_db/services/form_buffer.py

"""
The caller-owned edit buffer behind the create and edit forms.

The directory never holds form state. A screen keeps a `FormBuffer`, edits it,
and submits the resulting `StudentDraft` by value. The buffer is cleared on
every way out of an edit session: a successful submit or a cancel. A submit
that fails keeps the draft so the user can correct it and retry.
"""

from typing import Optional, Union

from ..models.directory_model import OperationResult
from ..models.student_model import Student, StudentDraft
from .change_notifier import ChangeNotifier
from .directory_service import DirectoryService
from .faults import AssetFault
from .image_source import ImageSource


class FormBuffer(ChangeNotifier):
    def __init__(self):
        super().__init__()
        self._draft = StudentDraft()

    @property
    def draft(self) -> StudentDraft:
        return self._draft

    def _replace(self, draft: StudentDraft) -> None:
        self._draft = draft
        self._notify()

    def load(self, draft: StudentDraft) -> None:
        self._replace(draft)

    def begin_create(self) -> None:
        self._replace(StudentDraft())

    def begin_edit(self, student: Student) -> None:
        """Loads a record into the form, its current photo included."""
        self._replace(StudentDraft.from_student(student))

    def set_fields(self, *, name: Optional[str] = None, place: Optional[str] = None, contact: Optional[str] = None) -> None:
        changes = {key: value for key, value in (("name", name), ("place", place), ("contact", contact)) if value is not None}
        if changes:
            self._replace(self._draft.model_copy(update=changes))

    def stage_asset(self, path: Optional[str]) -> bool:
        """Shows `path` as the form's photo. A missing path is a cancelled pick."""
        if not path:
            return False
        self._replace(self._draft.model_copy(update={"staged_image_path": path}))
        return True

    async def acquire(self, source: ImageSource, *, from_camera: bool = False) -> bool:
        origin = "camera" if from_camera else "gallery"
        try:
            if from_camera:
                path = await source.acquire_from_camera()
            else:
                path = await source.acquire_from_gallery()
        except OSError as e:
            raise AssetFault(f"Could not get a photo from the {origin}: {e}") from e
        return self.stage_asset(path)

    def cancel_edit(self) -> None:
        self._replace(StudentDraft())

    async def submit(self, directory: DirectoryService) -> Union[Student, OperationResult]:
        """Creates or updates from the current draft, then clears the form."""
        draft = self._draft
        if draft.is_edit:
            result = await directory.update(draft.student_id, draft)
        else:
            result = await directory.create(draft)
        self.cancel_edit()
        return result
