# /student_db/routers/students_router.py

import os
import tempfile
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile, status

from ..models.directory_model import DirectoryState, OperationResult, SearchResult
from ..models.student_model import Student, StudentDraft
from ..services.directory_service import DirectoryService
from ..services.faults import AssetFault, DirectoryFault, MissingAssetFault, StorageFault, ValidationFault
from ..services.form_buffer import FormBuffer
from ..services.image_source import FixedImageSource

router = APIRouter()

UNPROCESSABLE = 422

FAULT_STATUS = {
    ValidationFault: UNPROCESSABLE,
    MissingAssetFault: UNPROCESSABLE,
    AssetFault: status.HTTP_400_BAD_REQUEST,
    StorageFault: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def get_directory(request: Request) -> DirectoryService:
    return request.app.state.directory


def _http_error(fault: DirectoryFault) -> HTTPException:
    code = FAULT_STATUS.get(type(fault), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=code, detail=fault.message)


async def _save_upload(photo: UploadFile) -> str:
    """Writes an uploaded photo to a temporary file, the way a picker would hand it over."""
    suffix = Path(photo.filename or "").suffix or ".img"
    handle, temp_path = tempfile.mkstemp(prefix="upload_", suffix=suffix)
    with os.fdopen(handle, "wb") as out:
        out.write(await photo.read())
    return temp_path


async def _submit(form: FormBuffer, directory: DirectoryService, photo: Optional[UploadFile]):
    temp_path = await _save_upload(photo) if photo is not None else None
    try:
        await form.acquire(FixedImageSource(gallery_path=temp_path))
        return await form.submit(directory)
    except DirectoryFault as e:
        raise _http_error(e)
    finally:
        if temp_path:
            os.remove(temp_path)


# --- COLLECTION ENDPOINTS (/api/students) ---

@router.get("", response_model=List[Student], summary="Get All Students")
def list_students(directory: DirectoryService = Depends(get_directory)):
    return list(directory.students)


@router.post("/refresh", response_model=DirectoryState, summary="Reload Students from the Store")
async def refresh_students(directory: DirectoryService = Depends(get_directory)):
    try:
        return await directory.refresh()
    except DirectoryFault as e:
        raise _http_error(e)


@router.get("/search", response_model=SearchResult, summary="Search Students by Name")
async def search_students(q: str = "", directory: DirectoryService = Depends(get_directory)):
    try:
        return await directory.search(q)
    except DirectoryFault as e:
        raise _http_error(e)


@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED, summary="Register a New Student")
async def create_student(
    name: str = Form(""),
    place: str = Form(""),
    contact: str = Form(""),
    photo: Optional[UploadFile] = File(None),
    directory: DirectoryService = Depends(get_directory),
):
    form = FormBuffer()
    form.begin_create()
    form.set_fields(name=name, place=place, contact=contact)
    return await _submit(form, directory, photo)


# --- INDIVIDUAL STUDENT ENDPOINTS (/api/students/{student_id}) ---

@router.get("/{student_id}", response_model=Student, summary="Get a Single Student")
async def get_student(student_id: int, directory: DirectoryService = Depends(get_directory)):
    try:
        student = await directory.db.get_by_id(student_id)
    except DirectoryFault as e:
        raise _http_error(e)
    if not student:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return student


@router.put("/{student_id}", response_model=OperationResult, summary="Update a Student")
async def update_student(
    student_id: int,
    name: str = Form(""),
    place: str = Form(""),
    contact: str = Form(""),
    photo: Optional[UploadFile] = File(None),
    directory: DirectoryService = Depends(get_directory),
):
    form = FormBuffer()
    current = next((s for s in directory.students if s.id == student_id), None)
    if current is not None:
        form.begin_edit(current)
    else:
        # Unknown to the cache: still submitted, the store decides (0 rows is a no-op).
        form.load(StudentDraft(student_id=student_id))
    form.set_fields(name=name, place=place, contact=contact)
    return await _submit(form, directory, photo)


@router.delete("/{student_id}", response_model=OperationResult, summary="Delete a Student")
async def delete_student(student_id: int, directory: DirectoryService = Depends(get_directory)):
    try:
        return await directory.delete(student_id)
    except DirectoryFault as e:
        raise _http_error(e)
