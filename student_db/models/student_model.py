# /student_db/models/student_model.py

# --- Core Imports ---
import re
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from ..services.faults import ValidationFault

NAME_PATTERN = re.compile(r"^[a-zA-Z\s]+$")
CONTACT_PATTERN = re.compile(r"^\d{10}$")
CONTACT_DIGITS = 10


def _reject(message: str) -> PydanticCustomError:
    # A custom error keeps the message exactly as written, without the
    # "Value error, " prefix pydantic adds to plain ValueErrors.
    return PydanticCustomError("student_field", message)


def _as_text(value) -> str:
    return "" if value is None else str(value).strip()


# --- Model Definitions ---

class StudentFields(BaseModel):
    """
    The editable fields of a student after validation.

    This is the only place the field rules live. Both `create` and `update`
    go through it, so the two paths can never disagree about what is valid.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    place: str
    contact: int

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value) -> str:
        text = _as_text(value)
        if not text:
            raise _reject("Please enter your name")
        if len(text) < 3:
            raise _reject("Name must be at least 3 characters long")
        if not NAME_PATTERN.match(text):
            raise _reject("Name must contain only alphabets")
        return text

    @field_validator("place", mode="before")
    @classmethod
    def _check_place(cls, value) -> str:
        text = _as_text(value)
        if not text:
            raise _reject("Please enter your place")
        if len(text) < 2:
            raise _reject("Place name must be at least 2 characters long")
        return text

    @field_validator("contact", mode="before")
    @classmethod
    def _check_contact(cls, value) -> int:
        text = _as_text(value)
        if not text:
            raise _reject("Please enter your phone number")
        if not CONTACT_PATTERN.match(text):
            raise _reject("Phone number must contain exactly 10 digits")
        number = int(text)
        # A leading zero would not survive the round trip through an integer.
        if len(str(number)) != CONTACT_DIGITS:
            raise _reject("Phone number must contain exactly 10 digits")
        return number


def validate_fields(name, place, contact: Union[str, int, None]) -> StudentFields:
    """Validates raw field input, raising `ValidationFault` with the first reason."""
    try:
        return StudentFields(name=name, place=place, contact=contact)
    except ValidationError as e:
        raise ValidationFault(e.errors()[0]["msg"]) from e


class Student(BaseModel):
    """
    The full representation of a Student record, as it is stored in the
    database and handed to subscribers.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int = Field(..., description="The unique, store-assigned identifier.")
    name: str
    place: str
    contact: int
    imagePath: str = Field(..., description="Reference to the photo in the asset store.")

    @property
    def contact_display(self) -> str:
        return str(self.contact)


class StudentDraft(BaseModel):
    """
    An in-progress create or edit, passed by value into the directory.

    `contact` is kept as the text the user typed. `current_image_path` is the
    photo the record already references (edits only); a `staged_image_path`
    that differs from it is a new photo waiting to be persisted.
    """
    model_config = ConfigDict(frozen=True)

    student_id: Optional[int] = None
    name: str = ""
    place: str = ""
    contact: str = ""
    staged_image_path: Optional[str] = None
    current_image_path: Optional[str] = None

    @classmethod
    def from_student(cls, student: Student) -> "StudentDraft":
        return cls(
            student_id=student.id,
            name=student.name,
            place=student.place,
            contact=student.contact_display,
            staged_image_path=student.imagePath,
            current_image_path=student.imagePath,
        )

    @property
    def is_edit(self) -> bool:
        return self.student_id is not None

    @property
    def has_new_asset(self) -> bool:
        return bool(self.staged_image_path) and self.staged_image_path != self.current_image_path
