# /tests/test_student_model.py

import pytest

from student_db.models.student_model import Student, StudentDraft, validate_fields
from student_db.services.faults import ValidationFault


def test_valid_fields_are_trimmed_and_contact_becomes_a_number():
    fields = validate_fields("  Asha Rao ", " Pune ", "9876543210")
    assert fields.name == "Asha Rao"
    assert fields.place == "Pune"
    assert fields.contact == 9876543210


def test_contact_may_arrive_as_an_int():
    assert validate_fields("Asha Rao", "Pune", 9876543210).contact == 9876543210


@pytest.mark.parametrize(
    "name, place, contact, reason",
    [
        ("", "Pune", "9876543210", "Please enter your name"),
        ("Al", "Pune", "9876543210", "Name must be at least 3 characters long"),
        ("R2 D2", "Pune", "9876543210", "Name must contain only alphabets"),
        ("Asha Rao", "", "9876543210", "Please enter your place"),
        ("Asha Rao", "P", "9876543210", "Place name must be at least 2 characters long"),
        ("Asha Rao", "Pune", "", "Please enter your phone number"),
        ("Asha Rao", "Pune", "12345", "Phone number must contain exactly 10 digits"),
        ("Asha Rao", "Pune", "98765x3210", "Phone number must contain exactly 10 digits"),
        ("Asha Rao", "Pune", "0987654321", "Phone number must contain exactly 10 digits"),
    ],
)
def test_invalid_fields_raise_a_readable_reason(name, place, contact, reason):
    with pytest.raises(ValidationFault) as excinfo:
        validate_fields(name, place, contact)
    assert excinfo.value.message == reason


def test_first_failing_field_is_reported():
    with pytest.raises(ValidationFault, match="Please enter your name"):
        validate_fields("", "", "")


def test_draft_from_student_stages_the_current_photo():
    student = Student(id=7, name="Asha Rao", place="Pune", contact=9876543210, imagePath="/photos/a.jpg")
    draft = StudentDraft.from_student(student)

    assert draft.is_edit
    assert draft.contact == "9876543210"
    assert draft.staged_image_path == draft.current_image_path == "/photos/a.jpg"
    assert not draft.has_new_asset
    assert draft.model_copy(update={"staged_image_path": "/tmp/new.png"}).has_new_asset


def test_empty_draft():
    draft = StudentDraft()
    assert not draft.is_edit
    assert not draft.has_new_asset
    assert draft.name == draft.place == draft.contact == ""
