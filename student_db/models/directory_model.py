# /student_db/models/directory_model.py

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from .student_model import Student


class DirectoryState(BaseModel):
    """A read-only snapshot of what the directory is currently showing."""
    model_config = ConfigDict(frozen=True)

    students: Tuple[Student, ...] = ()
    is_loading: bool = False


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str
    students: Tuple[Student, ...] = ()
    no_results: bool = Field(
        default=False,
        description="True when a non-empty query matched nothing.",
    )


class OperationResult(BaseModel):
    """The outcome of an update or delete, with a message fit for the user."""
    model_config = ConfigDict(frozen=True)

    success: bool
    rows_affected: int = 0
    message: str
