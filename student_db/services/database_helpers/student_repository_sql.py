# /student_db/services/database_helpers/student_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the `students` table.
It is the direct interface to the database for the directory and the only
place that knows about sessions.

Every method opens its own short-lived session, so the repository can be
called from worker threads. Database errors are rolled back and re-raised as
`StorageFault`; nothing is ever partially applied.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ...db.models.student_models import Student as StudentRow
from ...models.student_model import Student
from ...utils.logging import get_logger
from ..faults import StorageFault

logger = get_logger("store")

# Columns an update replaces. `id` is never among them.
MUTABLE_COLUMNS = ("name", "place", "contact", "imagePath")

LIKE_ESCAPE = "\\"


def _escape_like(text: str) -> str:
    """Makes `%` and `_` in a user query match literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class StudentRepositorySQL:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        except (SQLAlchemyError, OSError) as e:
            db.rollback()
            logger.error("Store failed to %s: %s", action, e)
            raise StorageFault(f"Could not {action}: {e}") from e
        finally:
            db.close()

    def insert(self, record: Dict) -> int:
        """
        Creates a new Student row and returns the id the store assigned.
        Any `id` in the record is ignored.
        """
        values = {key: record[key] for key in MUTABLE_COLUMNS}
        with self._session("insert student") as db:
            new_student = StudentRow(**values)
            db.add(new_student)
            db.commit()
            return int(new_student.id)

    def update(self, record: Dict) -> int:
        """
        Replaces every mutable column of the row matching `record["id"]`.
        Without an `imagePath` in the record the photo reference is kept.

        Returns the number of rows affected. 0 means no row has that id, which
        callers treat as a no-op rather than an error.
        """
        values = {key: record[key] for key in MUTABLE_COLUMNS if key in record}
        if not values.get("imagePath"):
            values.pop("imagePath", None)
        with self._session("update student") as db:
            affected = (
                db.query(StudentRow)
                .filter(StudentRow.id == record["id"])
                .update(values, synchronize_session=False)
            )
            db.commit()
            return int(affected)

    def delete(self, student_id: int) -> int:
        """Removes a row. The photo it references is left alone."""
        with self._session("delete student") as db:
            affected = (
                db.query(StudentRow)
                .filter(StudentRow.id == student_id)
                .delete(synchronize_session=False)
            )
            db.commit()
            return int(affected)

    def search_all(self, query: str) -> List[Student]:
        """
        Case-insensitive substring search on `name`, in insertion (id) order.
        An empty query returns every student.
        """
        with self._session("search students") as db:
            rows = db.query(StudentRow)
            if query:
                pattern = f"%{_escape_like(query)}%"
                rows = rows.filter(StudentRow.name.ilike(pattern, escape=LIKE_ESCAPE))
            return [Student.model_validate(row) for row in rows.order_by(StudentRow.id.asc()).all()]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with self._session("load student") as db:
            row = db.query(StudentRow).filter(StudentRow.id == student_id).first()
            return Student.model_validate(row) if row else None
