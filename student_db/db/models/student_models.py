# /student_db/db/models/student_models.py

"""
This module defines the SQLAlchemy ORM model for the `Student` entity: one row
per student in the directory. The photo itself lives in the asset store; the
row only keeps the reference to it.
"""

from sqlalchemy import BigInteger, Column, Integer, String

from ..database import Base


class Student(Base):
    """
    SQLAlchemy model representing a single student in the directory.
    """
    __tablename__ = "students"

    # Assigned by the store on insert and never changed afterwards.
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, index=True, nullable=False)
    place = Column(String, nullable=False)

    # Ten digit phone numbers overflow a 32-bit INTEGER on some backends.
    contact = Column(BigInteger, nullable=False)

    # Reference to the photo in the asset store, never the bytes.
    imagePath = Column(String, nullable=False)
