# /student_db/db/base.py

# Central registry for the SQLAlchemy models. Importing them here guarantees
# that `Base.metadata` knows every table before `create_all` runs.

from .database import Base

from .models.student_models import Student
