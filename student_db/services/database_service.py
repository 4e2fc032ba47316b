# /student_db/services/database_service.py

import asyncio
from typing import Callable, Dict, List, Optional, TypeVar

from sqlalchemy.engine import Engine

from .. import config
from ..db.database import init_db, make_engine, make_session_factory
from ..models.student_model import Student
from ..utils.logging import get_logger
from .database_helpers.student_repository_sql import StudentRepositorySQL
from .faults import StorageFault

logger = get_logger("store")

T = TypeVar("T")


class DatabaseService:
    """
    The record store as the directory sees it.

    Owns the engine and the repository, and runs every repository call in a
    worker thread so the event loop is never blocked on disk I/O. An optional
    timeout bounds each call; when it fires the caller gets a `StorageFault`,
    but the thread is not cancelled and its write may still land.
    """

    def __init__(self, database_url: Optional[str] = None, *, timeout: Optional[float] = None, engine: Optional[Engine] = None):
        self.engine = engine if engine is not None else make_engine(database_url)
        init_db(self.engine)
        self.student_repo = StudentRepositorySQL(make_session_factory(self.engine))
        self.timeout = timeout

    async def _run(self, action: str, func: Callable[..., T], *args) -> T:
        call = asyncio.to_thread(func, *args)
        if self.timeout is None:
            return await call
        try:
            return await asyncio.wait_for(call, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error("Store call '%s' timed out after %ss", action, self.timeout)
            raise StorageFault(f"The student store did not respond within {self.timeout} seconds while trying to {action}.") from e

    # --- STUDENT METHODS (DELEGATED) ---
    async def insert(self, record: Dict) -> int: return await self._run("insert", self.student_repo.insert, record)
    async def update(self, record: Dict) -> int: return await self._run("update", self.student_repo.update, record)
    async def delete(self, student_id: int) -> int: return await self._run("delete", self.student_repo.delete, student_id)
    async def search_all(self, query: str) -> List[Student]: return await self._run("search", self.student_repo.search_all, query)
    async def get_by_id(self, student_id: int) -> Optional[Student]: return await self._run("load", self.student_repo.get_by_id, student_id)

    def dispose(self) -> None:
        self.engine.dispose()


def get_database_service() -> DatabaseService:
    """Builds a DatabaseService from the environment settings."""
    return DatabaseService(config.DATABASE_URL, timeout=config.STORE_TIMEOUT_SECONDS)
