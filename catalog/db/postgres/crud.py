import logging
from typing import List
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from ..models.courses import Course
from catalog.core.errors import CourseNotFound, DatabaseError

logger = logging.getLogger(__name__)


class CourseRepository:
    """Single-statement data access for the courses table.

    Each call opens its own session from the factory, so one instance is safe
    to share between concurrent requests.
    """

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]):
        self._sessionmaker = sessionmaker

    async def list_courses(self) -> List[Course]:
        try:
            async with self._sessionmaker() as db:
                r = await db.execute(select(Course))
                return list(r.scalars().all())
        except (SQLAlchemyError, OSError) as exc:
            raise DatabaseError("failed to list courses") from exc

    async def insert_course(self, *, course_id: str, course_name: str, prerequisite: str) -> Course:
        obj = Course(course_id=course_id, course_name=course_name, prerequisite=prerequisite)
        try:
            async with self._sessionmaker() as db:
                db.add(obj)
                await db.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise DatabaseError(f"failed to insert course {course_id!r}") from exc
        return obj

    async def delete_course(self, course_id: str) -> None:
        # zero matched rows is not an error
        try:
            async with self._sessionmaker() as db:
                r = await db.execute(delete(Course).where(Course.course_id == course_id))
                await db.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise DatabaseError(f"failed to delete course {course_id!r}") from exc
        logger.debug("deleted %d row(s)", r.rowcount, extra={"course_id": course_id})

    async def search_course(self, course_id: str) -> Course:
        try:
            async with self._sessionmaker() as db:
                r = await db.execute(select(Course).where(Course.course_id == course_id))
                obj = r.scalars().first()
        except (SQLAlchemyError, OSError) as exc:
            raise DatabaseError(f"failed to search course {course_id!r}") from exc
        if obj is None:
            raise CourseNotFound(course_id)
        return obj
