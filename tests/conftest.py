from typing import Dict, List

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from catalog.core.errors import CourseNotFound, DatabaseError
from catalog.db.bootstrap import SEED_COURSES, init_schema
from catalog.db.models.courses import Course
from catalog.db.postgres.crud import CourseRepository
from catalog.db.postgres.session import make_engine, make_sessionmaker
from catalog.api.v1.endpoints.course import get_course_repository
from catalog.main import app


class FakeCourseRepository:
    """In-memory stand-in for CourseRepository."""

    def __init__(self, rows: List[Dict[str, str]] | None = None):
        self.rows: Dict[str, Course] = {}
        for r in rows or []:
            self.rows[r["course_id"]] = Course(**r)
        self.fail = False

    def _check(self):
        if self.fail:
            raise DatabaseError("backend unavailable")

    async def list_courses(self):
        self._check()
        return list(self.rows.values())

    async def insert_course(self, *, course_id, course_name, prerequisite):
        self._check()
        if course_id in self.rows:
            raise DatabaseError("duplicate key")
        obj = Course(course_id=course_id, course_name=course_name, prerequisite=prerequisite)
        self.rows[course_id] = obj
        return obj

    async def delete_course(self, course_id):
        self._check()
        self.rows.pop(course_id, None)

    async def search_course(self, course_id):
        self._check()
        if course_id not in self.rows:
            raise CourseNotFound(course_id)
        return self.rows[course_id]


@pytest.fixture
def fake_repo():
    return FakeCourseRepository(SEED_COURSES)


@pytest.fixture
def client(fake_repo):
    app.dependency_overrides[get_course_repository] = lambda: fake_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def sqlite_engine():
    engine = make_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def repository(sqlite_engine):
    await init_schema(sqlite_engine)
    return CourseRepository(make_sessionmaker(sqlite_engine))
