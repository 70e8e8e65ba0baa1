import logging
from typing import List
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from catalog.core.config import settings
from catalog.core.errors import CourseNotFound, DatabaseError
from catalog.db.postgres.crud import CourseRepository
from catalog.schemas.course import CourseSchema

logger = logging.getLogger(__name__)

router = APIRouter(tags=["courses"])


def get_course_repository(request: Request) -> CourseRepository:
    """Repository built at startup (see catalog.main lifespan)."""
    return request.app.state.course_repository


@router.get("/", response_class=PlainTextResponse)
def root():
    return f"course catalog microservices have started for {settings.project_id}!\n"


@router.get("/list", response_model=List[CourseSchema])
async def list_courses(repo: CourseRepository = Depends(get_course_repository)):
    try:
        courses = await repo.list_courses()
    except DatabaseError:
        logger.exception("list failed")
        return PlainTextResponse("Failed to retrieve courses", status_code=500)
    return [CourseSchema.from_row(c) for c in courses]


@router.post("/insert", response_class=PlainTextResponse)
async def insert_course(request: Request, repo: CourseRepository = Depends(get_course_repository)):
    # decoded whatever the Content-Type; curl -d sends form-encoded headers
    try:
        body = CourseSchema.model_validate_json(await request.body())
    except ValidationError as exc:
        logger.info("rejected insert body: %s", exc.errors(include_input=False))
        return PlainTextResponse("Invalid request body", status_code=400)
    try:
        await repo.insert_course(
            course_id=body.course_id,
            course_name=body.course_name,
            prerequisite=body.prerequisite,
        )
    except DatabaseError:
        logger.exception("insert failed", extra={"course_id": body.course_id})
        return PlainTextResponse("Insert failed", status_code=500)
    logger.info("course inserted", extra={"course_id": body.course_id})
    return "Course inserted"


@router.delete("/delete/{course_id:path}", response_class=PlainTextResponse)
async def delete_course(course_id: str, repo: CourseRepository = Depends(get_course_repository)):
    try:
        await repo.delete_course(course_id)
    except DatabaseError:
        logger.exception("delete failed", extra={"course_id": course_id})
        return PlainTextResponse("Delete failed", status_code=500)
    logger.info("course deleted", extra={"course_id": course_id})
    return "Course deleted"


@router.get("/search/{course_id:path}", response_model=CourseSchema)
async def search_course(course_id: str, repo: CourseRepository = Depends(get_course_repository)):
    try:
        course = await repo.search_course(course_id)
    except CourseNotFound:
        logger.info("course not found", extra={"course_id": course_id})
        return PlainTextResponse("Course not found", status_code=404)
    except DatabaseError:
        logger.exception("search failed", extra={"course_id": course_id})
        return PlainTextResponse("Search failed", status_code=500)
    return CourseSchema.from_row(course)
