import logging
from typing import Dict, List
from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncEngine
from .models.courses import Course
from .postgres.session import Base

logger = logging.getLogger(__name__)

# "MSDS4001" is kept as published in the catalog
SEED_COURSES: List[Dict[str, str]] = [
    {"course_id": "MSDS400", "course_name": "Math for Modelers", "prerequisite": "None"},
    {"course_id": "MSDS485", "course_name": "Data Governance, Ethics, and Law", "prerequisite": "None"},
    {"course_id": "MSDS403", "course_name": "Data Science and Digital Transformation", "prerequisite": "None"},
    {"course_id": "MSDS460", "course_name": "Decision Analytics", "prerequisite": "MSDS400, MSDS4001"},
    {"course_id": "MSDS432", "course_name": "Foundations Of Data Engineering", "prerequisite": "MSDS420"},
]

async def init_schema(engine: AsyncEngine, *, reset: bool = True) -> Dict:
    """
    Prepare the courses table and load the seed catalog in one transaction.
    With reset=True the table is dropped first, so every boot starts from the
    seed rows; otherwise existing rows are kept and seeding only happens on an
    empty table.
    Errors propagate; callers treat them as fatal.
    """
    table = Course.__table__
    tables = [table]
    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all, tables=tables)
            logger.info("dropped courses table")
        await conn.run_sync(Base.metadata.create_all, tables=tables)

        existing = 0
        if not reset:
            existing = (await conn.execute(select(func.count()).select_from(table))).scalar_one()

        seeded = 0
        if existing == 0:
            await conn.execute(insert(table), SEED_COURSES)
            seeded = len(SEED_COURSES)

    logger.info("courses table ready (%d seed rows inserted, %d rows kept)", seeded, existing)
    return {"seeded": seeded, "kept": existing}
