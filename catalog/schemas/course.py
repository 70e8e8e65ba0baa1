"""
Wire format for a catalog course.

The JSON key for the id is spelled "courseI_D"; existing clients depend on it.
Missing or null name/prerequisite values decode to "" and are stored as sent.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, StrictStr, field_validator


class CourseSchema(BaseModel):
    course_id: StrictStr = Field(..., validation_alias="courseI_D", serialization_alias="courseI_D")
    course_name: StrictStr = ""
    prerequisite: StrictStr = ""

    @field_validator("course_name", "prerequisite", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def from_row(cls, row: Any) -> "CourseSchema":
        return cls.model_validate({
            "courseI_D": row.course_id,
            "course_name": row.course_name,
            "prerequisite": row.prerequisite,
        })
