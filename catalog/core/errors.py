class DatabaseError(Exception):
    """A statement against the courses table could not be executed."""


class CourseNotFound(LookupError):
    def __init__(self, course_id: str):
        super().__init__(f"course {course_id!r} not found")
        self.course_id = course_id
