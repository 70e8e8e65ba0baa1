from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from ..postgres.session import Base

class Course(Base):
    __tablename__ = "courses"
    course_id: Mapped[str] = mapped_column(String(10), primary_key=True)
    course_name: Mapped[str] = mapped_column(String(255))
    # free text such as "None" or "MSDS400, MSDS420"; not a foreign key
    prerequisite: Mapped[str] = mapped_column(String(255))
