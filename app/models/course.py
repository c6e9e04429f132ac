from sqlalchemy import Float, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base_class import Base


class Course(Base):
    __tablename__ = "courses"

    # first 9 chars of the classwork "course" field
    id: Mapped[str] = mapped_column(String(9), primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    categories = relationship(
        "CourseCategory", back_populates="course", cascade="all, delete-orphan"
    )

    @property
    def category(self) -> dict[str, float]:
        return {c.name: c.weight for c in self.categories}


class CourseCategory(Base):
    __tablename__ = "course_categories"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    course_id: Mapped[str] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)

    __table_args__ = (
        UniqueConstraint("course_id", "name", name="uq_course_category_name"),
    )

    course = relationship("Course", back_populates="categories")
