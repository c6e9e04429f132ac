from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base_class import Base


class ClassworkRecord(Base):
    """One raw assignment row, as exported by the student information system."""

    __tablename__ = "classwork"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    student_id: Mapped[str] = mapped_column(String(6), nullable=False, index=True)
    # keeps the export order
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    course: Mapped[str] = mapped_column(String(255), nullable=False)
    date_assign: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    date_due: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    assignment: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    category: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    # "", "M" or a number, stored as text exactly as exported
    score: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    comment: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        UniqueConstraint("student_id", "position", name="uq_classwork_student_position"),
    )
