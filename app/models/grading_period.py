from datetime import date

from sqlalchemy import Date, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base_class import Base


class GradingPeriod(Base):
    __tablename__ = "grading_periods"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    # period set, e.g. a school year or a term schedule
    period_key: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    period_index: Mapped[str] = mapped_column(String(10), nullable=False)

    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    __table_args__ = (
        UniqueConstraint("period_key", "period_index", name="uq_grading_period_key_index"),
    )
