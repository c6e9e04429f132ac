from typing import Optional

from sqlalchemy.orm import Session, selectinload

from app.core.errors import CourseNotFoundError, GradingPeriodNotFoundError
from app.models.classwork import ClassworkRecord
from app.models.course import Course
from app.models.grading_period import GradingPeriod
from app.repositories.base import StudentRecord
from app.schemas.course import CourseInfo
from app.schemas.grading_period import PeriodInterval
from app.services.dates import period_interval


class SqlClassworkStore:
    def __init__(self, db: Session):
        self.db = db

    def get_student(self, student_id: str) -> Optional[StudentRecord]:
        rows = (
            self.db.query(ClassworkRecord)
            .filter(ClassworkRecord.student_id == student_id)
            .order_by(ClassworkRecord.position.asc())
            .all()
        )
        if not rows:
            return None

        return {
            "classwork": [
                {
                    "course": r.course,
                    "dateAssign": r.date_assign,
                    "dateDue": r.date_due,
                    "assignment": r.assignment,
                    "category": r.category,
                    "score": r.score,
                    "comment": r.comment,
                }
                for r in rows
            ]
        }


class SqlCourseLookup:
    def __init__(self, db: Session):
        self.db = db

    def get_course(self, course_id: str) -> CourseInfo:
        course = (
            self.db.query(Course)
            .options(selectinload(Course.categories))
            .filter(Course.id == course_id)
            .first()
        )
        if not course:
            raise CourseNotFoundError(course_id)
        return CourseInfo(name=course.name, category=course.category)


class SqlGradingPeriods:
    def __init__(self, db: Session):
        self.db = db

    def get_grading_period_time(
        self, period_index: str, period_key: Optional[str]
    ) -> PeriodInterval:
        query = self.db.query(GradingPeriod).filter(
            GradingPeriod.period_index == str(period_index)
        )
        if period_key:
            query = query.filter(GradingPeriod.period_key == period_key)

        period = query.order_by(GradingPeriod.id.asc()).first()
        if not period:
            raise GradingPeriodNotFoundError(period_index, period_key)
        return period_interval(period.start_date, period.end_date)
