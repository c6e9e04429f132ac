from typing import Any, Optional, Protocol

from app.schemas.course import CourseInfo
from app.schemas.grading_period import PeriodInterval

# {"classwork": [<raw assignment dict>, ...]}
StudentRecord = dict[str, Any]


class ClassworkStore(Protocol):
    def get_student(self, student_id: str) -> Optional[StudentRecord]:
        ...


class CourseLookup(Protocol):
    def get_course(self, course_id: str) -> CourseInfo:
        ...


class GradingPeriodProvider(Protocol):
    def get_grading_period_time(
        self, period_index: str, period_key: Optional[str]
    ) -> PeriodInterval:
        ...
