"""
Read-only stores backed by JSON documents.

File layouts:

classwork.json        {"<student id>": {"classwork": [<raw assignment>, ...]}}
courses.json          {"<course id>": {"name": str, "category": {"<name>": weight}}}
grading_periods.json  {"<period key>": [{"index": str, "start": date, "end": date}, ...]}
"""
import json
from pathlib import Path
from typing import Any, Mapping, Optional

from app.core.errors import CourseNotFoundError, GradingPeriodNotFoundError
from app.repositories.base import StudentRecord
from app.schemas.course import CourseInfo
from app.schemas.grading_period import PeriodInterval
from app.services.dates import period_interval


def load_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class JsonClassworkStore:
    def __init__(self, data: Mapping[str, StudentRecord]):
        self._data = data

    @classmethod
    def from_file(cls, path: Path) -> "JsonClassworkStore":
        return cls(load_json(path))

    def get_student(self, student_id: str) -> Optional[StudentRecord]:
        return self._data.get(student_id)


class JsonCourseLookup:
    def __init__(self, data: Mapping[str, Mapping[str, Any]]):
        self._data = data

    @classmethod
    def from_file(cls, path: Path) -> "JsonCourseLookup":
        return cls(load_json(path))

    def get_course(self, course_id: str) -> CourseInfo:
        course = self._data.get(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        return CourseInfo(name=course["name"], category=course.get("category", {}))


class JsonGradingPeriods:
    def __init__(self, data: Mapping[str, list[Mapping[str, str]]]):
        self._data = data

    @classmethod
    def from_file(cls, path: Path) -> "JsonGradingPeriods":
        return cls(load_json(path))

    def get_grading_period_time(
        self, period_index: str, period_key: Optional[str]
    ) -> PeriodInterval:
        # without a key, search every period set in file order
        keys = [period_key] if period_key else list(self._data)

        for key in keys:
            for period in self._data.get(key, []):
                if str(period["index"]) == str(period_index):
                    return period_interval(period["start"], period["end"])
        raise GradingPeriodNotFoundError(period_index, period_key)
