import logging
import math
import re
from typing import Any, Optional

from app.core.config import (
    ALL_PERIODS_INDEX,
    LOW_SCORE_THRESHOLD,
    MISSING_WORK_MARK,
    MISSING_WORK_PREFIX,
    STUDENT_ID_PATTERN,
)
from app.core.errors import CategoryResolutionError
from app.repositories.base import ClassworkStore, CourseLookup, GradingPeriodProvider
from app.schemas.classwork import AlertEntry, CourseGroupEntry, EnrichedAssignment, RawAssignment
from app.services.dates import to_epoch_ms

logger = logging.getLogger(__name__)

_student_id_re = re.compile(STUDENT_ID_PATTERN)

# numeric text accepted by JS unary +; no underscores, no "inf"/"nan"
_decimal_re = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_infinity_re = re.compile(r"[+-]?Infinity")
_radix_re = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def is_valid_student_id(student_id: Any) -> bool:
    return isinstance(student_id, str) and _student_id_re.fullmatch(student_id) is not None


def coerce_score(value: Any) -> Optional[float]:
    """
    Final score coercion:
    - "" -> None (ungraded)
    - numbers pass through as float
    - blank text -> 0.0
    - decimal, exponent, "Infinity" and 0x/0o/0b text -> float
    - anything else -> NaN
    """
    if value == "":
        return None
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return _text_to_number(value.strip())
    return math.nan


def _text_to_number(text: str) -> float:
    if not text:
        return 0.0
    if _decimal_re.fullmatch(text):
        return float(text)
    if _infinity_re.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    if _radix_re.fullmatch(text):
        return float(int(text, 0))
    return math.nan


def is_low_score(score: Optional[float]) -> bool:
    # ungraded never counts as low
    return score is not None and score < LOW_SCORE_THRESHOLD


class ClassworkService:
    """Student classwork views: raw -> enriched -> period filtered -> aggregated."""

    def __init__(
        self,
        store: ClassworkStore,
        courses: CourseLookup,
        periods: GradingPeriodProvider,
    ):
        self.store = store
        self.courses = courses
        self.periods = periods

    def get_raw(self, student_id: Any) -> list[RawAssignment]:
        """Raw classwork for the most recent year, [] for unknown or malformed ids."""
        if not is_valid_student_id(student_id):
            return []

        record = self.store.get_student(student_id)
        if record is None:
            return []

        rows = record.get("classwork") or []
        result: list[RawAssignment] = []
        for row in rows:
            if isinstance(row, RawAssignment):
                result.append(row)
            else:
                result.append(RawAssignment.model_validate(row))
        return result

    def enrich_all(self, student_id: Any) -> list[EnrichedAssignment]:
        """
        Enriched classwork in original order.

        Raises CategoryResolutionError when an assignment's category has no
        weight in its course. No partial result is returned in that case.
        """
        if not is_valid_student_id(student_id):
            return []

        return [self._enrich(work) for work in self.get_raw(student_id)]

    def _enrich(self, work: RawAssignment) -> EnrichedAssignment:
        course_id = work.course[:9].strip()

        # 'M' won't calculate, so it becomes a zero with a note
        if work.score == MISSING_WORK_MARK:
            score, comment = 0, f"{MISSING_WORK_PREFIX}{work.comment}"
        else:
            score, comment = work.score, work.comment

        course = self.courses.get_course(course_id)
        cat_weight = course.category.get(work.category)

        if cat_weight is None:
            logger.error(
                "Category showed up in classwork, but is not a course category: %s - %s",
                course_id,
                work.category,
            )
            raise CategoryResolutionError(course_id, work.category)

        return EnrichedAssignment(
            due=work.date_due,
            due_ms=to_epoch_ms(work.date_due),
            assigned=work.date_assign,
            course_id=course_id,
            course_name=course.name,
            assignment=work.assignment,
            category=work.category,
            score=coerce_score(score),
            cat_weight=cat_weight,
            comment=comment.strip(),
        )

    def for_period(
        self, student_id: Any, period_index: str, period_key: Optional[str] = None
    ) -> list[EnrichedAssignment]:
        # period "0" requests every record
        if period_index == ALL_PERIODS_INDEX:
            return self.enrich_all(student_id)

        all_work = self.enrich_all(student_id)
        if not all_work:
            return []

        interval = self.periods.get_grading_period_time(period_index, period_key)
        return [w for w in all_work if interval.start <= w.due_ms <= interval.end]

    def scored_for_period(
        self, student_id: Any, period_index: str, period_key: Optional[str] = None
    ) -> list[EnrichedAssignment]:
        return [w for w in self.for_period(student_id, period_index, period_key) if w.is_graded]

    def by_course(
        self, student_id: Any, period_index: str, period_key: Optional[str] = None
    ) -> dict[str, list[CourseGroupEntry]]:
        grouped: dict[str, list[CourseGroupEntry]] = {}

        for work in self.scored_for_period(student_id, period_index, period_key):
            grouped.setdefault(work.course_id, []).append(
                CourseGroupEntry(
                    due=work.due,
                    due_ms=work.due_ms,
                    course_name=work.course_name,
                    assignment=work.assignment,
                    score=work.score,
                )
            )

        return grouped

    def alerts(
        self, student_id: Any, period_index: str, period_key: Optional[str] = None
    ) -> list[AlertEntry]:
        """Low scores and teacher comments, ungraded work included."""
        return [
            AlertEntry(
                date=work.due,
                course=work.course_name,
                assignment=work.assignment,
                score=work.score,
                comment=work.comment,
            )
            for work in self.for_period(student_id, period_index, period_key)
            if work.comment != "" or is_low_score(work.score)
        ]
