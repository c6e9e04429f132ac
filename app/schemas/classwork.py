from typing import Optional, Union

from pydantic import BaseModel, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class RawAssignment(BaseModel):
    course: str
    date_assign: str = ""
    date_due: str = ""
    assignment: str = ""
    category: str = ""
    score: Union[str, int, float] = ""
    comment: str = ""

    @field_validator("score", mode="before")
    @classmethod
    def _normalize_score(cls, v):
        # null is ungraded, booleans count as 1/0
        if v is None:
            return ""
        if isinstance(v, bool):
            return int(v)
        return v

    @field_validator("comment", mode="before")
    @classmethod
    def _null_comment(cls, v):
        return "" if v is None else v

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"


class _ScoredModel(BaseModel):
    """Shared wire handling for scores: ungraded is None here and "" on the wire."""

    @field_validator("score", mode="before", check_fields=False)
    @classmethod
    def _blank_is_ungraded(cls, v):
        if v == "":
            return None
        return v

    @field_serializer("score", check_fields=False)
    def _ungraded_is_blank(self, v: Optional[float]):
        return "" if v is None else v

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class EnrichedAssignment(_ScoredModel):
    due: str
    due_ms: float
    assigned: str
    course_id: str
    course_name: str
    assignment: str
    category: str
    score: Optional[float] = None
    cat_weight: float
    comment: str = ""

    @property
    def is_graded(self) -> bool:
        return self.score is not None


class CourseGroupEntry(_ScoredModel):
    due: str
    due_ms: float
    course_name: str
    assignment: str
    score: Optional[float] = None


class AlertEntry(_ScoredModel):
    date: str
    course: str
    assignment: str
    score: Optional[float] = None
    comment: str
