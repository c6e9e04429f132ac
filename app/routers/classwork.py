from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.deps import get_classwork_service
from app.schemas.classwork import AlertEntry, CourseGroupEntry, EnrichedAssignment, RawAssignment
from app.services.classwork import ClassworkService

router = APIRouter()

# Unknown or malformed student ids are not errors: every route answers with
# an empty list (or object) instead of a 404.


@router.get("/{student_id}/classwork", response_model=list[EnrichedAssignment])
def student_classwork(
    student_id: str,
    service: ClassworkService = Depends(get_classwork_service),
):
    return service.enrich_all(student_id)


@router.get("/{student_id}/classwork/raw", response_model=list[RawAssignment])
def student_classwork_raw(
    student_id: str,
    service: ClassworkService = Depends(get_classwork_service),
):
    return service.get_raw(student_id)


@router.get(
    "/{student_id}/classwork/periods/{period_index}",
    response_model=list[EnrichedAssignment],
)
def student_classwork_for_period(
    student_id: str,
    period_index: str,
    key: Optional[str] = Query(default=None, description="Grading period key"),
    service: ClassworkService = Depends(get_classwork_service),
):
    return service.for_period(student_id, period_index, key)


@router.get(
    "/{student_id}/classwork/periods/{period_index}/scored",
    response_model=list[EnrichedAssignment],
)
def student_scored_classwork_for_period(
    student_id: str,
    period_index: str,
    key: Optional[str] = Query(default=None, description="Grading period key"),
    service: ClassworkService = Depends(get_classwork_service),
):
    return service.scored_for_period(student_id, period_index, key)


@router.get(
    "/{student_id}/classwork/periods/{period_index}/by-course",
    response_model=dict[str, list[CourseGroupEntry]],
)
def student_classwork_by_course(
    student_id: str,
    period_index: str,
    key: Optional[str] = Query(default=None, description="Grading period key"),
    service: ClassworkService = Depends(get_classwork_service),
):
    return service.by_course(student_id, period_index, key)


@router.get(
    "/{student_id}/classwork/periods/{period_index}/alerts",
    response_model=list[AlertEntry],
)
def student_classwork_alerts(
    student_id: str,
    period_index: str,
    key: Optional[str] = Query(default=None, description="Grading period key"),
    service: ClassworkService = Depends(get_classwork_service),
):
    return service.alerts(student_id, period_index, key)
