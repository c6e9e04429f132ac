from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, selectinload

from app.core.deps import get_db
from app.models.course import Course
from app.schemas.course import CourseRead

router = APIRouter()


@router.get("/{course_id}", response_model=CourseRead)
def get_course(
    course_id: str,
    db: Session = Depends(get_db),
):
    course = (
        db.query(Course)
        .options(selectinload(Course.categories))
        .filter(Course.id == course_id)
        .first()
    )
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    return course
