import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.errors import (
    CategoryResolutionError,
    CourseNotFoundError,
    GradingPeriodNotFoundError,
)

logger = logging.getLogger(__name__)


async def category_resolution_handler(request: Request, exc: CategoryResolutionError):
    # bad source data, not a client error
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": str(exc),
            "course_id": exc.course_id,
            "category": exc.category,
        },
    )


async def course_not_found_handler(request: Request, exc: CourseNotFoundError):
    logger.error("Classwork references unknown course %s", exc.course_id)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc), "course_id": exc.course_id},
    )


async def grading_period_not_found_handler(request: Request, exc: GradingPeriodNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Grading period not found"},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CategoryResolutionError, category_resolution_handler)
    app.add_exception_handler(CourseNotFoundError, course_not_found_handler)
    app.add_exception_handler(GradingPeriodNotFoundError, grading_period_not_found_handler)
