import logging
from pathlib import Path

from sqlalchemy.orm import Session

from app.core.config import SEED_DATA_DIR
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models.classwork import ClassworkRecord
from app.models.course import Course, CourseCategory
from app.models.grading_period import GradingPeriod
from app.repositories.json_store import load_json
from app.services.dates import parse_date

logger = logging.getLogger(__name__)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_db(db, SEED_DATA_DIR)
    finally:
        db.close()


def seed_db(db: Session, data_dir: Path) -> None:
    """Load the JSON exports into empty tables. Tables that already have rows are left alone."""
    data_dir = Path(data_dir)

    if db.query(Course).first() is None and (data_dir / "courses.json").exists():
        courses = load_json(data_dir / "courses.json")
        for course_id, course in courses.items():
            db.add(
                Course(
                    id=course_id,
                    name=course["name"],
                    categories=[
                        CourseCategory(name=name, weight=weight)
                        for name, weight in course.get("category", {}).items()
                    ],
                )
            )
        logger.info("Seeded %d courses", len(courses))

    if db.query(GradingPeriod).first() is None and (data_dir / "grading_periods.json").exists():
        periods = load_json(data_dir / "grading_periods.json")
        count = 0
        for period_key, rows in periods.items():
            for row in rows:
                db.add(
                    GradingPeriod(
                        period_key=period_key,
                        period_index=str(row["index"]),
                        start_date=parse_date(row["start"]).date(),
                        end_date=parse_date(row["end"]).date(),
                    )
                )
                count += 1
        logger.info("Seeded %d grading periods", count)

    if db.query(ClassworkRecord).first() is None and (data_dir / "classwork.json").exists():
        students = load_json(data_dir / "classwork.json")
        for student_id, record in students.items():
            for position, work in enumerate(record.get("classwork", [])):
                db.add(
                    ClassworkRecord(
                        student_id=student_id,
                        position=position,
                        course=work["course"],
                        date_assign=work.get("dateAssign", ""),
                        date_due=work.get("dateDue", ""),
                        assignment=work.get("assignment", ""),
                        category=work.get("category", ""),
                        score=score_text(work.get("score")),
                        comment=work.get("comment") or "",
                    )
                )
        logger.info("Seeded classwork for %d students", len(students))

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


def score_text(value) -> str:
    """Score as stored in the classwork table: null -> "", true/false -> "1"/"0"."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(int(value))
    return str(value)
