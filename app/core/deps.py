from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.repositories.sql_store import SqlClassworkStore, SqlCourseLookup, SqlGradingPeriods
from app.services.classwork import ClassworkService


# every request that needs DB will get a fresh session, and it will always close.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_classwork_service(db: Session = Depends(get_db)) -> ClassworkService:
    return ClassworkService(
        store=SqlClassworkStore(db),
        courses=SqlCourseLookup(db),
        periods=SqlGradingPeriods(db),
    )
