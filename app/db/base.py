from app.db.base_class import Base

# import models so SQLAlchemy registers them
from app.models import classwork, course, grading_period  # noqa: F401
