import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# DEV default is a local SQLite file; deployments set CLASSWORK_DATABASE_URL.
DATABASE_URL = os.getenv("CLASSWORK_DATABASE_URL", f"sqlite:///{BASE_DIR}/classwork.db")

# JSON files used to seed an empty database
SEED_DATA_DIR = Path(os.getenv("CLASSWORK_SEED_DIR", BASE_DIR / "data"))

# Student ids are exactly six ASCII digits
STUDENT_ID_PATTERN = r"[0-9]{6}"

# Grading period index "0" means every period
ALL_PERIODS_INDEX = "0"

# Missing work policy
MISSING_WORK_MARK = "M"
MISSING_WORK_PREFIX = "[missing work] "

# Alerts
LOW_SCORE_THRESHOLD = 70
