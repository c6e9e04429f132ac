from pydantic import BaseModel


class PeriodInterval(BaseModel):
    # inclusive epoch milliseconds
    start: float
    end: float
