from pydantic import BaseModel, Field


class CourseInfo(BaseModel):
    name: str
    category: dict[str, float] = Field(default_factory=dict)


class CourseRead(BaseModel):
    id: str
    name: str
    category: dict[str, float]

    class Config:
        from_attributes = True
