class ClassworkError(Exception):
    """Base class for classwork data errors."""


class CategoryResolutionError(ClassworkError):
    """An assignment uses a category that has no weight in its course."""

    def __init__(self, course_id: str, category: str):
        self.course_id = course_id
        self.category = category
        super().__init__(
            f"Category showed up in classwork, but is not a course category: "
            f"{course_id} - {category}"
        )


class CourseNotFoundError(ClassworkError):
    def __init__(self, course_id: str):
        self.course_id = course_id
        super().__init__(f"Course not found: {course_id}")


class GradingPeriodNotFoundError(ClassworkError):
    def __init__(self, period_index: str, period_key: str | None):
        self.period_index = period_index
        self.period_key = period_key
        super().__init__(f"Grading period not found: index={period_index} key={period_key}")
