"""Grading errors."""


class GradingError(ValueError):
    """Base class for submissions that cannot be graded."""


class NotGradableError(GradingError):
    def __init__(self, activity_type: str):
        super().__init__(f"Activity of type {activity_type} is not gradable")
        self.activity_type = activity_type


class UnsupportedActivityError(GradingError):
    def __init__(self, activity_type: str):
        super().__init__(f"Unsupported activity type for auto-grading: {activity_type}")
        self.activity_type = activity_type
