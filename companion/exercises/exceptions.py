"""Exercise response custom exceptions"""
from fastapi import HTTPException, status


class ExerciseResponseFailedException(HTTPException):
    """Raised when an exercise response could not be stored"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to save response"
        )


class ExerciseResponsesUnavailableException(HTTPException):
    """Raised when the user's exercise responses cannot be loaded"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to load responses"
        )
