"""Ratings custom exceptions"""
from uuid import UUID
from fastapi import HTTPException, status


class FeedbackNotFoundException(HTTPException):
    """Raised when feedback is not found"""
    def __init__(self, feedback_id: UUID):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Feedback with id {feedback_id} not found"
        )


class RatingsWriteFailedException(HTTPException):
    """Raised when a rating, feedback or story could not be stored"""
    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=message
        )


class RatingsUnavailableException(HTTPException):
    """Raised when ratings cannot be read from the database"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to load ratings"
        )
