"""Goals custom exceptions"""
from fastapi import HTTPException, status


class GoalsUnavailableException(HTTPException):
    """Raised when goals cannot be read or written"""
    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=message
        )
