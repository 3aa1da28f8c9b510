"""Export custom exceptions"""
from fastapi import HTTPException, status


class ExportUnavailableException(HTTPException):
    """Raised when the user's data cannot be gathered for export"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to load data for export"
        )
