"""Rewards custom exceptions"""
from fastapi import HTTPException, status


class RewardsUnavailableException(HTTPException):
    """Raised when the points ledger or the activity it is evaluated against cannot be read"""
    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=message
        )
