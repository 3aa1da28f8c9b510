"""Content custom exceptions"""
from fastapi import HTTPException, status


class ExerciseNotFoundException(HTTPException):
    """Raised when an exercise exists in neither the remote table nor the bundled content"""
    def __init__(self, exercise_id: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Exercise {exercise_id} not found"
        )


class LibraryPromptNotFoundException(HTTPException):
    """Raised when a prompt id is not part of the prompt library"""
    def __init__(self, prompt_id: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Prompt {prompt_id} not found"
        )


class SavePromptFailedException(HTTPException):
    """Raised when saving a prompt to the user's library fails"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to save prompt"
        )


class SavedPromptsUnavailableException(HTTPException):
    """Raised when the user's saved prompts cannot be loaded"""
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to load saved prompts"
        )
