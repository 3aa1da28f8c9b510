from companion.exercises.repository import ExerciseResponseRepository
from companion.exercises.service import ExerciseService

__all__ = ["ExerciseResponseRepository", "ExerciseService"]
