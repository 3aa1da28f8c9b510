"""Exercise field configuration: a tagged union validated at the boundary"""
import json
import logging
from typing import Annotated, Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)


class _FieldBase(BaseModel):
    id: str
    label: str
    required: bool = False


class TextField(_FieldBase):
    type: Literal["text"]
    placeholder: Optional[str] = None


class TextareaField(_FieldBase):
    type: Literal["textarea"]
    placeholder: Optional[str] = None


class NumberField(_FieldBase):
    type: Literal["number"]
    min: Optional[float] = None
    max: Optional[float] = None


class ChoiceField(_FieldBase):
    type: Literal["select", "radio"]
    options: List[str] = []


class CheckboxField(_FieldBase):
    type: Literal["checkbox"]


class ChecklistField(_FieldBase):
    type: Literal["checklist"]
    options: List[str] = []


class RatingField(_FieldBase):
    type: Literal["rating"]
    scale: Optional[int] = None
    min: Optional[int] = None
    max: Optional[int] = None


ExerciseField = Annotated[
    Union[TextField, TextareaField, NumberField, ChoiceField, CheckboxField, ChecklistField, RatingField],
    Field(discriminator="type"),
]

ExerciseFieldGroups = Dict[str, List[ExerciseField]]

_field_adapter = TypeAdapter(ExerciseField)


def parse_exercise_fields(raw: Any, exercise_id: str) -> ExerciseFieldGroups:
    """
    Turn a stored `fields` value into validated field groups.

    `raw` may be a JSON string or an already-decoded object mapping group names
    to lists of field configs. A malformed or non-object value becomes `{}`.
    Fields with an unknown or invalid shape are dropped; the rest survive.
    """
    if raw is None:
        return {}

    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing fields for exercise {exercise_id}: {e}")
            return {}

    if not isinstance(raw, dict):
        logger.error(f"Fields for exercise {exercise_id} are not an object, got {type(raw).__name__}")
        return {}

    groups: ExerciseFieldGroups = {}
    for group_name, items in raw.items():
        if not isinstance(items, list):
            logger.warning(f"Skipping field group '{group_name}' of exercise {exercise_id}: not a list")
            continue

        fields = []
        for item in items:
            try:
                fields.append(_field_adapter.validate_python(item))
            except ValidationError as e:
                logger.warning(
                    f"Dropping invalid field in group '{group_name}' of exercise {exercise_id}: "
                    f"{e.error_count()} error(s)"
                )
        groups[group_name] = fields

    return groups
