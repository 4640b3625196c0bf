"""
Pydantic schemas for person payloads.

Create and replace requests share one schema: a required non‑empty
``name`` string, a required numeric ``age`` and a required list of
``hobbies`` strings.  ``validate_person`` runs the schema and returns a
``ValidationResult`` instead of raising, with one human‑readable
message per violated rule, e.g. ``"age" must be a number``.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator
from pydantic_core import PydanticCustomError

# pydantic error type -> message suffix, appended to the quoted field path.
_ERROR_MESSAGES = {
    "missing": "is required",
    "string_type": "must be a string",
    "string_too_short": "is not allowed to be empty",
    "number_type": "must be a number",
    "finite_number": "must be a finite number",
    "list_type": "must be an array",
    "model_type": "must be of type object",
    "model_attributes_type": "must be of type object",
    "dict_type": "must be of type object",
    "extra_forbidden": "is not allowed",
}


class PersonPayload(BaseModel):
    """Schema for creating or replacing a person.

    Fields outside the schema are accepted and kept by the caller.
    """

    model_config = ConfigDict(extra="allow")

    name: StrictStr = Field(..., min_length=1, examples=["Sam"])
    age: float = Field(..., examples=[26])
    hobbies: List[StrictStr] = Field(..., examples=[["chess", "hiking"]])

    @field_validator("age", mode="before")
    @classmethod
    def age_must_be_number(cls, value: Any) -> Any:
        # Numeric strings and booleans would otherwise be coerced.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PydanticCustomError("number_type", "Input should be a number")
        if isinstance(value, float) and not math.isfinite(value):
            raise PydanticCustomError("finite_number", "Input should be a finite number")
        return value


class StrictPersonPayload(PersonPayload):
    """Same as ``PersonPayload`` but rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


@dataclass
class ValidationResult:
    """Outcome of validating a person payload.

    ``data`` holds the payload as a plain dict when ``ok`` is true.
    ``errors`` lists the violated rules in schema order.
    """

    ok: bool
    errors: List[str] = field(default_factory=list)
    data: Optional[Dict[str, Any]] = None

    @property
    def message(self) -> Optional[str]:
        """The first violated rule, or ``None`` for a valid payload."""
        return self.errors[0] if self.errors else None


def _label(loc: Sequence[Union[str, int]]) -> str:
    """Render an error location as a field path like ``hobbies[0]``."""
    if not loc:
        return "value"
    label = str(loc[0])
    for part in loc[1:]:
        label += f"[{part}]" if isinstance(part, int) else f".{part}"
    return label


def _describe(error: Dict[str, Any]) -> str:
    label = _label(error.get("loc", ()))
    suffix = _ERROR_MESSAGES.get(error.get("type", ""), "is invalid")
    return f'"{label}" {suffix}'


def validate_person(payload: Any, allow_unknown_fields: bool = True) -> ValidationResult:
    """Validate a create/replace payload against the person schema.

    A missing body (``None``) is treated as an empty object, so it
    fails on the first required field rather than on its type.
    """
    if payload is None:
        payload = {}
    schema = PersonPayload if allow_unknown_fields else StrictPersonPayload
    try:
        schema.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(ok=False, errors=[_describe(error) for error in exc.errors()])
    return ValidationResult(ok=True, data=dict(payload))
