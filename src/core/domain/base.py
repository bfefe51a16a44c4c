"""
Base - shared behaviour of the core value objects

Immutable Pydantic models whose construction errors are reported as
InvalidParameter (field taken from the first failing location), so callers
of the core only ever handle one error type.
"""

from typing import Any, Final

from pydantic import BaseModel, ValidationError

from src.core.errors import InvalidParameter

_VALUE_ERROR_PREFIX: Final[str] = "Value error, "


def to_invalid_parameter(error: ValidationError) -> InvalidParameter:
    """Convert the first error of a pydantic ValidationError."""
    first = error.errors()[0]
    loc = first.get("loc") or (error.title,)
    reason = first["msg"]
    if reason.startswith(_VALUE_ERROR_PREFIX):
        reason = reason[len(_VALUE_ERROR_PREFIX):]
    return InvalidParameter(str(loc[0]), reason)


class DomainModel(BaseModel):
    """
    Frozen value object.

    Construction and model_validate raise InvalidParameter. Assigning to a
    field of an existing instance still raises pydantic's ValidationError.
    """

    model_config = {"frozen": True}

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise to_invalid_parameter(e) from e

    @classmethod
    def model_validate(cls, *args: Any, **kwargs: Any):
        try:
            return super().model_validate(*args, **kwargs)
        except ValidationError as e:
            raise to_invalid_parameter(e) from e
