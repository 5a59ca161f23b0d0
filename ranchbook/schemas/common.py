from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ranchbook.core.dates import to_naive_utc
from ranchbook.core.errors import ValidationFailed

UtcDateTime = Annotated[datetime, AfterValidator(to_naive_utc)]
Money = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]
SmallMoney = Annotated[Decimal, Field(ge=0, max_digits=8, decimal_places=2)]
Quantity = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]


def blank_to_none(value: Any):
    if isinstance(value, str):
        cleaned = value.strip()
        return None if cleaned == "" else cleaned
    return value


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class InputModel(ApiModel):
    """Request body; blank strings arrive as "absent value" (None)."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def clean_blank_strings(cls, values):
        if isinstance(values, dict):
            return {key: blank_to_none(value) for key, value in values.items()}
        return values


class UpdateModel(InputModel):
    """Partial update body.

    Field states: not sent (left untouched), sent as null or "" (cleared),
    sent with a value (set). Clearing a column that must hold a value is
    rejected.
    """

    required_fields: ClassVar[frozenset] = frozenset()

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        cleared = sorted(
            to_camel(name)
            for name in self.required_fields
            if name in data and data[name] is None
        )
        if cleared:
            raise ValidationFailed(
                "Required fields cannot be cleared",
                error=", ".join(cleared),
            )
        return data


class MessageResponse(BaseModel):
    message: str


__all__ = [
    "ApiModel",
    "InputModel",
    "MessageResponse",
    "Money",
    "Quantity",
    "SmallMoney",
    "UpdateModel",
    "UtcDateTime",
    "blank_to_none",
]
