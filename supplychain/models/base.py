from decimal import Decimal
from typing import Annotated, Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict, PlainSerializer, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

# Numeric columns (currency, percentages). Accepts numbers or numeric strings,
# emitted as JSON numbers.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ApiModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PartialUpdate(ApiModel):
    """
    Body of a PUT: any subset of the insert fields.

    Only keys the client actually sent are applied. Sending ``null`` is
    accepted for fields listed in ``nullable_fields`` and rejected otherwise.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*")
    @classmethod
    def _reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name not in cls.nullable_fields:
            raise ValueError("may not be null")
        return value

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
