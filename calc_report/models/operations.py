from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

UNARY_OPERATORS = frozenset({"sqrt"})


def _coerce_number(field_name: str, value: Any) -> float:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"The '{field_name}' field must be numeric, got {value!r}.")
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError as exc:
            raise ValueError(f"The '{field_name}' field is out of range.") from exc
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError as exc:
            raise ValueError(f"The '{field_name}' field must be numeric, got {value!r}.") from exc
    else:
        raise ValueError(f"The '{field_name}' field must be numeric, got {type(value).__name__}.")

    if not math.isfinite(number):
        raise ValueError(f"The '{field_name}' field must be a finite number, got {value!r}.")
    return number


class OperationRecord(BaseModel):
    name: str = Field(..., description="Key of the operation in the input document.")
    operator: str = Field(..., description="Operator name, e.g. add, sub, mul or sqrt.")
    value1: float = Field(..., description="First operand.")
    value2: float = Field(default=0.0, description="Second operand; 0 for unary operators.")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _check_fields(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values

        if "operator" not in values:
            raise ValueError("Missing 'operator' field in the operation.")
        if "value1" not in values:
            raise ValueError("Missing 'value1' field in the operation.")

        operator = values["operator"]
        if not isinstance(operator, str) or not operator.strip():
            raise ValueError("The 'operator' field is empty or contains invalid data.")

        values = dict(values)
        if operator in UNARY_OPERATORS:
            # value2 is meaningless for unary operators, whatever the input says.
            values["value2"] = 0.0
        elif "value2" not in values:
            raise ValueError(f"Missing 'value2' field in the operation for operator: {operator}")
        return values

    @field_validator("value1", "value2", mode="before")
    @classmethod
    def _coerce_operands(cls, value: Any, info) -> float:
        return _coerce_number(info.field_name, value)


class ResultEntry(BaseModel):
    name: str = Field(..., description="Name of the operation that produced the value.")
    value: float = Field(..., description="Computed result.")

    model_config = ConfigDict(frozen=True)

    def format_line(self) -> str:
        return f"{self.name}: {self.value:.2f}"
