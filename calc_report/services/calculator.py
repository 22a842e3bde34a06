from __future__ import annotations

import math
import operator
from typing import Callable

from calc_report.core.exceptions import InvalidInputError
from calc_report.models.operations import OperationRecord, ResultEntry


class CalculatorError(InvalidInputError):
    error_type = "CALCULATOR_ERROR"


def _sqrt(value1: float, _value2: float) -> float:
    if value1 < 0:
        raise CalculatorError(f"Cannot compute square root of negative number: {value1:g}")
    return math.sqrt(value1)


class CalculatorService:
    _OPERATORS: dict[str, Callable[[float, float], float]] = {
        "add": operator.add,
        "sub": operator.sub,
        "mul": operator.mul,
        "sqrt": _sqrt,
    }

    @property
    def supported_operators(self) -> tuple[str, ...]:
        return tuple(self._OPERATORS)

    def evaluate(self, operator_name: str, value1: float, value2: float = 0.0) -> float:
        operator_fn = self._OPERATORS.get(operator_name)
        if operator_fn is None:
            raise CalculatorError(f"Unsupported operation type: {operator_name}")
        return float(operator_fn(value1, value2))

    def evaluate_record(self, record: OperationRecord) -> ResultEntry:
        try:
            value = self.evaluate(record.operator, record.value1, record.value2)
        except CalculatorError as exc:
            exc.details.setdefault("operation", record.name)
            raise
        return ResultEntry(name=record.name, value=value)
