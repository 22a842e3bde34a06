from __future__ import annotations

import logging
from typing import Any, List

from calc_report.core.exceptions import InvalidInputError
from calc_report.models.operations import ResultEntry
from calc_report.services.calculator import CalculatorService
from calc_report.services.parser import parse_operation

logger = logging.getLogger("calc_report.processor")


def process_operations(data: Any, calculator: CalculatorService | None = None) -> List[ResultEntry]:
    """
    Parses and evaluates every named operation in ``data`` and returns the results
    sorted ascending by value. The first invalid entry aborts the whole batch.
    """
    if not isinstance(data, dict):
        raise InvalidInputError("The JSON document must be an object of named operations.")
    if not data:
        raise InvalidInputError("The JSON object is empty.")

    calculator = calculator or CalculatorService()
    results: list[ResultEntry] = []
    for name, content in data.items():
        record = parse_operation(name, content)
        entry = calculator.evaluate_record(record)
        logger.debug("Evaluated %s %s -> %s", record.name, record.operator, entry.value)
        results.append(entry)

    # sorted() is stable, so equal values keep their input order.
    return sorted(results, key=lambda entry: entry.value)
