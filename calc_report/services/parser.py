from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from calc_report.core.exceptions import InvalidInputError
from calc_report.models.operations import OperationRecord


def _first_error_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    error = errors[0]
    original = (error.get("ctx") or {}).get("error")
    if original is not None:
        return str(original)
    return error["msg"]


def parse_operation(name: str, content: Any) -> OperationRecord:
    if not isinstance(content, dict):
        raise InvalidInputError(f"Invalid data in operation '{name}'.", details={"operation": name})

    try:
        return OperationRecord.model_validate({**content, "name": name})
    except ValidationError as exc:
        raise InvalidInputError(_first_error_message(exc), details={"operation": name}) from exc
