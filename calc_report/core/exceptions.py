from __future__ import annotations

from typing import Any


class AppError(Exception):
    error_type: str = "APP_ERROR"
    console_prefix: str = "Error"
    exit_code: int = 1

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def console_message(self) -> str:
        return f"{self.console_prefix}: {self.message}"


class NotFoundError(AppError):
    error_type = "NOT_FOUND"


class InvalidInputError(AppError):
    error_type = "INVALID_INPUT"
    console_prefix = "Invalid argument"


class ReportWriteError(AppError):
    error_type = "IO_ERROR"
    console_prefix = "Error writing to file"
    exit_code = 3
