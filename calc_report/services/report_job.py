from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from calc_report.core.config import AppSettings, get_settings
from calc_report.core.exceptions import AppError
from calc_report.models.operations import ResultEntry
from calc_report.services.calculator import CalculatorService
from calc_report.services.loader import load_operations
from calc_report.services.processor import process_operations
from calc_report.services.reporter import write_results

logger = logging.getLogger("calc_report.job")


@dataclass
class ReportJob:
    input_path: Path
    output_path: Path
    calculator: CalculatorService = field(default_factory=CalculatorService)

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "ReportJob":
        settings = settings or get_settings()
        return cls(input_path=Path(settings.input_path), output_path=Path(settings.output_path))

    def run(self) -> List[ResultEntry]:
        """Load, evaluate, sort and write the report. Nothing is written if any step before the write fails."""
        start_time = time.perf_counter()
        extra = {"run_id": uuid.uuid4().hex, "input_path": str(self.input_path), "output_path": str(self.output_path)}
        logger.info("report.start", extra=extra)

        try:
            data = load_operations(self.input_path)
            results = process_operations(data, self.calculator)
            write_results(results, self.output_path)

            duration_ms = (time.perf_counter() - start_time) * 1000
            extra.update({"operations": len(results), "duration_ms": round(duration_ms, 2)})
            logger.info("report.end", extra=extra)
            return results
        except AppError as exc:
            extra.update({"error_type": exc.error_type, **exc.details})
            logger.warning("report.failed", extra=extra)
            raise
