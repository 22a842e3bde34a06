from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from calc_report.core.exceptions import InvalidInputError, NotFoundError

logger = logging.getLogger("calc_report.loader")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name}")


def load_operations(path: Path | str) -> dict[str, Any]:
    """Read ``path`` and return the top-level JSON object of named operations."""
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(f"File not found: {path}")

    try:
        with path.open("r", encoding="utf-8-sig") as handle:
            raw = handle.read().strip()
    except UnicodeDecodeError as exc:
        raise InvalidInputError("The file could not be decoded as UTF-8") from exc
    except OSError as exc:
        raise InvalidInputError(f"The file could not be read: {exc.strerror or exc}") from exc

    if not raw:
        raise InvalidInputError("The file has no content")

    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise InvalidInputError("The JSON document is nested too deeply") from exc
    except ValueError as exc:
        raise InvalidInputError("The file contains invalid JSON", details={"reason": str(exc)}) from exc

    if not isinstance(payload, dict):
        raise InvalidInputError("The JSON document must be an object of named operations.")

    logger.info("Loaded %d operations from %s", len(payload), path)
    return payload
