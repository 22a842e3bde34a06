from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List

from calc_report.core.exceptions import ReportWriteError
from calc_report.models.operations import ResultEntry

logger = logging.getLogger("calc_report.reporter")


def _report_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def format_results(entries: Iterable[ResultEntry]) -> List[str]:
    return [entry.format_line() for entry in entries]


def write_results(entries: Iterable[ResultEntry], path: Path | str) -> Path:
    """
    Writes one ``<name>: <value>`` line per entry to ``path``.

    The report is written to a temporary file next to ``path`` and moved into place
    once complete, so a failed write leaves any previous report untouched.
    """
    path = Path(path)
    lines = format_results(entries)

    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="\n",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            for line in lines:
                handle.write(f"{line}\n")
        os.chmod(tmp_name, _report_mode(path))
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        logger.error("Failed to write results to %s: %s", path, exc)
        raise ReportWriteError(exc.strerror or str(exc), details={"path": str(path)}) from exc

    logger.info("Wrote %d results to %s", len(lines), path)
    return path
