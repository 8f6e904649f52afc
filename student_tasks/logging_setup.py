"""Logging configuration for the app and the demo script."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional


class _ThirdPartyFilter(logging.Filter):
    """Keep our own records, only warnings and worse from everyone else."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "student_tasks" or record.name.startswith("student_tasks."):
            return True
        if record.name == "__main__":
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str | int = logging.INFO, log_file: Optional[str | Path] = None) -> None:
    """Install console (and optional file) handlers on the root logger.

    Existing root handlers are replaced, so calling this again on a later
    Streamlit run does not duplicate output.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.addFilter(_ThirdPartyFilter())
    root.addHandler(ch)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
