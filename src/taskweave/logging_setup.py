# SPDX-License-Identifier: MIT

import logging
import sys
from pathlib import Path
from typing import Optional


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable:
    - taskweave logs pass at the configured level
    - third-party loggers only at ERROR and above
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "taskweave" or record.name.startswith("taskweave."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    console_level: int | str = logging.WARNING,
    log_file: Optional[Path] = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler on stderr, so table output on stdout stays clean
    - Optional file handler with everything at DEBUG

    Call this once, before the first log call.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
