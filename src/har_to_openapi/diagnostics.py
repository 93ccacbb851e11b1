"""Logging setup and the diagnostic sink for skipped entries and fields.

Engine stages never log directly. Recoverable problems are reported to a
``Diagnostics`` instance, which keeps them for the caller and mirrors them to
the ``har_to_openapi`` logger.
"""

import logging

from pydantic import BaseModel

LOGGER_NAME = "har_to_openapi"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the package logger with a single stderr handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


class Issue(BaseModel):
    """A recovered problem with one entry of one capture."""

    source: str
    entry_index: int
    stage: str  # entry / url / request_body / response_body
    message: str


class Diagnostics:
    """Collects issues raised while folding entries into the document."""

    def __init__(self, logger: logging.Logger | None = None):
        self.issues: list[Issue] = []
        self.logger = logger or get_logger("engine")

    def record(self, source: str, entry_index: int, stage: str, message: str) -> None:
        issue = Issue(source=source, entry_index=entry_index, stage=stage, message=message)
        self.issues.append(issue)
        self.logger.warning("%s entry %d (%s): %s", source, entry_index, stage, message)

    def count_by_stage(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for issue in self.issues:
            counts[issue.stage] = counts.get(issue.stage, 0) + 1
        return counts

    def __len__(self) -> int:
        return len(self.issues)
