"""HAR capture loader.

Reads capture files from disk and hands the engine parsed ``Capture``
objects. Any failure here is fatal for the capture being loaded.
"""

import json
from pathlib import Path

from .base import Capture


class CaptureLoadError(Exception):
    """Raised when a capture file cannot be read or is not a HAR document."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def load_capture(file_path: Path) -> Capture:
    """Load a single HAR file into a Capture."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise CaptureLoadError(file_path, f"cannot read file ({e.strerror})") from e
    except UnicodeDecodeError as e:
        raise CaptureLoadError(file_path, f"not UTF-8 text (byte {e.start})") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CaptureLoadError(file_path, f"invalid JSON (line {e.lineno})") from e

    return capture_from_dict(data, source=str(file_path))


def load_captures(paths: Path | list[Path]) -> list[Capture]:
    """Load one or more HAR files. The first failing file aborts the load."""
    if isinstance(paths, Path):
        paths = [paths]
    return [load_capture(p) for p in paths]


def capture_from_dict(data: dict, source: str = "<memory>") -> Capture:
    """Build a Capture from an already parsed ``{log: {entries: [...]}}`` object."""
    log = data.get("log") if isinstance(data, dict) else None
    if not isinstance(log, dict) or not isinstance(log.get("entries"), list):
        raise CaptureLoadError(Path(source), "missing log.entries")
    return Capture(source=source, entries=log["entries"])
