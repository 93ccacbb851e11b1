"""Segment classifier: does a path segment look like a record identifier?"""

import re
from typing import Literal, NamedTuple

UUID_RE = re.compile(r"[a-fA-F0-9]{8}-[a-fA-F0-9]{4}-[a-fA-F0-9]{4}-[a-fA-F0-9]{4}-[a-fA-F0-9]{12}")
INTEGER_RE = re.compile(r"\d+")
FLOAT_RE = re.compile(r"\d+(\.\d+)?")

SegmentKind = Literal["uuid", "integer", "float", "none"]


class Segment(NamedTuple):
    kind: SegmentKind
    value: str

    @property
    def is_dynamic(self) -> bool:
        return self.kind != "none"


def classify(segment: str) -> Segment:
    """Classify one path segment. Checks run uuid, integer, then float."""
    if UUID_RE.fullmatch(segment):
        return Segment("uuid", segment)
    if INTEGER_RE.fullmatch(segment):
        return Segment("integer", segment)
    if FLOAT_RE.fullmatch(segment):
        return Segment("float", segment)
    return Segment("none", segment)
