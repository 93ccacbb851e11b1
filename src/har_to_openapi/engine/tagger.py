"""Tag assignment: group operations under the segment that follows the API root.

The API root is guessed as the most frequent path segment across all
templates, e.g. ``api`` for ``/api/users`` and ``/api/orders``.
"""

from collections import Counter

from .models import ApiModel

FALLBACK_TAG = "Misc"


def most_common_segment(templates: list[str]) -> str | None:
    """Most frequent non-empty segment. Ties go to the segment seen first."""
    counts = Counter(s for t in templates for s in t.split("/") if s)
    if not counts:
        return None
    # Counter keeps insertion order and most_common() sorts stably
    return counts.most_common(1)[0][0]


def compute_tags(templates: list[str]) -> dict[str, str]:
    """Map each template to its tag."""
    root = most_common_segment(templates)
    tags = {}
    for template in templates:
        segments = [s for s in template.split("/") if s]
        tag = FALLBACK_TAG
        if root in segments:
            pos = segments.index(root) + 1
            if pos < len(segments):
                tag = segments[pos]
        tags[template] = tag
    return tags


def assign_tags(model: ApiModel) -> None:
    """Give every method of a path the same single-element tag list."""
    tags = compute_tags(list(model.paths))
    for template, methods in model.paths.items():
        for operation in methods.values():
            operation.tags = [tags[template]]
