"""
Source path breadcrumbs.
"""

from __future__ import annotations

import os
import re

BREADCRUMB_SEPARATOR = " > "

_SPLIT_PATTERN = re.compile("|".join(re.escape(sep) for sep in {os.sep, os.altsep or os.sep}))


def path_segments(raw_path: str) -> list[str]:
    """Split a path on the platform separators, dropping empty segments."""
    return [segment for segment in _SPLIT_PATTERN.split(raw_path) if segment]


def breadcrumb(raw_path: str, root_marker: str) -> str:
    """Shorten ``raw_path`` to the part starting at the innermost ``root_marker`` directory.

    Args:
        raw_path: Absolute or relative source file path.
        root_marker: Directory name that marks the project root.

    Returns:
        The remaining segments joined with ``" > "``. When the marker is
        missing every segment is kept.
    """
    segments = path_segments(raw_path)
    for index in range(len(segments) - 1, -1, -1):
        if segments[index] == root_marker:
            segments = segments[index:]
            break
    return BREADCRUMB_SEPARATOR.join(segments)


def leaf_name(raw_path: str) -> str:
    segments = path_segments(raw_path)
    return segments[-1] if segments else raw_path
