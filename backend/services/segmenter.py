"""
Segmenter - Split a mixed buffer into same-dialect runs of lines
"""

from __future__ import annotations

from typing import Optional

from models.content import ContentKind, Segment
from services.content_classifier import classify, classify_line


def split_lines(text: str) -> list[str]:
    """
    Split text into physical lines.

    Only "\\n" separates lines, a trailing "\\r" is dropped from each line and
    a terminating newline does not produce an empty last line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def detect_segments(content: str, extension: Optional[str] = None) -> list[Segment]:
    """
    Partition content into segments of consecutive non-blank lines of one kind.

    Blank lines belong to no segment and break line adjacency, so the next
    non-blank line always starts a new segment. Lines are classified one at a
    time and merged only with the directly preceding line.
    """
    lines = split_lines(content)
    if not lines:
        kind = classify(content, extension).kind
        return [Segment(start_line=1, end_line=1, kind=kind.value)]

    segments: list[Segment] = []
    for index, line in enumerate(lines):
        if not line.strip():
            continue

        line_number = index + 1
        kind = classify_line(line, index, extension).value

        if segments:
            last = segments[-1]
            if last.kind == kind and last.end_line + 1 == line_number:
                last.end_line = line_number
                continue

        segments.append(Segment(start_line=line_number, end_line=line_number, kind=kind))

    if not segments:
        segments.append(
            Segment(start_line=1, end_line=len(lines), kind=ContentKind.TEXT.value)
        )

    return segments
