"""Content detection and formatting data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ContentKind(str, Enum):
    """Serialized-data dialects the classifier can report"""

    JSON = "json"
    CSV = "csv"
    XML = "xml"
    YAML = "yaml"
    PROPERTIES = "properties"
    TEXT = "text"


class DetectedType(BaseModel):
    """Classification result for a buffer or a single line"""

    kind: ContentKind
    confidence: float  # UI signal only


class Segment(BaseModel):
    """A run of consecutive non-blank lines sharing one dialect"""

    start_line: int  # 1-indexed
    end_line: int  # inclusive
    kind: str  # unknown kinds are formatted verbatim


class DetectRequest(BaseModel):
    """Request to classify a buffer or split it into segments"""

    content: str
    extension: str | None = None  # without leading dot, e.g. "json"


class FormatJsonRequest(BaseModel):
    """Request to pretty-print a JSON document"""

    content: str


class FormatSegmentsRequest(BaseModel):
    """Request to canonicalize a buffer segment by segment"""

    content: str
    segments: list[Segment] = []


class FormattedContent(BaseModel):
    """Formatted buffer"""

    content: str
