"""Models module - Pydantic data models"""

from .content import (
    ContentKind,
    DetectedType,
    Segment,
    DetectRequest,
    FormatJsonRequest,
    FormatSegmentsRequest,
    FormattedContent,
)
from .diff import (
    ChangedBlock,
    DiffBlock,
    DiffRequest,
    StructuredDiff,
    UnchangedBlock,
    UnifiedDiffResponse,
)
from .files import ReadFileRequest, ReadFileResponse, WriteFileRequest

__all__ = [
    # Content models
    "ContentKind",
    "DetectedType",
    "Segment",
    "DetectRequest",
    "FormatJsonRequest",
    "FormatSegmentsRequest",
    "FormattedContent",
    # Diff models
    "ChangedBlock",
    "DiffBlock",
    "DiffRequest",
    "StructuredDiff",
    "UnchangedBlock",
    "UnifiedDiffResponse",
    # File models
    "ReadFileRequest",
    "ReadFileResponse",
    "WriteFileRequest",
]
