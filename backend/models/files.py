"""File I/O request and response models"""

from __future__ import annotations

from pydantic import BaseModel


class ReadFileRequest(BaseModel):
    """Request to read a file into a buffer"""

    path: str


class ReadFileResponse(BaseModel):
    """File contents plus the extension hint derived from the path"""

    path: str
    content: str
    extension: str  # lowercase, "" when the name has none


class WriteFileRequest(BaseModel):
    """Request to write a buffer back to disk"""

    path: str
    content: str
