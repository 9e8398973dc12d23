"""
File Store - Bounded reads and verbatim writes of user files
"""

from __future__ import annotations

import os

# Larger files are refused rather than loaded into an editor buffer
MAX_FILE_SIZE_BYTES = 5 * 1024 * 1024


class FileTooLargeError(Exception):
    """Raised when a file exceeds MAX_FILE_SIZE_BYTES"""

    def __init__(self, size: int, max_size: int = MAX_FILE_SIZE_BYTES):
        self.size = size
        self.max_size = max_size
        mb = size / (1024 * 1024)
        max_mb = max_size / (1024 * 1024)
        super().__init__(
            f"File too large ({mb:.1f} MB). Maximum size is {max_mb:.0f} MB. "
            "Open a smaller file or use another tool."
        )


def read_file(path: str) -> str:
    """Read a UTF-8 text file, refusing anything over the size ceiling"""
    size = os.stat(path).st_size
    if size > MAX_FILE_SIZE_BYTES:
        raise FileTooLargeError(size)

    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_file(path: str, content: str):
    """Write content to path verbatim"""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
