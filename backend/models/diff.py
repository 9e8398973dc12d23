"""Diff-related data models"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class UnchangedBlock(BaseModel):
    """A run of lines identical on both sides"""

    type: Literal["unchanged"] = "unchanged"
    count: int
    lines: list[str]


class ChangedBlock(BaseModel):
    """A contiguous non-equal region; either side may be empty"""

    type: Literal["changed"] = "changed"
    old_lines: list[str]
    new_lines: list[str]


DiffBlock = Annotated[Union[UnchangedBlock, ChangedBlock], Field(discriminator="type")]


class StructuredDiff(BaseModel):
    """Block list for side-by-side rendering"""

    left_label: str
    right_label: str
    blocks: list[DiffBlock]


class DiffRequest(BaseModel):
    """Request to compare two buffers"""

    left: str
    right: str


class UnifiedDiffResponse(BaseModel):
    """Unified patch text"""

    diff: str
