"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter

from models.diff import DiffRequest, StructuredDiff, UnifiedDiffResponse
from services.diff_generator import DiffGenerator

router = APIRouter()
diff_generator = DiffGenerator()


@router.post("/unified", response_model=UnifiedDiffResponse)
async def compute_diff(request: DiffRequest) -> UnifiedDiffResponse:
    """Unified patch from the current buffer to the secondary one"""
    return UnifiedDiffResponse(diff=diff_generator.unified_diff(request.left, request.right))


@router.post("/structured", response_model=StructuredDiff)
async def compute_diff_structured(request: DiffRequest) -> StructuredDiff:
    """Unchanged/changed blocks for side-by-side rendering"""
    return diff_generator.structured_diff(request.left, request.right)
