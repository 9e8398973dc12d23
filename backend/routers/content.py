"""Content detection and formatting API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from models.content import (
    DetectedType,
    DetectRequest,
    FormatJsonRequest,
    FormatSegmentsRequest,
    FormattedContent,
    Segment,
)
from services.content_classifier import classify
from services.formatters import FormatError, format_json, format_segments
from services.segmenter import detect_segments

router = APIRouter()


@router.post("/detect", response_model=DetectedType)
async def detect_content(request: DetectRequest) -> DetectedType:
    """Classify the whole buffer"""
    return classify(request.content, request.extension)


@router.post("/segments", response_model=list[Segment])
async def segments(request: DetectRequest) -> list[Segment]:
    """Split the buffer into same-dialect segments"""
    return detect_segments(request.content, request.extension)


@router.post("/format/json", response_model=FormattedContent)
async def format_json_content(request: FormatJsonRequest) -> FormattedContent:
    """Pretty-print a JSON document"""
    try:
        return FormattedContent(content=format_json(request.content))
    except FormatError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/format/segmented", response_model=FormattedContent)
async def format_content_segmented(request: FormatSegmentsRequest) -> FormattedContent:
    """Format each segment with its dialect formatter; never fails"""
    return FormattedContent(content=format_segments(request.content, request.segments))
