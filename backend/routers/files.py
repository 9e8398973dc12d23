"""File I/O API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from models.files import ReadFileRequest, ReadFileResponse, WriteFileRequest
from services.content_classifier import extension_from_path
from services.file_store import FileTooLargeError, read_file, write_file

router = APIRouter()


@router.post("/read", response_model=ReadFileResponse)
async def read(request: ReadFileRequest) -> ReadFileResponse:
    """Read a file into a buffer"""
    try:
        content = read_file(request.path)
    except FileTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (OSError, UnicodeDecodeError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ReadFileResponse(
        path=request.path,
        content=content,
        extension=extension_from_path(request.path),
    )


@router.post("/write")
async def write(request: WriteFileRequest) -> dict[str, Any]:
    """Write a buffer back to disk"""
    try:
        write_file(request.path, request.content)
    except OSError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"status": "success", "message": f"Saved {request.path}"}
