import mimetypes

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import Response

from iboc.adapters.clock import SystemClock
from iboc.adapters.fs.filestore import FileSystemStore
from iboc.api.deps import get_clock, get_file_store, get_rules, require_permission
from iboc.api.schemas import BatchUploadResponse, UploadResponse
from iboc.components.media import (
    BatchUploadInput,
    UploadImageInput,
    run_batch_upload,
    run_upload_image,
)
from iboc.components.media import UploadFile as MediaFile
from iboc.domain.entities import AppUser
from iboc.rules.models import Rules

router = APIRouter()
public_router = APIRouter()

CACHE_CONTROL = "public, max-age=86400"


def _to_media_file(file: UploadFile) -> MediaFile:
    return MediaFile(
        data=file.file.read(),
        filename=file.filename or "unnamed",
        content_type=file.content_type or "application/octet-stream",
    )


@router.post("/upload", response_model=UploadResponse)
def upload_image(
    file: UploadFile = File(...),
    folder: str = Form(...),
    _user: AppUser = Depends(require_permission("media:upload")),
    store: FileSystemStore = Depends(get_file_store),
    rules: Rules = Depends(get_rules),
    clock: SystemClock = Depends(get_clock),
) -> UploadResponse:
    """Upload one file into a folder and return its public URL."""
    inp = UploadImageInput(file=_to_media_file(file), folder=folder)
    result = run_upload_image(inp, store, rules.uploads, clock)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.errors[0].message)
    return UploadResponse(url=result.url or "", path=result.path or "")


@router.post("/batch", response_model=BatchUploadResponse)
def batch_upload(
    files: list[UploadFile] = File(...),
    folder: str = Form(...),
    _user: AppUser = Depends(require_permission("media:upload")),
    store: FileSystemStore = Depends(get_file_store),
    rules: Rules = Depends(get_rules),
    clock: SystemClock = Depends(get_clock),
) -> BatchUploadResponse:
    """Upload several files. Nothing is stored if any file is rejected."""
    inp = BatchUploadInput(files=[_to_media_file(f) for f in files], folder=folder)
    result = run_batch_upload(inp, store, rules.uploads, clock)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.errors[0].message)
    return BatchUploadResponse(urls=result.urls)


@public_router.get("/{path:path}")
def serve_media(
    path: str,
    store: FileSystemStore = Depends(get_file_store),
) -> Response:
    try:
        data = store.get(path)
    except (FileNotFoundError, ValueError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")

    media_type = mimetypes.guess_type(path)[0] or "application/octet-stream"
    return Response(content=data, media_type=media_type, headers={"Cache-Control": CACHE_CONTROL})
