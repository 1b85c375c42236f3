"""
Media component - Image and receipt uploads.

Files are stored under {folder}/{timestamp_ms}_{filename} and addressed by
a public download URL.

Invariants:
- folder must be one of UPLOAD_FOLDERS
- extension, MIME type and size are checked against the upload rules
- a batch is all-or-nothing: every file is validated before any is stored
"""

import logging
import os
import re

from iboc.rules.models import UploadsRules

from .models import (
    BatchUploadInput,
    BatchUploadOutput,
    UploadFile,
    UploadImageInput,
    UploadOutput,
    UploadValidationError,
)
from .ports import ClockPort, ObjectStorePort

logger = logging.getLogger(__name__)

UPLOAD_FOLDERS = frozenset(
    {
        "members_photos",
        "events_banners",
        "assets_photos",
        "social_banners",
        "social_projects_gallery",
        "site_assets",
        "social_projects",
        "receipts",
    }
)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def safe_filename(filename: str) -> str:
    """Base name only, with anything outside [A-Za-z0-9._-] replaced by '_'."""
    base = os.path.basename(filename.replace("\\", "/"))
    cleaned = _UNSAFE_CHARS.sub("_", base).strip("._")
    return cleaned or "arquivo"


def storage_key(folder: str, filename: str, timestamp_ms: int) -> str:
    return f"{folder}/{timestamp_ms}_{safe_filename(filename)}"


def validate_upload(file: UploadFile, folder: str, rules: UploadsRules) -> list[UploadValidationError]:
    errors: list[UploadValidationError] = []

    if folder not in UPLOAD_FOLDERS:
        errors.append(
            UploadValidationError(
                code="invalid_folder", message=f"Unknown upload folder '{folder}'", field="folder"
            )
        )

    if not file.data:
        errors.append(UploadValidationError(code="empty_file", message="Arquivo vazio."))
    elif len(file.data) > rules.max_upload_bytes:
        errors.append(
            UploadValidationError(
                code="file_too_large",
                message=(
                    f"File size {len(file.data)} bytes exceeds maximum of "
                    f"{rules.max_upload_bytes} bytes"
                ),
            )
        )

    extension = os.path.splitext(file.filename)[1].lower()
    if extension not in rules.allowlist_extensions:
        errors.append(
            UploadValidationError(
                code="invalid_extension",
                message=(
                    f"Extension '{extension or '(none)'}' is not allowed. "
                    f"Allowed: {', '.join(rules.allowlist_extensions)}"
                ),
                field="filename",
            )
        )

    if file.content_type not in rules.allowlist_mime_types:
        errors.append(
            UploadValidationError(
                code="invalid_mime_type",
                message=(
                    f"MIME type '{file.content_type}' is not allowed. "
                    f"Allowed types: {', '.join(sorted(rules.allowlist_mime_types))}"
                ),
                field="content_type",
            )
        )

    return errors


def run_upload_image(
    inp: UploadImageInput, store: ObjectStorePort, rules: UploadsRules, clock: ClockPort
) -> UploadOutput:
    errors = validate_upload(inp.file, inp.folder, rules)
    if errors:
        return UploadOutput(success=False, errors=errors)

    timestamp_ms = int(clock.now_utc().timestamp() * 1000)
    path = store.save(storage_key(inp.folder, inp.file.filename, timestamp_ms), inp.file.data)
    logger.info("Stored upload %s (%d bytes)", path, len(inp.file.data))
    return UploadOutput(url=store.public_url(path), path=path, success=True)


def run_batch_upload(
    inp: BatchUploadInput, store: ObjectStorePort, rules: UploadsRules, clock: ClockPort
) -> BatchUploadOutput:
    errors: list[UploadValidationError] = []
    for file in inp.files:
        errors.extend(validate_upload(file, inp.folder, rules))
    if not inp.files:
        errors.append(UploadValidationError(code="empty_batch", message="Nenhum arquivo enviado."))
    if errors:
        return BatchUploadOutput(success=False, errors=errors)

    # Same millisecond for the whole batch; the index keeps keys distinct.
    timestamp_ms = int(clock.now_utc().timestamp() * 1000)
    urls = []
    for index, file in enumerate(inp.files):
        path = store.save(storage_key(inp.folder, file.filename, timestamp_ms + index), file.data)
        urls.append(store.public_url(path))
    logger.info("Stored %d uploads in %s", len(urls), inp.folder)
    return BatchUploadOutput(urls=urls, success=True)
