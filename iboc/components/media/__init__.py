"""
Media component - Image and receipt uploads.
"""

from .component import (
    UPLOAD_FOLDERS,
    run_batch_upload,
    run_upload_image,
    safe_filename,
    storage_key,
    validate_upload,
)
from .models import (
    BatchUploadInput,
    BatchUploadOutput,
    UploadFile,
    UploadImageInput,
    UploadOutput,
    UploadValidationError,
)
from .ports import ClockPort, ObjectStorePort

__all__ = [
    "run_batch_upload",
    "run_upload_image",
    "safe_filename",
    "storage_key",
    "validate_upload",
    "UPLOAD_FOLDERS",
    "BatchUploadInput",
    "BatchUploadOutput",
    "UploadFile",
    "UploadImageInput",
    "UploadOutput",
    "UploadValidationError",
    "ClockPort",
    "ObjectStorePort",
]
