from dataclasses import dataclass, field


@dataclass(frozen=True)
class UploadValidationError:
    """Upload rejected before anything is stored."""

    code: str
    message: str
    field: str = "file"


@dataclass(frozen=True)
class UploadFile:
    data: bytes
    filename: str
    content_type: str


@dataclass(frozen=True)
class UploadImageInput:
    file: UploadFile
    folder: str


@dataclass(frozen=True)
class BatchUploadInput:
    files: list[UploadFile]
    folder: str


@dataclass
class UploadOutput:
    url: str | None = None
    path: str | None = None
    success: bool = False
    errors: list[UploadValidationError] = field(default_factory=list)


@dataclass
class BatchUploadOutput:
    urls: list[str] = field(default_factory=list)
    success: bool = False
    errors: list[UploadValidationError] = field(default_factory=list)
