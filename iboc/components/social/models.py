from dataclasses import dataclass, field

from iboc.domain.entities import SocialProject


@dataclass(frozen=True)
class ValidationError:
    field: str
    code: str
    message: str


@dataclass
class SaveProjectInput:
    project: SocialProject
    project_id: str | None = None  # None creates


@dataclass
class DeleteProjectInput:
    project_id: str


@dataclass
class AddGalleryImagesInput:
    project_id: str
    image_urls: list[str]


@dataclass
class RemoveGalleryItemInput:
    project_id: str
    index: int


@dataclass
class ProjectOutput:
    project: SocialProject | None = None
    success: bool = False
    errors: list[ValidationError] = field(default_factory=list)


@dataclass
class ProjectListOutput:
    projects: list[SocialProject]
    success: bool = True
