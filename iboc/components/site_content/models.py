from dataclasses import dataclass, field

from iboc.domain.entities import ChurchEvent, SiteContent


@dataclass(frozen=True)
class ValidationError:
    field: str
    code: str
    message: str


@dataclass
class UpdateSiteContentInput:
    content: SiteContent


@dataclass
class ImportEventInput:
    event_id: str


@dataclass
class ImportProjectInput:
    project_id: str


@dataclass
class AddSocialItemsInput:
    image_urls: list[str]


@dataclass
class RemoveSocialItemInput:
    registered_at: int


@dataclass
class SiteContentOutput:
    content: SiteContent | None = None
    is_default: bool = False
    success: bool = False
    errors: list[ValidationError] = field(default_factory=list)


@dataclass
class AgendaOutput:
    events: list[ChurchEvent]
    success: bool = True
