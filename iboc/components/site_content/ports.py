from typing import Protocol

from iboc.domain.entities import ChurchEvent, SiteContent, SocialProject
from iboc.ports.clock import ClockPort


class SiteContentRepoPort(Protocol):
    def get(self) -> SiteContent | None: ...
    def save(self, content: SiteContent) -> SiteContent: ...


class EventReaderPort(Protocol):
    def list_all(self) -> list[ChurchEvent]: ...
    def get_by_id(self, item_id: str) -> ChurchEvent | None: ...


class SocialProjectReaderPort(Protocol):
    def get_by_id(self, item_id: str) -> SocialProject | None: ...


__all__ = ["ClockPort", "EventReaderPort", "SiteContentRepoPort", "SocialProjectReaderPort"]
