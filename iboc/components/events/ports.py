from typing import Protocol

from iboc.domain.entities import ChurchEvent, Member


class EventRepoPort(Protocol):
    def list_all(self) -> list[ChurchEvent]: ...
    def get_by_id(self, item_id: str) -> ChurchEvent | None: ...
    def save(self, item: ChurchEvent) -> ChurchEvent: ...
    def delete(self, item_id: str) -> None: ...


class MemberReaderPort(Protocol):
    def get_by_id(self, item_id: str) -> Member | None: ...
