from typing import Protocol

from iboc.domain.entities import Member


class MemberRepoPort(Protocol):
    def list_all(self) -> list[Member]: ...
    def get_by_id(self, item_id: str) -> Member | None: ...
    def save(self, item: Member) -> Member: ...
    def delete(self, item_id: str) -> None: ...
