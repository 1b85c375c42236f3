from typing import Any, Protocol

from iboc.domain.entities import Member, SiteContent


class CollectionReaderPort(Protocol):
    def fetch_all(self) -> list[Any]:
        """All items. Backend failures propagate."""
        ...


class MemberSeedPort(Protocol):
    def fetch_all(self) -> list[Member]: ...
    def save(self, item: Member) -> Member: ...


class SiteContentWriterPort(Protocol):
    def save(self, content: SiteContent) -> SiteContent: ...
