from typing import Protocol

from iboc.domain.entities import Asset, Member, Transaction
from iboc.ports.clock import ClockPort


class AssetRepoPort(Protocol):
    def list_all(self) -> list[Asset]: ...
    def get_by_id(self, item_id: str) -> Asset | None: ...
    def save(self, item: Asset) -> Asset: ...
    def delete(self, item_id: str) -> None: ...


class MemberReaderPort(Protocol):
    def get_by_id(self, item_id: str) -> Member | None: ...


class ExpenseWriterPort(Protocol):
    def save(self, item: Transaction) -> Transaction: ...


__all__ = ["AssetRepoPort", "ClockPort", "ExpenseWriterPort", "MemberReaderPort"]
