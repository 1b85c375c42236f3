from typing import Any, Protocol

from iboc.domain.entities import BankAccount, Transaction


class TransactionRepoPort(Protocol):
    def list_all(self) -> list[Transaction]: ...
    def get_by_id(self, item_id: str) -> Transaction | None: ...
    def save(self, item: Transaction) -> Transaction: ...
    def update_fields(self, item_id: str, fields: dict[str, Any]) -> Transaction: ...
    def delete(self, item_id: str) -> None: ...


class AccountRepoPort(Protocol):
    def list_all(self) -> list[BankAccount]: ...
    def get_by_id(self, item_id: str) -> BankAccount | None: ...
    def save(self, item: BankAccount) -> BankAccount: ...
    def delete(self, item_id: str) -> None: ...
