from typing import Protocol

from iboc.domain.entities import ChurchEvent, Member, Transaction
from iboc.ports.clock import ClockPort


class MemberListPort(Protocol):
    def list_all(self) -> list[Member]: ...


class TransactionListPort(Protocol):
    def list_all(self) -> list[Transaction]: ...


class EventListPort(Protocol):
    def list_all(self) -> list[ChurchEvent]: ...


__all__ = ["ClockPort", "EventListPort", "MemberListPort", "TransactionListPort"]
