from typing import Protocol

from iboc.domain.entities import AppUser, Member


class MemberLookupPort(Protocol):
    def get_by_username(self, username: str) -> list[Member]: ...
    def get_by_id(self, item_id: str) -> Member | None: ...
    def save(self, item: Member) -> Member: ...


class AuthAdapterPort(Protocol):
    def verify_password(self, plain: str, hashed: str) -> bool: ...
    def hash_password(self, plain: str) -> str: ...
    def create_token(self, user: AppUser, ttl_minutes: int) -> str: ...
    def validate_token(self, token: str) -> AppUser | None: ...
