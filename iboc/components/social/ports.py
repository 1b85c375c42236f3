from typing import Protocol

from iboc.domain.entities import SocialProject


class SocialProjectRepoPort(Protocol):
    def list_all(self) -> list[SocialProject]: ...
    def get_by_id(self, item_id: str) -> SocialProject | None: ...
    def save(self, item: SocialProject) -> SocialProject: ...
    def delete(self, item_id: str) -> None: ...


class ChoicePort(Protocol):
    """The slice of random.Random used to pick verses."""

    def choice(self, seq): ...
