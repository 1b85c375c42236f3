from typing import Protocol

from iboc.ports.clock import ClockPort


class ObjectStorePort(Protocol):
    def save(self, name: str, data: bytes) -> str:
        """Save bytes and return the stored path."""
        ...

    def public_url(self, path: str) -> str: ...


__all__ = ["ClockPort", "ObjectStorePort"]
