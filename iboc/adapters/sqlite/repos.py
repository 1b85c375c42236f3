import builtins
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from iboc.adapters.sqlite.documents import SQLiteDocumentStore
from iboc.domain.entities import (
    Asset,
    BankAccount,
    ChurchEvent,
    Member,
    SiteContent,
    SocialProject,
    Transaction,
)
from iboc.ports.documents import DocumentStorePort

M = TypeVar("M", bound=BaseModel)


class SQLiteCollectionRepo(Generic[M]):
    """Typed access to one document collection."""

    collection: ClassVar[str]
    model: ClassVar[type[BaseModel]]

    def __init__(self, db_path: str | None = None, store: DocumentStorePort | None = None):
        if store is None:
            if db_path is None:
                raise ValueError("db_path or store is required")
            store = SQLiteDocumentStore(db_path)
        self.store = store

    def _load(self, doc: dict[str, Any]) -> M:
        return self.model.model_validate(doc)  # type: ignore[return-value]

    def _dump(self, item: M) -> dict[str, Any]:
        return item.model_dump(mode="json")

    def list_all(self) -> builtins.list[M]:
        return [self._load(d) for d in self.store.get_collection(self.collection)]

    def fetch_all(self) -> builtins.list[M]:
        """Like list_all, but backend failures propagate."""
        return [self._load(d) for d in self.store.fetch_all(self.collection)]

    def get_by_id(self, item_id: str) -> M | None:
        doc = self.store.get_document(self.collection, item_id)
        return self._load(doc) if doc else None

    def save(self, item: M) -> M:
        doc = self.store.set_document(self.collection, item.id, self._dump(item))  # type: ignore[attr-defined]
        return self._load(doc)

    def update_fields(self, item_id: str, fields: dict[str, Any]) -> M:
        doc = self.store.update_document(self.collection, item_id, fields)
        return self._load(doc)

    def delete(self, item_id: str) -> None:
        self.store.delete_document(self.collection, item_id)


class SQLiteMemberRepo(SQLiteCollectionRepo[Member]):
    collection = "members"
    model = Member

    def get_by_username(self, username: str) -> builtins.list[Member]:
        return [self._load(d) for d in self.store.query(self.collection, "username", username)]


class SQLiteTransactionRepo(SQLiteCollectionRepo[Transaction]):
    collection = "financial"
    model = Transaction


class SQLiteAccountRepo(SQLiteCollectionRepo[BankAccount]):
    collection = "accounts"
    model = BankAccount


class SQLiteEventRepo(SQLiteCollectionRepo[ChurchEvent]):
    collection = "events"
    model = ChurchEvent


class SQLiteAssetRepo(SQLiteCollectionRepo[Asset]):
    collection = "assets"
    model = Asset


class SQLiteSocialProjectRepo(SQLiteCollectionRepo[SocialProject]):
    collection = "social_projects"
    model = SocialProject


class SQLiteSiteContentRepo:
    """Single document settings/site_content."""

    collection = "settings"
    doc_id = "site_content"

    def __init__(self, db_path: str | None = None, store: DocumentStorePort | None = None):
        if store is None:
            if db_path is None:
                raise ValueError("db_path or store is required")
            store = SQLiteDocumentStore(db_path)
        self.store = store

    def get(self) -> SiteContent | None:
        doc = self.store.get_document(self.collection, self.doc_id)
        if not doc:
            return None
        doc.pop("id", None)
        return SiteContent.model_validate(doc)

    def save(self, content: SiteContent) -> SiteContent:
        self.store.set_document(self.collection, self.doc_id, content.model_dump(mode="json"))
        return content
