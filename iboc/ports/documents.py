from typing import Any, Protocol

Document = dict[str, Any]


class StorageError(Exception):
    """The backing document store failed (connection, permissions, I/O)."""


class DocumentNotFoundError(KeyError):
    def __init__(self, collection: str, doc_id: str):
        super().__init__(f"{collection}/{doc_id}")
        self.collection = collection
        self.doc_id = doc_id


class DocumentStorePort(Protocol):
    def fetch_all(self, collection: str) -> list[Document]:
        """All documents of a collection, each with its "id". Raises StorageError."""
        ...

    def get_collection(self, collection: str) -> list[Document]:
        """Like fetch_all, but logs failures and returns an empty list."""
        ...

    def get_document(self, collection: str, doc_id: str) -> Document | None: ...

    def add_document(self, collection: str, data: Document) -> Document: ...

    def set_document(self, collection: str, doc_id: str, data: Document) -> Document: ...

    def update_document(self, collection: str, doc_id: str, data: Document) -> Document: ...

    def delete_document(self, collection: str, doc_id: str) -> None: ...

    def query(self, collection: str, field: str, value: Any) -> list[Document]: ...
