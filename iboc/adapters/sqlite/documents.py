import json
import logging
import sqlite3
from datetime import UTC, datetime
from typing import Any

from iboc.domain.entities import new_id
from iboc.ports.documents import Document, DocumentNotFoundError, StorageError

logger = logging.getLogger(__name__)


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def _now() -> str:
    return datetime.now(UTC).isoformat()


class SQLiteDocumentStore:
    """
    JSON documents keyed by (collection, id) in a single SQLite table.

    Every call opens and closes its own connection, so one store can be
    shared across threads.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open database {self.db_path}: {e}") from e
        conn.row_factory = dict_factory
        return conn

    @staticmethod
    def _to_document(row: dict[str, Any]) -> Document:
        data: Document = json.loads(row["data_json"])
        data["id"] = row["id"]
        return data

    @staticmethod
    def _dump(data: Document) -> str:
        payload = {k: v for k, v in data.items() if k != "id"}
        return json.dumps(payload, ensure_ascii=False)

    def fetch_all(self, collection: str) -> list[Document]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT id, data_json FROM documents WHERE collection = ? ORDER BY created_at",
                (collection,),
            ).fetchall()
            return [self._to_document(r) for r in rows]
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read {collection}: {e}") from e
        finally:
            conn.close()

    def get_collection(self, collection: str) -> list[Document]:
        try:
            return self.fetch_all(collection)
        except StorageError:
            logger.exception("Failed to fetch collection %s", collection)
            return []

    def get_document(self, collection: str, doc_id: str) -> Document | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT id, data_json FROM documents WHERE collection = ? AND id = ?",
                (collection, doc_id),
            ).fetchone()
            return self._to_document(row) if row else None
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read {collection}/{doc_id}: {e}") from e
        finally:
            conn.close()

    def add_document(self, collection: str, data: Document) -> Document:
        doc_id = data.get("id") or new_id()
        return self.set_document(collection, doc_id, data)

    def set_document(self, collection: str, doc_id: str, data: Document) -> Document:
        """Full replace (upsert)."""
        now = _now()
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO documents (collection, id, data_json, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(collection, id) DO UPDATE SET
                    data_json=excluded.data_json,
                    updated_at=excluded.updated_at
            """,
                (collection, doc_id, self._dump(data), now, now),
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageError(f"Failed to write {collection}/{doc_id}: {e}") from e
        finally:
            conn.close()
        return {**data, "id": doc_id}

    def update_document(self, collection: str, doc_id: str, data: Document) -> Document:
        """Shallow merge of data onto the stored document."""
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT id, data_json FROM documents WHERE collection = ? AND id = ?",
                (collection, doc_id),
            ).fetchone()
            if not row:
                raise DocumentNotFoundError(collection, doc_id)

            merged = self._to_document(row)
            merged.update({k: v for k, v in data.items() if k != "id"})
            conn.execute(
                "UPDATE documents SET data_json = ?, updated_at = ? "
                "WHERE collection = ? AND id = ?",
                (self._dump(merged), _now(), collection, doc_id),
            )
            conn.commit()
            return merged
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageError(f"Failed to update {collection}/{doc_id}: {e}") from e
        finally:
            conn.close()

    def delete_document(self, collection: str, doc_id: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                "DELETE FROM documents WHERE collection = ? AND id = ?", (collection, doc_id)
            )
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to delete {collection}/{doc_id}: {e}") from e
        finally:
            conn.close()

    def query(self, collection: str, field: str, value: Any) -> list[Document]:
        """Documents whose top-level field equals value."""
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT id, data_json FROM documents "
                "WHERE collection = ? AND json_extract(data_json, ?) = ?",
                (collection, f"$.{field}", value),
            ).fetchall()
            return [self._to_document(r) for r in rows]
        except sqlite3.Error as e:
            raise StorageError(f"Failed to query {collection}: {e}") from e
        finally:
            conn.close()
