import os
from pathlib import Path


class FileSystemStore:
    """Object storage on the local filesystem. Paths are relative to base_path."""

    def __init__(self, base_path: str, public_prefix: str = "/media"):
        self.base_path = Path(base_path).resolve()
        self.public_prefix = public_prefix.rstrip("/")
        if not self.base_path.exists():
            os.makedirs(self.base_path, exist_ok=True)

    def _safe_path(self, path: str) -> Path:
        target = (self.base_path / path).resolve()
        if not target.is_relative_to(self.base_path):
            raise ValueError(f"Path traversal attempt detected: {path}")
        return target

    def save(self, name: str, data: bytes) -> str:
        """Save bytes and return the path relative to the store root."""
        target = self._safe_path(name)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as f:
            f.write(data)
        return target.relative_to(self.base_path).as_posix()

    def get(self, path: str) -> bytes:
        """Retrieve bytes by path. Raises FileNotFoundError."""
        target = self._safe_path(path)
        if not target.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        with open(target, "rb") as f:
            return f.read()

    def delete(self, path: str) -> None:
        target = self._safe_path(path)
        if target.exists():
            os.remove(target)

    def public_url(self, path: str) -> str:
        return f"{self.public_prefix}/{path}"
