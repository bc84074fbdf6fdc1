from pathlib import Path

from docupload.upload.exceptions import StorageError


class LocalFileStorage:
    """Object storage on the local filesystem, addressed by storage path.

    Paths look like "{user_id}/{timestamp}-{sanitized-name}" and always resolve
    inside the files root.
    """

    FILES_ROOT = Path("/app/files")

    def __init__(self, files_root: Path | None = None) -> None:
        self._files_root = files_root if files_root is not None else self.FILES_ROOT

    def save(self, storage_path: str, data: bytes) -> None:
        """Write bytes under storage_path. Existing files are never overwritten.

        Raises:
            StorageError: if the path is taken or escapes the files root.
        """
        target = self._resolve_path(storage_path)
        if target.exists():
            raise StorageError(f"File already exists: {storage_path}")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)

    def load(self, storage_path: str) -> bytes:
        """Read stored bytes.

        Raises:
            FileNotFoundError: if nothing is stored at storage_path.
        """
        target = self._resolve_path(storage_path)
        if not target.exists():
            raise FileNotFoundError(f"File not found: {storage_path}")
        return target.read_bytes()

    def delete(self, storage_path: str) -> None:
        self._resolve_path(storage_path).unlink(missing_ok=True)

    def _resolve_path(self, storage_path: str) -> Path:
        root = self._files_root.resolve()
        target = (root / storage_path).resolve()
        if root not in target.parents:
            raise StorageError(f"Storage path escapes files root: {storage_path}")
        return target
