import asyncio
import shutil
from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from uuid_extension import uuid7

from app.platform.config import settings


class StoredFile(BaseModel):
    file_id: str
    filename: str
    data: bytes


class FileStore:
    """Opaque byte storage addressed by generated ids."""

    async def put(self, data: bytes, filename: str) -> str:
        raise NotImplementedError

    async def get(self, file_id: str) -> Optional[StoredFile]:
        raise NotImplementedError

    async def delete(self, file_id: str) -> None:
        raise NotImplementedError


class LocalFileStore(FileStore):
    """
    Stores each file as UPLOAD_DIR/<file_id>/<filename>.

    Disk I/O runs in a worker thread so concurrent uploads do not block the
    event loop.
    """

    def __init__(self, root: Optional[str] = None):
        self.root = Path(root or settings.UPLOAD_DIR)

    def _dir(self, file_id: str) -> Path:
        # ids are generated here; anything else cannot name a stored file
        if not file_id or "/" in file_id or "\\" in file_id or file_id in (".", ".."):
            raise ValueError(f"Invalid file id: {file_id!r}")
        return self.root / file_id

    async def put(self, data: bytes, filename: str) -> str:
        file_id = str(uuid7())
        safe_name = Path(filename).name or "file"
        target = self._dir(file_id) / safe_name

        def _write():
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)

        await asyncio.to_thread(_write)
        return file_id

    async def get(self, file_id: str) -> Optional[StoredFile]:
        try:
            directory = self._dir(file_id)
        except ValueError:
            return None

        def _read() -> Optional[StoredFile]:
            if not directory.is_dir():
                return None
            files = [p for p in directory.iterdir() if p.is_file()]
            if not files:
                return None
            return StoredFile(file_id=file_id, filename=files[0].name, data=files[0].read_bytes())

        return await asyncio.to_thread(_read)

    async def delete(self, file_id: str) -> None:
        directory = self._dir(file_id)
        await asyncio.to_thread(shutil.rmtree, directory, True)


def get_file_store() -> FileStore:
    return LocalFileStore()
