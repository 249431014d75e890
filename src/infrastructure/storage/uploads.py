"""Local-directory storage for uploaded files."""

import time
import uuid
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Optional, Protocol, Sequence

import structlog

from core.exceptions import PayloadTooLargeError, UnsupportedMediaError, ValidationFailedError

logger = structlog.get_logger()

CHUNK_SIZE = 64 * 1024


class AsyncReadable(Protocol):
    """Anything with an async ``read(size)``, e.g. ``fastapi.UploadFile``."""

    async def read(self, size: int = -1) -> bytes:
        ...


@dataclass(frozen=True)
class StoredFile:
    """Result of a successful upload."""

    filename: str
    original_name: str
    content_type: str
    url: str
    path: Path
    size: int


class LocalFileStorage:
    """Writes uploads under ``root`` and exposes them below ``url_prefix``.

    The MIME type is checked before anything touches the disk, and the
    size limit is enforced while streaming: an oversized upload leaves no
    file behind.
    """

    def __init__(self, root: Path | str, url_prefix: str = "/uploads") -> None:
        self._root = Path(root)
        self._url_prefix = url_prefix.rstrip("/")

    @property
    def root(self) -> Path:
        return self._root

    async def save(
        self,
        source: AsyncReadable,
        original_name: Optional[str],
        content_type: Optional[str],
        allowed_types: Sequence[str],
        max_bytes: int,
        subdir: str = "",
        prefix: str = "",
    ) -> StoredFile:
        if not original_name:
            raise ValidationFailedError("No file uploaded", field="file")
        if content_type not in allowed_types:
            raise UnsupportedMediaError(content_type or "", list(allowed_types))

        # Only the extension of the client-supplied name is kept.
        extension = PurePath(original_name).suffix.lower()
        if prefix:
            filename = f"{prefix}-{int(time.time() * 1000)}-{uuid.uuid4().hex}{extension}"
        else:
            filename = f"{uuid.uuid4().hex}{extension}"

        directory = self._root / subdir if subdir else self._root
        directory.mkdir(parents=True, exist_ok=True)
        destination = directory / filename

        size = 0
        try:
            with destination.open("wb") as handle:
                while chunk := await source.read(CHUNK_SIZE):
                    size += len(chunk)
                    if size > max_bytes:
                        raise PayloadTooLargeError(max_bytes)
                    handle.write(chunk)
        except BaseException:
            destination.unlink(missing_ok=True)
            raise

        url_path = f"{subdir}/{filename}" if subdir else filename
        stored = StoredFile(
            filename=filename,
            original_name=PurePath(original_name).name,
            content_type=content_type,
            url=f"{self._url_prefix}/{url_path}",
            path=destination,
            size=size,
        )
        logger.info("file_stored", filename=filename, size=size, content_type=content_type)
        return stored

    def remove(self, url: str) -> bool:
        """Delete a previously stored file by its public URL."""
        if not url.startswith(f"{self._url_prefix}/"):
            return False
        relative = url[len(self._url_prefix) + 1:]
        target = (self._root / relative).resolve()
        if self._root.resolve() not in target.parents:
            return False
        if not target.is_file():
            return False
        target.unlink()
        return True
