"""Tests for LocalFileStorage."""

import io
from pathlib import Path

import pytest

from core.exceptions import PayloadTooLargeError, UnsupportedMediaError, ValidationFailedError
from infrastructure.storage.uploads import LocalFileStorage

IMAGES = ["image/png", "image/jpeg"]


class BytesSource:
    """Async reader over an in-memory buffer."""

    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(data)

    async def read(self, size: int = -1) -> bytes:
        return self._buffer.read(size)


@pytest.fixture
def storage(tmp_path: Path) -> LocalFileStorage:
    return LocalFileStorage(tmp_path)


async def test_saves_with_unique_prefixed_name(storage: LocalFileStorage, tmp_path: Path):
    first = await storage.save(
        BytesSource(b"img"), "Photo.PNG", "image/png", IMAGES, 1024, subdir="blog-images", prefix="blog"
    )
    second = await storage.save(
        BytesSource(b"img"), "Photo.PNG", "image/png", IMAGES, 1024, subdir="blog-images", prefix="blog"
    )

    assert first.filename != second.filename
    assert first.filename.startswith("blog-")
    assert first.filename.endswith(".png")
    assert first.url == f"/uploads/blog-images/{first.filename}"
    assert first.original_name == "Photo.PNG"
    assert (tmp_path / "blog-images" / first.filename).read_bytes() == b"img"


async def test_client_path_components_are_dropped(storage: LocalFileStorage, tmp_path: Path):
    stored = await storage.save(BytesSource(b"x"), "../../etc/evil.png", "image/png", IMAGES, 1024)

    assert stored.path.parent == tmp_path
    assert stored.original_name == "evil.png"


async def test_rejects_type_before_writing(storage: LocalFileStorage, tmp_path: Path):
    with pytest.raises(UnsupportedMediaError):
        await storage.save(BytesSource(b"x"), "a.txt", "text/plain", IMAGES, 1024)

    assert list(tmp_path.iterdir()) == []


async def test_oversized_upload_leaves_nothing(storage: LocalFileStorage, tmp_path: Path):
    with pytest.raises(PayloadTooLargeError) as exc_info:
        await storage.save(BytesSource(b"x" * 2048), "big.png", "image/png", IMAGES, 1024)

    assert exc_info.value.status_code == 413
    assert list(tmp_path.rglob("*.png")) == []


async def test_missing_filename_is_validation_error(storage: LocalFileStorage):
    with pytest.raises(ValidationFailedError):
        await storage.save(BytesSource(b"x"), "", "image/png", IMAGES, 1024)


async def test_remove_only_touches_files_under_root(storage: LocalFileStorage, tmp_path: Path):
    stored = await storage.save(BytesSource(b"x"), "a.png", "image/png", IMAGES, 1024)
    outside = tmp_path.parent / "outside.png"
    outside.write_bytes(b"keep")

    assert storage.remove("/uploads/../outside.png") is False
    assert storage.remove("/elsewhere/a.png") is False
    assert storage.remove(stored.url) is True
    assert not stored.path.exists()
    assert outside.exists()
