"""End-to-end scenario: cache folder lifecycle with both services."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from filekit import (
    FailedToLoad,
    File,
    FileKit,
    FileKitAsync,
    Folder,
    SearchPath,
    path_to_folder,
)
from filekit.core import locations


@pytest.fixture
def cache_folder(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Folder]:
    """Provide <caches>/filekit, with caches redirected into tmp_path."""
    monkeypatch.setattr(locations, "_home", lambda: tmp_path)
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "cache"))

    folder = Folder(location=path_to_folder(SearchPath.CACHES).unwrap() / "filekit")
    yield folder
    FileKit().delete(folder)


def test_sync_lifecycle(cache_folder: Folder):
    """Test create → save → load → delete → load with the sync service."""
    kit = FileKit()

    assert kit.create(cache_folder).ok
    file = File(name="file.txt", folder=cache_folder, data="Hello World".encode("utf-8"))
    assert kit.save(file).ok

    loaded = kit.load(file).unwrap()
    assert loaded.data is not None
    assert loaded.data.decode("utf-8") == "Hello World"
    assert loaded == file

    assert kit.delete(file).ok
    result = kit.load(file)
    assert isinstance(result.error, FailedToLoad)
    assert result.error.location == file.location


async def test_async_lifecycle(cache_folder: Folder, collect):
    """Test the same scenario through the async service."""
    file = File(name="file.txt", folder=cache_folder, data=b"Hello World")

    with FileKitAsync() as kit:
        assert (await collect(kit.create, cache_folder)).ok
        assert (await collect(kit.save, file)).ok

        loaded = (await collect(kit.load, file)).unwrap()
        assert loaded.data == b"Hello World"

        assert (await collect(kit.delete, file)).ok
        assert (await collect(kit.load, file)).error == FailedToLoad(file.location)


def test_folder_listing_after_saves(cache_folder: Folder):
    """Test two saved files show up when the folder is loaded."""
    kit = FileKit()
    kit.create(cache_folder)
    for name in ("file.txt", "file1.txt"):
        kit.save(File(name=name, folder=cache_folder, data=b"Hello World"))

    assert len(kit.load(cache_folder).unwrap().files) == 2
