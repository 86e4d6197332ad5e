"""Shared test fixtures."""

import time
from pathlib import Path

import pytest
from PySide6.QtCore import QCoreApplication

from sidenav.models import (
    FakeEntry,
    FakeItem,
    FileEntry,
    FolderShortcutList,
    NavigationItemType,
    RootType,
    VolumeInfo,
    VolumeInfoList,
    VolumeType,
)
from sidenav.settings import NavigationSettings


@pytest.fixture(scope="session", autouse=True)
def qt_app() -> QCoreApplication:
    """Provide the event loop used by asynchronous directory readers."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


@pytest.fixture
def wait_until(qt_app: QCoreApplication):
    """Process Qt events until the predicate holds or the timeout expires."""

    def _wait(predicate, timeout: float = 2.0) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            qt_app.processEvents()
            if predicate():
                return True
            time.sleep(0.005)
        return predicate()

    return _wait


@pytest.fixture
def settings() -> NavigationSettings:
    return NavigationSettings()


@pytest.fixture
def unified_settings() -> NavigationSettings:
    return NavigationSettings(unified_my_files=True)


def make_volume(volume_type: VolumeType, volume_id: str, device_path: str | None = None, label: str = "", local_path: Path | None = None) -> VolumeInfo:
    return VolumeInfo.create(volume_type, volume_id, label=label, device_path=device_path, local_path=local_path)


def make_shortcut(filesystem_name: str, full_path: str) -> FileEntry:
    return FileEntry(filesystem_name, full_path)


@pytest.fixture
def volume_list() -> VolumeInfoList:
    """Volume list with Drive and Downloads mounted, as at session start."""
    return VolumeInfoList([
        make_volume(VolumeType.DRIVE, "drive"),
        make_volume(VolumeType.DOWNLOADS, "downloads"),
    ])


@pytest.fixture
def shortcut_list() -> FolderShortcutList:
    return FolderShortcutList([make_shortcut("drive", "/root/shortcut")])


@pytest.fixture
def recent_item() -> FakeItem:
    return FakeItem("recent-label", NavigationItemType.RECENT, FakeEntry("recent-label", RootType.RECENT))


@pytest.fixture
def crostini_item() -> FakeItem:
    return FakeItem(
        "linux-files-label",
        NavigationItemType.CROSTINI,
        FakeEntry("linux-files-label", RootType.CROSTINI),
    )


@pytest.fixture
def android_item() -> FakeItem:
    return FakeItem(
        "play-files-label",
        NavigationItemType.ANDROID_FILES,
        FakeEntry("play-files-label", RootType.ANDROID_FILES),
    )
