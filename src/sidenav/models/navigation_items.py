"""Rows of the navigation list.

Every item has an ``item_type`` discriminant, a display ``label`` and a
``section`` assigned while ordering. Items compare by identity so that a
rebuilt list can be diffed against the previous one.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Union

from sidenav.models.entries import EntryList, FakeEntry, RootType
from sidenav.models.volumes import VolumeInfo, VolumeType
from sidenav.settings import NavigationSettings


class NavigationItemType(Enum):
    VOLUME = "volume"
    SHORTCUT = "shortcut"
    RECENT = "recent"
    CROSTINI = "crostini"
    ANDROID_FILES = "android_files"
    ENTRY_LIST = "entry_list"


FAKE_ITEM_TYPES = frozenset({
    NavigationItemType.RECENT,
    NavigationItemType.CROSTINI,
    NavigationItemType.ANDROID_FILES,
})


class NavigationSection(IntEnum):
    TOP = 0
    MY_FILES = 1
    CLOUD = 2
    REMOVABLE = 3


class VolumeItem:
    item_type = NavigationItemType.VOLUME

    def __init__(self, label: str, volume_info: VolumeInfo):
        self.label = label
        self.volume_info = volume_info
        self.section = NavigationSection.TOP

    @property
    def volume_type(self) -> VolumeType:
        return self.volume_info.volume_type

    @property
    def entry(self):
        return self.volume_info.root

    def __repr__(self):
        return f"VolumeItem({self.label!r}, {self.volume_info.volume_id!r}, {self.section.name})"


class ShortcutItem:
    item_type = NavigationItemType.SHORTCUT

    def __init__(self, label: str, entry):
        self.label = label
        self.entry = entry
        self.section = NavigationSection.TOP

    def __repr__(self):
        return f"ShortcutItem({self.label!r}, {self.entry.to_url()!r})"


class FakeItem:
    def __init__(self, label: str, item_type: NavigationItemType, entry):
        if item_type not in FAKE_ITEM_TYPES:
            raise ValueError(f"{item_type} is not a fake item type")
        self.label = label
        self.item_type = item_type
        self.entry = entry
        self.section = NavigationSection.TOP

    def __repr__(self):
        return f"FakeItem({self.label!r}, {self.item_type.value!r})"


class EntryListItem:
    item_type = NavigationItemType.ENTRY_LIST

    def __init__(self, label: str, entry: EntryList):
        self.label = label
        self.entry = entry
        self.section = NavigationSection.MY_FILES

    def __repr__(self):
        return f"EntryListItem({self.label!r}, {self.entry!r})"


NavigationItem = Union[VolumeItem, ShortcutItem, FakeItem, EntryListItem]


FAKE_ROOT_TYPES = {
    NavigationItemType.RECENT: RootType.RECENT,
    NavigationItemType.CROSTINI: RootType.CROSTINI,
    NavigationItemType.ANDROID_FILES: RootType.ANDROID_FILES,
}


def create_fake_item(item_type: NavigationItemType, settings: NavigationSettings | None = None, label: str | None = None) -> FakeItem:
    settings = settings or NavigationSettings()
    if label is None:
        label = {
            NavigationItemType.RECENT: settings.recent_label,
            NavigationItemType.CROSTINI: settings.linux_files_label,
            NavigationItemType.ANDROID_FILES: settings.play_files_label,
        }.get(item_type)
    if item_type not in FAKE_ROOT_TYPES:
        raise ValueError(f"{item_type} is not a fake item type")
    return FakeItem(label, item_type, FakeEntry(label, FAKE_ROOT_TYPES[item_type]))
