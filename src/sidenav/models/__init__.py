from sidenav.models.entries import CombinedReader, EntryList, FakeEntry, FileEntry, RootType, StaticReader, VolumeEntry
from sidenav.models.my_files import MyFilesBuilder
from sidenav.models.navigation_items import (
    EntryListItem,
    FakeItem,
    NavigationItem,
    NavigationItemType,
    NavigationSection,
    ShortcutItem,
    VolumeItem,
    create_fake_item,
)
from sidenav.models.navigation_list_model import NavigationListModel
from sidenav.models.ordering import order_and_nest_items
from sidenav.models.partitions import group_partitions
from sidenav.models.sections import classify
from sidenav.models.shortcuts import FolderShortcutList
from sidenav.models.volumes import VolumeInfo, VolumeInfoList, VolumeType

__all__ = [
    "CombinedReader",
    "EntryList",
    "EntryListItem",
    "FakeEntry",
    "FakeItem",
    "FileEntry",
    "FolderShortcutList",
    "MyFilesBuilder",
    "NavigationItem",
    "NavigationItemType",
    "NavigationListModel",
    "NavigationSection",
    "RootType",
    "ShortcutItem",
    "StaticReader",
    "VolumeEntry",
    "VolumeInfo",
    "VolumeInfoList",
    "VolumeItem",
    "VolumeType",
    "classify",
    "create_fake_item",
    "group_partitions",
    "order_and_nest_items",
]
