from __future__ import annotations

from sidenav.errors import NestedItemError, UnknownVolumeTypeError
from sidenav.models.navigation_items import NavigationItemType, NavigationSection
from sidenav.models.volumes import VolumeType


TOP_VOLUME_TYPES = frozenset({VolumeType.MEDIA_VIEW})
CLOUD_VOLUME_TYPES = frozenset({VolumeType.DRIVE, VolumeType.PROVIDED})
REMOVABLE_VOLUME_TYPES = frozenset({VolumeType.REMOVABLE, VolumeType.ARCHIVE, VolumeType.MTP})

# Shown as children of My files, never as rows of their own.
NESTED_VOLUME_TYPES = frozenset({VolumeType.DOWNLOADS, VolumeType.ANDROID_FILES, VolumeType.CROSTINI})
NESTED_FAKE_TYPES = frozenset({NavigationItemType.CROSTINI, NavigationItemType.ANDROID_FILES})


def is_archive_volume(volume_info, settings=None) -> bool:
    if volume_info.volume_type == VolumeType.ARCHIVE:
        return True
    if volume_info.volume_type != VolumeType.PROVIDED or settings is None:
        return False
    return settings.is_archive_provider(volume_info.provider_id)


def classify_volume(volume_info, settings=None) -> NavigationSection:
    volume_type = volume_info.volume_type
    if volume_type in TOP_VOLUME_TYPES:
        return NavigationSection.TOP
    if volume_type in NESTED_VOLUME_TYPES:
        raise NestedItemError(f"Volume {volume_info.volume_id!r} belongs inside My files")
    if is_archive_volume(volume_info, settings):
        return NavigationSection.REMOVABLE
    if volume_type in CLOUD_VOLUME_TYPES:
        return NavigationSection.CLOUD
    if volume_type in REMOVABLE_VOLUME_TYPES:
        return NavigationSection.REMOVABLE
    raise UnknownVolumeTypeError(volume_info.volume_id, volume_type)


def classify(item, settings=None) -> NavigationSection:
    item_type = item.item_type
    if item_type == NavigationItemType.RECENT:
        return NavigationSection.TOP
    if item_type == NavigationItemType.VOLUME:
        return classify_volume(item.volume_info, settings)
    if item_type == NavigationItemType.SHORTCUT:
        return NavigationSection.TOP
    if item_type == NavigationItemType.ENTRY_LIST:
        return NavigationSection.MY_FILES
    if item_type in NESTED_FAKE_TYPES:
        raise NestedItemError(f"{item.label!r} belongs inside My files")
    raise ValueError(f"Unknown navigation item type: {item_type!r}")
