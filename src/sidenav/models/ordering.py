"""Merge volumes, shortcuts and synthetic rows into one sectioned list.

The result is always laid out as TOP, MY_FILES, CLOUD, REMOVABLE:

* TOP: Recent, media views in mount order, shortcuts sorted by label.
* MY_FILES: the My files row.
* CLOUD: Drive first, then provided file systems in mount order.
* REMOVABLE: removable, archive and MTP volumes in mount order.
"""

from __future__ import annotations

from sidenav.debug_log import debug_exception
from sidenav.errors import NestedItemError, UnknownVolumeTypeError
from sidenav.models.navigation_items import NavigationItemType, NavigationSection
from sidenav.models.partitions import group_partitions
from sidenav.models.sections import classify
from sidenav.models.volumes import VolumeType
from sidenav.settings import NavigationSettings


def check_recent_item(item):
    if item is not None and item.item_type != NavigationItemType.RECENT:
        raise ValueError(f"Only a Recent item fits the recent slot, got {item.item_type.value!r}")
    return item


def order_and_nest_items(volume_items, shortcut_items, recent_item, my_files_item, settings=None):
    """Return the full row sequence.

    Sections are written to the items only once the whole sequence is
    known, so a ``PartitionOrderError`` leaves every item untouched.
    """
    settings = settings or NavigationSettings()
    check_recent_item(recent_item)

    sections = {}
    media_views = []
    drives = []
    cloud = []
    removable = []

    for item in volume_items:
        try:
            section = classify(item, settings)
        except (UnknownVolumeTypeError, NestedItemError) as error:
            debug_exception(f"Skipping volume {item.volume_info.volume_id}", error)
            continue

        sections[id(item)] = section
        if section == NavigationSection.TOP:
            media_views.append(item)
        elif section == NavigationSection.CLOUD:
            if item.volume_type == VolumeType.DRIVE:
                drives.append(item)
            else:
                cloud.append(item)
        else:
            removable.append(item)

    shortcut_items = list(shortcut_items)
    for item in shortcut_items:
        sections[id(item)] = classify(item, settings)
    # sorted() is stable, equal labels keep insertion order.
    shortcuts = sorted(shortcut_items, key=lambda shortcut: shortcut.label)

    top = []
    if recent_item is not None:
        sections[id(recent_item)] = classify(recent_item, settings)
        top.append(recent_item)
    top.extend(media_views)
    top.extend(shortcuts)

    sections[id(my_files_item)] = classify(my_files_item, settings)

    removable = group_partitions(removable, strict=settings.strict_partition_order)

    result = top + [my_files_item] + drives + cloud + removable
    for item in result:
        item.section = sections[id(item)]
    return result
