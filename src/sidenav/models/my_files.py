from __future__ import annotations

from sidenav.debug_log import debug_log
from sidenav.models.entries import EntryList, RootType, VolumeEntry
from sidenav.models.navigation_items import EntryListItem
from sidenav.models.volumes import VolumeType
from sidenav.settings import NavigationSettings


class MyFilesBuilder:
    """Builds the single "My files" row and keeps reusing it.

    The row keeps the same ``EntryListItem`` and ``EntryList`` for the
    builder's whole life; each ``build`` only swaps the children.
    """

    def __init__(self, settings: NavigationSettings | None = None):
        self.settings = settings or NavigationSettings()
        self._item: EntryListItem | None = None
        self._volume_entries: dict[str, VolumeEntry] = {}

    @property
    def item(self):
        return self._item

    def ensure_item(self) -> EntryListItem:
        """Return the My files row, creating it on first use without children."""
        if self._item is None:
            entry_list = EntryList(
                self.settings.my_files_label,
                RootType.MY_FILES,
                batch_size=self.settings.read_batch_size,
            )
            self._item = EntryListItem(self.settings.my_files_label, entry_list)
            debug_log("MyFilesBuilder: created My files item")
        return self._item

    def build(self, volumes, android_item=None, crostini_item=None) -> EntryListItem:
        volumes = list(volumes)
        downloads_volume = _first_of_type(volumes, VolumeType.DOWNLOADS)
        android_volume = _first_of_type(volumes, VolumeType.ANDROID_FILES)
        crostini_volume = _first_of_type(volumes, VolumeType.CROSTINI)

        entry_list = self.ensure_item().entry
        children = []
        if self.settings.unified_my_files:
            entry_list.real_directory = downloads_volume.root if downloads_volume is not None else None
        else:
            entry_list.real_directory = None
            if downloads_volume is not None:
                children.append(self._volume_entry(downloads_volume, self.settings.downloads_label))

        if android_volume is not None:
            children.append(self._volume_entry(android_volume))
        elif android_item is not None:
            children.append(android_item.entry)

        if crostini_volume is not None:
            children.append(self._volume_entry(crostini_volume))
        elif crostini_item is not None:
            children.append(crostini_item.entry)

        entry_list.set_ui_children(children)
        self._forget_unmounted(volumes)
        return self._item

    def _volume_entry(self, volume_info, label=None):
        entry = self._volume_entries.get(volume_info.volume_id)
        if entry is None:
            entry = VolumeEntry(volume_info, label)
            self._volume_entries[volume_info.volume_id] = entry
        else:
            entry.volume_info = volume_info
            entry.label = label
        return entry

    def _forget_unmounted(self, volumes):
        mounted = {volume.volume_id for volume in volumes}
        for volume_id in list(self._volume_entries):
            if volume_id not in mounted:
                del self._volume_entries[volume_id]


def _first_of_type(volumes, volume_type):
    for volume in volumes:
        if volume.volume_type == volume_type:
            return volume
    return None
