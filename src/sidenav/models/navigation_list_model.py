from __future__ import annotations

import difflib

from PySide6.QtCore import QAbstractListModel, QByteArray, QModelIndex, Qt, Signal

from sidenav.debug_log import debug_exception, debug_log, debug_warning
from sidenav.errors import NavigationModelError
from sidenav.models.my_files import MyFilesBuilder
from sidenav.models.navigation_items import ShortcutItem, VolumeItem
from sidenav.models.ordering import check_recent_item, order_and_nest_items
from sidenav.models.sections import NESTED_VOLUME_TYPES
from sidenav.models.volumes import VolumeType
from sidenav.settings import NavigationSettings


ROLE_ITEM = Qt.ItemDataRole.UserRole
ROLE_SECTION = Qt.ItemDataRole.UserRole + 1
ROLE_ITEM_TYPE = Qt.ItemDataRole.UserRole + 2
ROLE_URL = Qt.ItemDataRole.UserRole + 3


class NavigationListModel(QAbstractListModel):
    """Side panel rows built from volumes, shortcuts and synthetic items.

    The model is read-only for views. It rebuilds itself whenever the
    volume list or shortcut list changes, or when one of the fake items is
    reassigned, and publishes the difference as Qt row insert/remove
    notifications followed by ``listChanged``.

    A rebuild either completes or leaves the model as it was. When a
    source-driven rebuild fails, ``rebuildFailed`` carries the message;
    direct calls to ``reorder`` raise instead.
    """

    listChanged = Signal()
    rebuildFailed = Signal(str)

    def __init__(self, volume_list, shortcut_list, recent_item=None, settings=None, my_files_builder=None, parent=None):
        super().__init__(parent)
        self.settings = settings or NavigationSettings()
        self.volume_list = volume_list
        self.shortcut_list = shortcut_list
        self.my_files_builder = my_files_builder or MyFilesBuilder(self.settings)
        self._recent_item = check_recent_item(recent_item)
        self._linux_files_item = None
        self._android_files_item = None
        self._volume_items: dict[str, VolumeItem] = {}
        self._shortcut_items: dict[str, ShortcutItem] = {}
        self._items = []
        self._reordering = False
        self._reorder_pending = False

        self.volume_list.volumeAdded.connect(self._on_volume_list_changed)
        self.volume_list.volumeRemoved.connect(self._on_volume_list_changed)
        self.shortcut_list.shortcutsInserted.connect(self._on_shortcut_list_changed)
        self.shortcut_list.shortcutsRemoved.connect(self._on_shortcut_list_changed)

        self.reorder()

    @property
    def length(self):
        return len(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self.item(index)

    def __iter__(self):
        return iter(list(self._items))

    def item(self, index):
        if index < 0 or index >= len(self._items):
            raise IndexError(f"Navigation item index out of range: {index} (length {len(self._items)})")
        return self._items[index]

    def items(self):
        return list(self._items)

    def subscribe(self, callback):
        self.listChanged.connect(callback)

    def unsubscribe(self, callback):
        self.listChanged.disconnect(callback)

    @property
    def recent_item(self):
        return self._recent_item

    @recent_item.setter
    def recent_item(self, item):
        self._recent_item = check_recent_item(item)
        self.reorder()

    @property
    def linux_files_item(self):
        return self._linux_files_item

    @linux_files_item.setter
    def linux_files_item(self, item):
        self._linux_files_item = item
        self.reorder()

    @property
    def android_files_item(self):
        return self._android_files_item

    @android_files_item.setter
    def android_files_item(self, item):
        self._android_files_item = item
        self.reorder()

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._items)

    def data(self, index, role=Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or index.row() < 0 or index.row() >= len(self._items):
            return None

        item = self._items[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            return item.label
        if role == ROLE_ITEM:
            return item
        if role == ROLE_SECTION:
            return item.section.name
        if role == ROLE_ITEM_TYPE:
            return item.item_type.value
        if role == ROLE_URL:
            return item.entry.to_url() if item.entry is not None else None
        return None

    def roleNames(self):
        return {
            int(Qt.ItemDataRole.DisplayRole): QByteArray(b"label"),
            int(ROLE_ITEM): QByteArray(b"item"),
            int(ROLE_SECTION): QByteArray(b"section"),
            int(ROLE_ITEM_TYPE): QByteArray(b"itemType"),
            int(ROLE_URL): QByteArray(b"url"),
        }

    def reorder(self):
        if self._reordering:
            self._reorder_pending = True
            return

        self._reordering = True
        try:
            while True:
                self._reorder_pending = False
                self._rebuild()
                if not self._reorder_pending:
                    break
        finally:
            self._reordering = False
            self._reorder_pending = False

    def _on_volume_list_changed(self, index):
        debug_log(f"NavigationListModel: volume list changed at {index}")
        self._reorder_from_source()

    def _on_shortcut_list_changed(self, index, count):
        debug_log(f"NavigationListModel: shortcut list changed at {index} ({count})")
        self._reorder_from_source()

    def _reorder_from_source(self):
        try:
            self.reorder()
        except NavigationModelError as error:
            debug_exception("NavigationListModel: rebuild failed", error)
            self.rebuildFailed.emit(str(error))

    def _rebuild(self):
        volumes = list(self.volume_list)
        first_build = self.my_files_builder.item is None
        my_files_item = self.my_files_builder.ensure_item()
        previous_children = None if first_build else my_files_item.entry.get_ui_children()

        volume_items, volume_cache, updates = self._collect_volume_items(volumes)
        shortcut_items, shortcut_cache = self._collect_shortcut_items()

        previous = [(item, item.volume_info, item.label) for item, _, _ in updates]
        for item, volume_info, label in updates:
            item.volume_info = volume_info
            item.label = label
        try:
            new_items = order_and_nest_items(
                volume_items,
                shortcut_items,
                self._recent_item,
                my_files_item,
                self.settings,
            )
        except Exception:
            for item, volume_info, label in previous:
                item.volume_info = volume_info
                item.label = label
            raise

        self._volume_items = volume_cache
        self._shortcut_items = shortcut_cache
        relabeled = [item for item, _, label in previous if item.label != label]
        self.my_files_builder.build(volumes, self._android_files_item, self._linux_files_item)
        changed = self._apply(new_items)

        if previous_children is not None and previous_children != my_files_item.entry.get_ui_children():
            relabeled.append(my_files_item)
        for item in relabeled:
            if item not in self._items:
                continue
            row = self._items.index(item)
            model_index = self.index(row, 0)
            self.dataChanged.emit(model_index, model_index)

        debug_log(f"NavigationListModel: rebuilt {len(self._items)} items (changed={changed})")
        if changed:
            self.listChanged.emit()

    def _collect_volume_items(self, volumes):
        """Match volumes to cached rows without touching the cache.

        Returns the rows, the cache to keep after a successful rebuild and
        the ``(item, volume_info, label)`` updates for reused rows.
        """
        items = []
        cache = {}
        updates = []
        for volume_info in volumes:
            if volume_info.volume_type in NESTED_VOLUME_TYPES:
                continue

            label = self._volume_label(volume_info)
            item = self._volume_items.get(volume_info.volume_id)
            if item is None:
                item = VolumeItem(label, volume_info)
            elif item.volume_info is not volume_info or item.label != label:
                updates.append((item, volume_info, label))
            cache[volume_info.volume_id] = item
            items.append(item)
        return items, cache, updates

    def _volume_label(self, volume_info):
        if volume_info.volume_type == VolumeType.DRIVE:
            return self.settings.drive_label
        return volume_info.display_label

    def _collect_shortcut_items(self):
        items = []
        cache = {}
        for entry in self.shortcut_list:
            url = entry.to_url()
            if url in cache:
                debug_warning(f"NavigationListModel: duplicate shortcut {url} ignored")
                continue

            item = self._shortcut_items.get(url)
            if item is None or item.entry is not entry:
                item = ShortcutItem(entry.name, entry)
            cache[url] = item
            items.append(item)
        return items, cache

    def _apply(self, new_items):
        old_keys = [id(item) for item in self._items]
        new_keys = [id(item) for item in new_items]
        if old_keys == new_keys:
            return False

        matcher = difflib.SequenceMatcher(None, old_keys, new_keys, autojunk=False)
        # Walk backwards so earlier row numbers stay valid.
        for tag, i1, i2, j1, j2 in reversed(matcher.get_opcodes()):
            if tag == 'equal':
                continue
            if tag in ('delete', 'replace'):
                self.beginRemoveRows(QModelIndex(), i1, i2 - 1)
                del self._items[i1:i2]
                self.endRemoveRows()
            if tag in ('insert', 'replace'):
                self.beginInsertRows(QModelIndex(), i1, i1 + (j2 - j1) - 1)
                self._items[i1:i1] = new_items[j1:j2]
                self.endInsertRows()
        return True
