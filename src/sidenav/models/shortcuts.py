from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from sidenav.debug_log import debug_log


class FolderShortcutList(QObject):
    """Ordered folder shortcuts with splice-style change notifications."""

    shortcutsInserted = Signal(int, int)
    shortcutsRemoved = Signal(int, int)

    def __init__(self, entries=None, parent=None):
        super().__init__(parent)
        self._entries = list(entries or [])

    @property
    def length(self):
        return len(self._entries)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    def item(self, index):
        if index < 0 or index >= len(self._entries):
            raise IndexError(f"Shortcut index out of range: {index}")
        return self._entries[index]

    def splice(self, index, delete_count, *entries):
        index = max(0, min(int(index), len(self._entries)))
        delete_count = max(0, min(int(delete_count), len(self._entries) - index))

        removed = self._entries[index:index + delete_count]
        self._entries[index:index + delete_count] = list(entries)
        debug_log(
            f"FolderShortcutList.splice(index={index}, removed={len(removed)}, inserted={len(entries)})"
        )

        if removed:
            self.shortcutsRemoved.emit(index, len(removed))
        if entries:
            self.shortcutsInserted.emit(index, len(entries))
        return removed

    def insert(self, index, entries):
        self.splice(index, 0, *entries)

    def remove(self, index, count=1):
        return self.splice(index, count)

    def index_of(self, entry):
        url = entry.to_url()
        for index, existing in enumerate(self._entries):
            if existing.to_url() == url:
                return index
        return -1
