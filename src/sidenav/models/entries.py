"""Directory entry abstraction used by navigation items.

Entries expose ``name``, ``full_path``, ``is_directory``, ``to_url()`` and
``create_reader()``. A reader hands out its children in batches through
``read_entries(on_success, on_error=None)``; an empty batch marks the end.
"""

from __future__ import annotations

import os
import posixpath
from enum import Enum
from pathlib import Path

from PySide6.QtCore import QTimer

from sidenav.debug_log import debug_exception, debug_log


class RootType(Enum):
    MY_FILES = "my_files"
    RECENT = "recent"
    CROSTINI = "crostini"
    ANDROID_FILES = "android_files"


class StaticReader:
    """Delivers a fixed list of entries synchronously, then an empty batch."""

    def __init__(self, entries):
        self._entries = list(entries)
        self._done = False

    def read_entries(self, on_success, on_error=None):
        if self._done:
            on_success([])
            return
        self._done = True
        on_success(list(self._entries))


class LocalDirectoryReader:
    def __init__(self, entry: FileEntry, batch_size: int = 100):
        self.entry = entry
        self.batch_size = max(1, int(batch_size))
        self._pending: list[FileEntry] | None = None

    def read_entries(self, on_success, on_error=None):
        QTimer.singleShot(0, lambda: self._deliver(on_success, on_error))

    def _deliver(self, on_success, on_error):
        if self._pending is None:
            try:
                self._pending = self._scan()
            except OSError as error:
                debug_exception(f"Reading {self.entry.local_path} failed", error)
                if on_error is not None:
                    on_error(error)
                else:
                    on_success([])
                return

        batch = self._pending[:self.batch_size]
        del self._pending[:self.batch_size]
        on_success(batch)

    def _scan(self):
        children = []
        with os.scandir(self.entry.local_path) as iterator:
            for child in iterator:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    continue
                children.append(
                    FileEntry(
                        self.entry.filesystem_name,
                        posixpath.join(self.entry.full_path, child.name),
                        is_directory=is_dir,
                        local_path=Path(child.path),
                        batch_size=self.batch_size,
                    )
                )
        children.sort(key=lambda child: child.name)
        debug_log(f"Scanned {self.entry.local_path}: {len(children)} entries")
        return children


class CombinedReader:
    """Reads several readers one after another, skipping repeated names.

    Readers listed first win: an entry whose name was already delivered
    by an earlier reader is dropped.
    """

    def __init__(self, readers):
        self._readers = list(readers)
        self._index = 0
        self._seen_names: set[str] = set()

    def read_entries(self, on_success, on_error=None):
        if self._index >= len(self._readers):
            on_success([])
            return

        def handle_batch(entries):
            if not entries:
                self._index += 1
                self.read_entries(on_success, on_error)
                return

            fresh = []
            for entry in entries:
                if entry.name in self._seen_names:
                    continue
                self._seen_names.add(entry.name)
                fresh.append(entry)

            if not fresh:
                self.read_entries(on_success, on_error)
                return
            on_success(fresh)

        self._readers[self._index].read_entries(handle_batch, on_error)


class FileEntry:
    def __init__(self, filesystem_name, full_path, is_directory=True, local_path=None, batch_size=100):
        self.filesystem_name = filesystem_name
        self.full_path = full_path or '/'
        self.is_directory = bool(is_directory)
        self.local_path = Path(local_path) if local_path is not None else None
        self.batch_size = batch_size

    @property
    def name(self):
        return posixpath.basename(self.full_path.rstrip('/'))

    @property
    def is_file(self):
        return not self.is_directory

    def to_url(self):
        return f"filesystem:{self.filesystem_name}{self.full_path}"

    def create_reader(self, batch_size=None):
        if not self.is_directory or self.local_path is None:
            return StaticReader([])
        return LocalDirectoryReader(self, batch_size=batch_size or self.batch_size)

    def __repr__(self):
        return f"FileEntry({self.to_url()!r})"


class FakeEntry:
    is_directory = True
    is_file = False

    def __init__(self, label, root_type: RootType):
        self.label = label
        self.root_type = root_type

    @property
    def name(self):
        return self.label

    @property
    def full_path(self):
        return '/' + self.label

    def to_url(self):
        return f"fake-entry://{self.root_type.value}"

    def create_reader(self, batch_size=None):
        return StaticReader([])

    def __repr__(self):
        return f"FakeEntry({self.label!r}, {self.root_type.value!r})"


class VolumeEntry:
    """Root of a mounted volume, shown under a display name inside an entry list."""

    is_directory = True
    is_file = False

    def __init__(self, volume_info, label=None):
        self.volume_info = volume_info
        self.label = label

    @property
    def root(self):
        return self.volume_info.root

    @property
    def volume_type(self):
        return self.volume_info.volume_type

    @property
    def name(self):
        return self.label or self.volume_info.display_label

    @property
    def full_path(self):
        return '/'

    def to_url(self):
        if self.root is not None:
            return self.root.to_url()
        return f"filesystem:{self.volume_info.volume_id}/"

    def create_reader(self, batch_size=None):
        if self.root is None:
            return StaticReader([])
        return self.root.create_reader(batch_size)

    def __repr__(self):
        return f"VolumeEntry({self.volume_info.volume_id!r})"


class EntryList:
    """Synthetic directory owning an ordered list of UI children.

    ``real_directory`` optionally points to a real directory whose contents
    are listed after the UI children.
    """

    is_directory = True
    is_file = False

    def __init__(self, label, root_type: RootType, real_directory=None, batch_size=None):
        self.label = label
        self.root_type = root_type
        self.real_directory = real_directory
        self.batch_size = batch_size
        self._ui_children = []

    @property
    def name(self):
        return self.label

    @property
    def full_path(self):
        return '/'

    def to_url(self):
        return f"entry-list://{self.root_type.value}"

    def get_ui_children(self):
        return list(self._ui_children)

    def set_ui_children(self, children):
        self._ui_children[:] = list(children)

    def add_entry(self, entry):
        self._ui_children.append(entry)

    def remove_by_root_type(self, root_type):
        before = len(self._ui_children)
        self._ui_children[:] = [
            child for child in self._ui_children
            if getattr(child, 'root_type', None) != root_type
        ]
        return before != len(self._ui_children)

    def create_reader(self, batch_size=None):
        readers = [StaticReader(self._ui_children)]
        if self.real_directory is not None:
            readers.append(self.real_directory.create_reader(batch_size or self.batch_size))
        return CombinedReader(readers)

    def __repr__(self):
        return f"EntryList({self.label!r}, children={len(self._ui_children)})"
