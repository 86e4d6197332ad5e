from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from sidenav.debug_log import debug_log
from sidenav.models.entries import FileEntry


class VolumeType(Enum):
    DOWNLOADS = "downloads"
    DRIVE = "drive"
    REMOVABLE = "removable"
    ARCHIVE = "archive"
    PROVIDED = "provided"
    MTP = "mtp"
    ANDROID_FILES = "android_files"
    MEDIA_VIEW = "media_view"
    CROSTINI = "crostini"


def provider_id_from_volume_id(volume_id):
    # provided:<provider id>:<file system id>
    parts = str(volume_id or '').split(':')
    if len(parts) >= 3 and parts[0] == VolumeType.PROVIDED.value:
        return parts[1]
    return None


@dataclass(eq=False)
class VolumeInfo:
    volume_id: str
    volume_type: VolumeType
    label: str = ""
    device_path: str | None = None
    root: FileEntry | None = None
    provider_id: str | None = None

    def __post_init__(self):
        if self.provider_id is None and self.volume_type == VolumeType.PROVIDED:
            self.provider_id = provider_id_from_volume_id(self.volume_id)
        if self.root is None:
            self.root = FileEntry(self.volume_id, '/')

    @property
    def display_label(self):
        return self.label or self.volume_id

    @classmethod
    def create(cls, volume_type, volume_id, label="", device_path=None, local_path=None, batch_size=100):
        root = FileEntry(volume_id, '/', local_path=Path(local_path) if local_path else None, batch_size=batch_size)
        return cls(
            volume_id=volume_id,
            volume_type=volume_type,
            label=label,
            device_path=device_path or None,
            root=root,
        )


class VolumeInfoList(QObject):
    """Mounted volumes in mount order."""

    volumeAdded = Signal(int)
    volumeRemoved = Signal(int)

    def __init__(self, volumes=None, parent=None):
        super().__init__(parent)
        self._volumes: list[VolumeInfo] = list(volumes or [])

    @property
    def length(self):
        return len(self._volumes)

    def __len__(self):
        return len(self._volumes)

    def __iter__(self):
        return iter(list(self._volumes))

    def item(self, index):
        if index < 0 or index >= len(self._volumes):
            raise IndexError(f"Volume index out of range: {index}")
        return self._volumes[index]

    def find_index(self, volume_id):
        for index, volume in enumerate(self._volumes):
            if volume.volume_id == volume_id:
                return index
        return -1

    def find_by_type(self, volume_type):
        for volume in self._volumes:
            if volume.volume_type == volume_type:
                return volume
        return None

    def add(self, volume_info: VolumeInfo):
        index = self.find_index(volume_info.volume_id)
        if index >= 0:
            # Remounts keep their slot.
            self._volumes[index] = volume_info
            debug_log(f"VolumeInfoList: replaced {volume_info.volume_id} at {index}")
            self.volumeRemoved.emit(index)
            self.volumeAdded.emit(index)
            return index

        self._volumes.append(volume_info)
        index = len(self._volumes) - 1
        debug_log(f"VolumeInfoList: added {volume_info.volume_id} at {index}")
        self.volumeAdded.emit(index)
        return index

    def remove(self, volume_id):
        index = self.find_index(volume_id)
        if index < 0:
            return None
        volume = self._volumes.pop(index)
        debug_log(f"VolumeInfoList: removed {volume_id} from {index}")
        self.volumeRemoved.emit(index)
        return volume
