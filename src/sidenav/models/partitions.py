from __future__ import annotations

from sidenav.debug_log import debug_warning
from sidenav.errors import PartitionOrderError


def find_split_devices(items) -> dict[str, list[int]]:
    """Return device paths whose volumes are not adjacent, with their positions."""
    positions: dict[str, list[int]] = {}
    for index, item in enumerate(items):
        device_path = item.volume_info.device_path
        if not device_path:
            continue
        positions.setdefault(device_path, []).append(index)

    split = {}
    for device_path, indexes in positions.items():
        if indexes[-1] - indexes[0] + 1 != len(indexes):
            split[device_path] = indexes
    return split


def group_partitions(items, strict=False):
    """Keep removable volumes in mount order.

    The volume manager mounts all partitions of a device together, so
    same-device volumes are expected to be adjacent already. Nothing is
    re-sorted here.
    """
    items = list(items)
    for device_path, indexes in find_split_devices(items).items():
        if strict:
            raise PartitionOrderError(device_path, indexes)
        debug_warning(f"Partitions of {device_path} are not adjacent: {indexes}")
    return items
