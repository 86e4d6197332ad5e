class NavigationModelError(Exception):
    pass


class UnknownVolumeTypeError(NavigationModelError, ValueError):
    def __init__(self, volume_id, volume_type):
        super().__init__(f"Unknown volume type {volume_type!r} for volume {volume_id!r}")
        self.volume_id = volume_id
        self.volume_type = volume_type


class NestedItemError(NavigationModelError):
    """Raised when an item that lives inside My files is classified on its own."""


class PartitionOrderError(NavigationModelError):
    def __init__(self, device_path, positions):
        super().__init__(
            f"Partitions of device {device_path!r} are not contiguous (positions {list(positions)})"
        )
        self.device_path = device_path
        self.positions = list(positions)
