from dataclasses import dataclass, field
from typing import List, Optional

# lsblk reports missing values as null, we store this sentinel instead
NOT_AVAILABLE = "N/A"

@dataclass
class Partition:
    """A block device node as reported by lsblk, with its nested volumes."""
    name: str  # e.g. 'sda1', unique among siblings only
    size: str  # human readable, passed through as is
    filesystem_type: str = NOT_AVAILABLE  # e.g. 'ext4', 'crypto_LUKS'
    mount_location: str = NOT_AVAILABLE
    children: List["Partition"] = field(default_factory=list)

    @property
    def is_mounted(self) -> bool:
        return self.mount_location != NOT_AVAILABLE

    @property
    def address(self) -> str:
        return f"/dev/{self.name}"

    def to_dict(self):
        """Helper to serialize back to the listing shape (used for debug logging)."""
        return {
            'name': self.name,
            'size': self.size,
            'fstype': self.filesystem_type,
            'mountpoint': self.mount_location,
            'children': [c.to_dict() for c in self.children]
        }

@dataclass(frozen=True)
class MountPoint:
    """Everything the mount command needs for a single mount."""
    address: str  # e.g. /dev/sdb1
    mount_location: str  # destination directory
    name: str = ""
    flags: str = ""  # passed to mount -o
    ask_for_password: Optional[bool] = None
