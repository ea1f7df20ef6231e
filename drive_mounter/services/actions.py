import enum
import logging
from ..disk_manager.core import get_all_partitions, get_offered_partitions, render_options
from ..disk_manager.models import MountPoint, Partition
from ..utils import normalize_mount_location
from . import mounting
from .pickers import Picker, get_picker

logger = logging.getLogger(__name__)

SELECT_PROMPT = "Choose a mount point"
LOCATION_PROMPT = "Enter mount location (for example /mnt)"

class Action(enum.Enum):
    MOUNT = "mount"
    UNMOUNT = "unmount"

def dispatch(partition: Partition, picker: Picker, preferences, mounter=mounting) -> Action:
    """
    Unmounts a mounted partition, otherwise asks for a destination and mounts it.
    The outcome of the mount/unmount itself is left to the mounter.
    """
    if partition.is_mounted:
        mounter.unmount(partition.mount_location, preferences.config)
        return Action.UNMOUNT

    location = normalize_mount_location(picker.input_text(LOCATION_PROMPT))
    mount_point = MountPoint(
        address=partition.address,
        mount_location=location,
        flags=str(preferences.get('MOUNT_FLAGS') or ""),
    )
    mounter.mount(mount_point, preferences)
    return Action.MOUNT

def run_all(no_filter: bool, preferences, list_partitions=get_all_partitions, mounter=mounting) -> Action:
    """Lists partitions, lets the user pick one, then mounts or unmounts it."""
    offered = get_offered_partitions(list_partitions(), no_filter)
    options = render_options(offered)

    picker = get_picker(preferences)
    selection = picker.select(SELECT_PROMPT, options)
    partition = offered[selection]
    logger.debug(f"Selected {partition.address}: {partition.to_dict()}")

    return dispatch(partition, picker, preferences, mounter)
