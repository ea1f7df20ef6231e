import platform
import logging
from typing import Iterable, List
from .models import Partition
from .filters import eligible_partitions
from ..services.errors import DeviceListingError, NoDrivesError

logger = logging.getLogger(__name__)

MOUNTED_MARKER = "*"

def get_all_partitions() -> List[Partition]:
    """
    Returns the top-level partitions of every disk on the system.
    """
    os_type = platform.system()
    if os_type != "Linux":
        raise DeviceListingError(f"Unsupported OS: {os_type}. Partition listing needs lsblk.")

    from .linux_backend import parse_linux_partitions
    return parse_linux_partitions()

def render_option(partition: Partition) -> str:
    marker = MOUNTED_MARKER if partition.is_mounted else ""
    return f"Name: {partition.name}, Size: {partition.size}  {marker}"

def render_options(partitions: Iterable[Partition]) -> List[str]:
    return [render_option(p) for p in partitions]

def get_offered_partitions(partitions: Iterable[Partition], no_filter: bool) -> List[Partition]:
    """
    Filters the listing down to what the user may pick from.
    Raises NoDrivesError when nothing is left.
    """
    offered = eligible_partitions(partitions, no_filter)
    if not offered:
        raise NoDrivesError("No drives were found!")
    return offered
