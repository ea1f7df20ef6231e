import logging
from typing import Iterable, List
from .models import Partition

logger = logging.getLogger(__name__)

# Unmounting any of these would break the running system
PROTECTED_MOUNT_POINTS = frozenset({"/", "/boot", "/home"})

def is_protected(partition: Partition) -> bool:
    return partition.mount_location.strip() in PROTECTED_MOUNT_POINTS

def is_eligible(partition: Partition, no_filter: bool) -> bool:
    """
    Decides whether a partition may be offered to the user.
    A node with children is eligible as soon as any child is, even when
    the node itself sits on a protected mount point.
    """
    if no_filter:
        return True

    if partition.children:
        return any(is_eligible(child, no_filter) for child in partition.children)

    return not is_protected(partition)

def eligible_partitions(partitions: Iterable[Partition], no_filter: bool) -> List[Partition]:
    """Top-level partitions that pass is_eligible, in listing order."""
    eligible = []
    for p in partitions:
        if is_eligible(p, no_filter):
            eligible.append(p)
        else:
            logger.debug(f"Hiding {p.address} (mounted at {p.mount_location})")
    return eligible
