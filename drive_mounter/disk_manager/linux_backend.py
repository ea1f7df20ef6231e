import json
import logging
from typing import Any, List
from .models import NOT_AVAILABLE, Partition
from .utils import run_command
from ..services.errors import DeviceListingError

logger = logging.getLogger(__name__)

LSBLK_COMMAND = [
    "lsblk",
    "-J",       # JSON output
    "-o", "NAME,SIZE,FSTYPE,MOUNTPOINT,TYPE"
]

def _or_na(value: Any) -> Any:
    return NOT_AVAILABLE if value is None else value

def _children_of(dev: dict) -> List[dict]:
    children = dev.get("children")
    if children is None:
        return []
    if not isinstance(children, list):
        raise DeviceListingError(f"{dev.get('name')}: 'children' must be a list")
    for child in children:
        if not isinstance(child, dict):
            raise DeviceListingError(f"{dev.get('name')}: every child must be an object")
    return children

def _normalize_device(dev: dict) -> dict:
    """Map lsblk nulls to the N/A sentinel, recursively."""
    entry = {
        "name": dev.get("name"),
        "size": dev.get("size"),
        "fstype": _or_na(dev.get("fstype")),
        "mountpoint": _or_na(dev.get("mountpoint")),
    }
    children = _children_of(dev)
    if children:
        entry["children"] = [_normalize_device(c) for c in children]
    return entry

def flatten_lsblk(data: Any) -> List[dict]:
    """
    Turns raw `lsblk -J` output into the partition listing shape:
    the children of every top-level disk, with nulls replaced by N/A.
    """
    if not isinstance(data, dict) or not isinstance(data.get("blockdevices"), list):
        raise DeviceListingError("lsblk output has no 'blockdevices' list")

    listing = []
    for dev in data["blockdevices"]:
        if not isinstance(dev, dict):
            raise DeviceListingError("every block device must be an object")
        if dev.get("type") != "disk":
            continue
        for child in _children_of(dev):
            listing.append(_normalize_device(child))
    return listing

def _partition_from_dict(entry: Any, path: str) -> Partition:
    if not isinstance(entry, dict):
        raise DeviceListingError(f"{path}: expected an object, got {type(entry).__name__}")

    values = {}
    for key in ("name", "size", "fstype", "mountpoint"):
        value = entry.get(key)
        if not isinstance(value, str):
            raise DeviceListingError(f"{path}: field '{key}' must be a string")
        values[key] = value

    raw_children = entry.get("children")
    if raw_children is None:
        raw_children = []
    if not isinstance(raw_children, list):
        raise DeviceListingError(f"{path}: field 'children' must be a list")

    return Partition(
        name=values["name"],
        size=values["size"],
        filesystem_type=values["fstype"],
        mount_location=values["mountpoint"],
        children=[
            _partition_from_dict(child, f"{path}.children[{i}]")
            for i, child in enumerate(raw_children)
        ]
    )

def partitions_from_listing(listing: Any) -> List[Partition]:
    if not isinstance(listing, list):
        raise DeviceListingError("Partition listing must be a JSON array")
    return [_partition_from_dict(entry, f"[{i}]") for i, entry in enumerate(listing)]

def parse_partitions(text: str) -> List[Partition]:
    """
    Deserializes a JSON array of partitions (name, size, fstype, mountpoint, children?).
    Raises DeviceListingError on anything that does not match that shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeviceListingError(f"Failed to parse partition listing: {e}") from e

    return partitions_from_listing(data)

def parse_linux_partitions() -> List[Partition]:
    """
    Uses lsblk to get the partitions of every disk in Linux.
    Returns the top-level partitions with their nested volumes.
    """
    success, output = run_command(LSBLK_COMMAND)
    if not success:
        raise DeviceListingError(f"Failed to run lsblk: {output}")

    try:
        data = json.loads(output)
    except json.JSONDecodeError as e:
        raise DeviceListingError(f"Failed to parse lsblk JSON output: {e}") from e

    partitions = partitions_from_listing(flatten_lsblk(data))
    logger.debug(f"lsblk reported {len(partitions)} top-level partitions")
    return partitions
