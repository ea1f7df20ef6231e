import os
import shlex
import logging
from typing import List
from ..disk_manager.models import MountPoint
from ..disk_manager.utils import run_command

logger = logging.getLogger(__name__)

def _elevation_prefix(config, ask_for_password=None) -> List[str]:
    prefix = shlex.split(str(config.get('MOUNT_ELEVATE') or ""))
    if prefix and os.path.basename(prefix[0]) == "sudo" and ask_for_password is False:
        prefix.append("-n")
    return prefix

def build_mount_command(mount_point: MountPoint, config) -> List[str]:
    cmd = _elevation_prefix(config, mount_point.ask_for_password) + ["mount"]
    if mount_point.flags:
        cmd += ["-o", str(mount_point.flags)]
    cmd += [mount_point.address, mount_point.mount_location]
    return cmd

def build_unmount_command(path: str, config) -> List[str]:
    return _elevation_prefix(config) + ["umount", path]

def mount(mount_point: MountPoint, preferences) -> bool:
    """
    Mounts mount_point.address on mount_point.mount_location.
    Failures are logged, never raised.
    """
    config = preferences.config
    target = mount_point.mount_location

    if config.get('MOUNT_CREATE_DIRS', True) and not os.path.isdir(target):
        try:
            os.makedirs(target)
            logger.info(f"Created directory: {target}")
        except OSError as e:
            # mount fails on its own if the target is unusable
            logger.warning(f"Could not create {target}: {e}")

    logger.info(f"Mounting {mount_point.address} on {target}...")
    success, output = run_command(build_mount_command(mount_point, config))
    if success:
        logger.info(f"[OK] {mount_point.address} mounted on {target}")
    else:
        logger.error(f"Mount failed: {output}")
    return success

def unmount(path: str, config) -> bool:
    """Unmounts whatever is mounted on path. Failures are logged, never raised."""
    logger.info(f"Unmounting {path}...")
    success, output = run_command(build_unmount_command(path, config))
    if success:
        logger.info(f"[OK] {path} unmounted successfully")
    else:
        logger.error(f"Unmount failed: {output}")
    return success
