import os
import tomllib
from typing import Optional
from flask import Config as ConfigMapping
from .services.errors import MounterError

ENV_PREFIX = "DRIVE_MOUNTER"

class Config:
    # Use an external dmenu-style picker instead of the terminal menu
    DMENU_USE = False

    # Picker command; 'rofi -dmenu' or 'wofi --dmenu' work as well
    DMENU_COMMAND = "dmenu"
    DMENU_PROMPT_FLAG = "-p"

    # Prefixed to mount/umount, set to "" when already running as root
    MOUNT_ELEVATE = "sudo"

    # Extra options passed to mount -o, e.g. "noatime,uid=1000"
    MOUNT_FLAGS = ""

    # Create the destination directory if it does not exist yet
    MOUNT_CREATE_DIRS = True

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

def default_config_path() -> str:
    base = os.environ.get('XDG_CONFIG_HOME') or os.path.join(os.path.expanduser('~'), '.config')
    return os.path.join(base, 'drive-mounter', 'config.toml')

def load_config(path: Optional[str] = None) -> ConfigMapping:
    """
    Builds the configuration from the defaults above, an optional TOML file
    and DRIVE_MOUNTER_* environment variables, in that order of precedence.
    An explicitly given path must exist.
    """
    config = ConfigMapping(os.getcwd())
    config.from_object(Config)

    try:
        config.from_file(path or default_config_path(), load=tomllib.load, text=False, silent=path is None)
    except OSError as e:
        raise MounterError(f"Unable to load configuration file: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise MounterError(f"Invalid configuration file: {e}") from e

    config.from_prefixed_env(ENV_PREFIX)
    return config

class Preferences:
    """Settings shared by every step of a run, passed around explicitly."""

    def __init__(self, config: ConfigMapping):
        self.config = config

    @property
    def use_dmenu(self) -> bool:
        value = self.config.get('DMENU_USE', False)
        # env values arrive JSON-decoded, so 1 and true are not strings
        return str(value).strip().lower() in ('true', '1', 'yes')

    def get(self, key, default=None):
        return self.config.get(key, default)
