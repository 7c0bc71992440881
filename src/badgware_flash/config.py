"""
Runtime defaults for Badgware Flash.

Values can be overridden through environment variables so the tool works
inside containers where picotool lives outside PATH or backups are mounted
on a volume.
"""

import os

PICOTOOL_ENV = "BADGWARE_FLASH_PICOTOOL"
BACKUP_DIR_ENV = "BADGWARE_FLASH_BACKUP_DIR"

DEFAULT_BOARD = "tufty"
DEFAULT_BACKUP_DIR = "backups"
PICOTOOL_EXECUTABLE = "picotool"

# Lines of `picotool info` shown before a dump
DEVICE_INFO_LINES = 5

TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"
CLI_NAME = "badgware-flash"


def get_picotool_executable() -> str:
    """Return the picotool executable name or path."""
    value = os.getenv(PICOTOOL_ENV, "").strip()
    return value or PICOTOOL_EXECUTABLE


def get_backup_dir() -> str:
    """Return the default backup directory."""
    value = os.getenv(BACKUP_DIR_ENV, "").strip()
    return value or DEFAULT_BACKUP_DIR
