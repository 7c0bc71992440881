"""
Standardized warning and message system for Badgware Flash.

Provides structured warning items with stable codes and remediation hints,
so failures print the same guidance whichever step raised them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from badgware_flash.errors import (
    BadgwareFlashError,
    BackupFileNotFoundError,
    DeviceNotFoundError,
    ExternalToolError,
    MissingArgumentError,
    ToolNotFoundError,
    UnknownBoardError,
)


class MessageLevel(Enum):
    """Severity level for messages."""
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class WarningCode(Enum):
    """Stable warning codes for known conditions."""
    # Environment
    W_TOOL_NOT_FOUND = "W_TOOL_NOT_FOUND"
    W_DEVICE_NOT_FOUND = "W_DEVICE_NOT_FOUND"
    W_DEVICE_INFO_UNAVAILABLE = "W_DEVICE_INFO_UNAVAILABLE"

    # Arguments
    W_BOARD_UNKNOWN = "W_BOARD_UNKNOWN"
    W_ARGUMENT_MISSING = "W_ARGUMENT_MISSING"
    W_FILE_NOT_FOUND = "W_FILE_NOT_FOUND"
    W_EXTENSION_UNKNOWN = "W_EXTENSION_UNKNOWN"

    # Operations
    W_TOOL_FAILED = "W_TOOL_FAILED"
    W_REBOOT_FAILED = "W_REBOOT_FAILED"
    W_NO_BACKUPS = "W_NO_BACKUPS"

    # Generic
    W_UNKNOWN = "W_UNKNOWN"


# Default remediation hints for each warning code
WARNING_REMEDIATIONS: Dict[WarningCode, str] = {
    WarningCode.W_TOOL_NOT_FOUND:
        "Install picotool from https://github.com/raspberrypi/picotool or set BADGWARE_FLASH_PICOTOOL.",
    WarningCode.W_DEVICE_NOT_FOUND:
        "Hold BOOT, press RESET, release both. The board then appears as a USB drive.",
    WarningCode.W_DEVICE_INFO_UNAVAILABLE:
        "Device identification is optional. The backup continues.",
    WarningCode.W_BOARD_UNKNOWN:
        "Check supported boards with the 'boards' command.",
    WarningCode.W_ARGUMENT_MISSING:
        "Run 'restore --list' to see available backups.",
    WarningCode.W_FILE_NOT_FOUND:
        "Run 'restore --list' to see available backups.",
    WarningCode.W_EXTENSION_UNKNOWN:
        "Rename the file to .uf2 or .bin to select the format explicitly.",
    WarningCode.W_TOOL_FAILED:
        "Check the picotool output above. Re-enter BOOTSEL mode and retry.",
    WarningCode.W_REBOOT_FAILED:
        "Flash was written. Press RESET on the board to start the firmware.",
    WarningCode.W_NO_BACKUPS:
        "Create one with the 'backup' command.",
    WarningCode.W_UNKNOWN:
        "Re-run with --verbose for more details.",
}


_ERROR_CODES = {
    ToolNotFoundError: WarningCode.W_TOOL_NOT_FOUND,
    UnknownBoardError: WarningCode.W_BOARD_UNKNOWN,
    DeviceNotFoundError: WarningCode.W_DEVICE_NOT_FOUND,
    BackupFileNotFoundError: WarningCode.W_FILE_NOT_FOUND,
    MissingArgumentError: WarningCode.W_ARGUMENT_MISSING,
    ExternalToolError: WarningCode.W_TOOL_FAILED,
}


@dataclass
class WarningItem:
    """
    Structured warning message with stable code.

    Attributes:
        level: Severity (INFO, WARN, ERROR)
        code: Stable warning code for programmatic handling
        title: Short, user-facing title
        detail: Longer explanation of the issue
        remediation: Suggested action to resolve the issue
    """
    level: MessageLevel
    code: WarningCode
    title: str
    detail: str = ""
    remediation: str = ""

    def __post_init__(self):
        """Set default remediation if not provided."""
        if not self.remediation and self.code in WARNING_REMEDIATIONS:
            self.remediation = WARNING_REMEDIATIONS[self.code]

    @classmethod
    def warn(cls, code: WarningCode, title: str, detail: str = "") -> "WarningItem":
        """Create a WARN-level warning."""
        return cls(MessageLevel.WARN, code, title, detail)

    @classmethod
    def error(cls, code: WarningCode, title: str, detail: str = "") -> "WarningItem":
        """Create an ERROR-level warning."""
        return cls(MessageLevel.ERROR, code, title, detail)


def code_for_warning(message: str) -> WarningCode:
    """Guess a warning code from a plain warning string."""
    msg_lower = message.lower()
    if "extension" in msg_lower:
        return WarningCode.W_EXTENSION_UNKNOWN
    if "reboot" in msg_lower:
        return WarningCode.W_REBOOT_FAILED
    if "device info" in msg_lower or "identification" in msg_lower:
        return WarningCode.W_DEVICE_INFO_UNAVAILABLE
    return WarningCode.W_UNKNOWN


def warning_from_message(message: str) -> WarningItem:
    """Wrap a pipeline warning string in a WARN-level WarningItem."""
    return WarningItem.warn(code_for_warning(message), message)


def error_to_warning(exc: BadgwareFlashError) -> WarningItem:
    """Convert a raised error into an ERROR-level WarningItem."""
    for error_type, code in _ERROR_CODES.items():
        if isinstance(exc, error_type):
            return WarningItem.error(code, str(exc))
    return WarningItem.error(WarningCode.W_UNKNOWN, str(exc))
