"""
Core module for Badgware Flash.

This module provides the single source of truth for:
- Backup filename and image format rules (naming.py)
- Result objects (results.py)
- Backup/restore workflows (actions.py)
- Backup catalog listing (catalog.py)
- Standardized warnings/messages (messages.py)

The CLI calls into this module rather than implementing its own logic.
"""

from .naming import (
    ImageFormat,
    default_backup_filename,
    resolve_output_path,
    detect_image_format,
    is_backup_file,
)
from .results import OperationResult
from .messages import (
    MessageLevel,
    WarningCode,
    WarningItem,
    warning_from_message,
    error_to_warning,
)
from .catalog import BackupEntry, list_backups, format_size
from .actions import (
    BackupRequest,
    RestoreRequest,
    backup_flash,
    restore_flash,
    restore_command,
)

__all__ = [
    # Naming
    "ImageFormat",
    "default_backup_filename",
    "resolve_output_path",
    "detect_image_format",
    "is_backup_file",
    # Results
    "OperationResult",
    # Messages
    "MessageLevel",
    "WarningCode",
    "WarningItem",
    "warning_from_message",
    "error_to_warning",
    # Catalog
    "BackupEntry",
    "list_backups",
    "format_size",
    # Actions
    "BackupRequest",
    "RestoreRequest",
    "backup_flash",
    "restore_flash",
    "restore_command",
]
