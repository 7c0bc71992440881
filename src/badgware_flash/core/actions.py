"""
Core workflow actions for Badgware Flash.

Backup and restore are straight pipelines of precondition checks followed by
one picotool operation. Precondition failures raise the typed errors in
badgware_flash.errors; nothing is retried.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
import shlex
from pathlib import Path
from typing import Callable, Optional, Union

from badgware_flash.boards import resolve_board
from badgware_flash.config import CLI_NAME, DEFAULT_BACKUP_DIR, DEFAULT_BOARD
from badgware_flash.errors import (
    BackupFileNotFoundError,
    DeviceNotFoundError,
    ExternalToolError,
    MissingArgumentError,
    ToolNotFoundError,
)
from badgware_flash.picotool import Picotool

from .naming import ImageFormat, detect_image_format, resolve_output_path
from .results import OperationResult

logger = logging.getLogger(__name__)

LogCallback = Callable[[str], None]


@dataclass
class BackupRequest:
    """
    Parameters for one backup.

    Attributes:
        board: Board identifier (case-insensitive)
        raw_mode: Dump a raw binary range instead of UF2
        output_directory: Directory for the backup, created if missing
        explicit_filename: Filename override, used verbatim
    """
    board: str = DEFAULT_BOARD
    raw_mode: bool = False
    output_directory: Union[str, Path] = DEFAULT_BACKUP_DIR
    explicit_filename: Optional[str] = None


@dataclass
class RestoreRequest:
    """
    Parameters for one restore.

    Attributes:
        backup_file: Path to a .uf2 or .bin backup
        board: Board identifier (case-insensitive)
        no_reboot: Leave the device in BOOTSEL mode after loading
    """
    backup_file: Optional[Union[str, Path]]
    board: str = DEFAULT_BOARD
    no_reboot: bool = False


def restore_command(board_id: str, path: Union[str, Path]) -> str:
    """Return the command line that restores `path` onto `board_id`."""
    return f"{CLI_NAME} restore --board {board_id} {shlex.quote(str(path))}"


def _require_tool(tool: Picotool) -> None:
    if not tool.available():
        raise ToolNotFoundError(tool.executable)


def _require_device(tool: Picotool, board_id: str, log: LogCallback) -> None:
    log(f"Board: {board_id}")
    log("Checking for device in BOOTSEL mode...")
    if not tool.probe():
        raise DeviceNotFoundError(board_id)
    log("Device detected.")


def _noop(message: str) -> None:
    pass


def _warn(result: OperationResult, message: str, warn: LogCallback) -> None:
    logger.debug(message)
    result.add_warning(message)
    warn(message)


def backup_flash(
    request: BackupRequest,
    tool: Optional[Picotool] = None,
    now: Optional[datetime] = None,
    log_cb: Optional[LogCallback] = None,
    warn_cb: Optional[LogCallback] = None,
) -> OperationResult:
    """
    Dump the board's flash to a backup file.

    Args:
        request: Backup parameters
        tool: picotool wrapper (default: Picotool())
        now: Timestamp for the generated filename (default: current time)
        log_cb: Optional callback receiving status lines
        warn_cb: Optional callback receiving warnings as they occur

    Returns:
        OperationResult with:
            - bytes_len: size of the written file
            - metadata["output_path"]: Path of the backup
            - metadata["format"]: "uf2" or "bin"
            - metadata["restore_command"]: command line to restore it
            - metadata["device_info"]: picotool info excerpt ("" if unavailable)

    Raises:
        ToolNotFoundError, UnknownBoardError, DeviceNotFoundError,
        ExternalToolError
    """
    tool = tool or Picotool()
    log = log_cb or _noop
    warn = warn_cb or _noop

    _require_tool(tool)
    board = resolve_board(request.board)

    output_path = resolve_output_path(
        request.output_directory,
        board.key,
        raw_mode=request.raw_mode,
        explicit_filename=request.explicit_filename,
        now=now,
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)

    _require_device(tool, board.key, log)

    result = OperationResult.success(operation="backup_flash", board=board.key)

    log("Reading flash info...")
    try:
        device_info = tool.describe()
    except ExternalToolError as exc:
        logger.debug(f"picotool info failed: {exc}")
        device_info = ""
    if device_info:
        log(device_info)
    else:
        _warn(result, "Device identification unavailable", warn)
    result.metadata["device_info"] = device_info

    if request.raw_mode:
        result.region = board.flash_region
        result.metadata["format"] = ImageFormat.RAW.value
        log(f"Dumping flash (raw binary): 0x{board.flash_start:08X} - 0x{board.flash_end:08X}")
        log(f"Output: {output_path}")
        tool.dump_range(board.flash_start, board.flash_end, output_path)
    else:
        result.metadata["format"] = ImageFormat.CONTAINER.value
        log("Dumping flash (UF2 format)")
        log(f"Output: {output_path}")
        tool.dump_all(output_path)

    result.bytes_len = output_path.stat().st_size if output_path.exists() else 0
    result.metadata["output_path"] = output_path
    result.metadata["restore_command"] = restore_command(board.key, output_path)
    logger.debug(f"Backup written to {output_path} ({result.bytes_len} bytes)")
    return result


def restore_flash(
    request: RestoreRequest,
    tool: Optional[Picotool] = None,
    log_cb: Optional[LogCallback] = None,
    warn_cb: Optional[LogCallback] = None,
) -> OperationResult:
    """
    Write a backup file back onto the board's flash.

    Destructive: device flash is overwritten. No verification pass is made
    and nothing is backed up first.

    Args:
        request: Restore parameters
        tool: picotool wrapper (default: Picotool())
        log_cb: Optional callback receiving status lines
        warn_cb: Optional callback receiving warnings as they occur

    Returns:
        OperationResult with:
            - bytes_len: size of the backup file
            - metadata["backup_file"]: Path of the backup
            - metadata["format"]: "uf2" or "bin"
            - metadata["rebooted"]: whether a reboot succeeded

    Raises:
        ToolNotFoundError, UnknownBoardError, MissingArgumentError,
        BackupFileNotFoundError, DeviceNotFoundError, ExternalToolError
    """
    tool = tool or Picotool()
    log = log_cb or _noop
    warn = warn_cb or _noop

    _require_tool(tool)
    board = resolve_board(request.board)

    if request.backup_file is None or not str(request.backup_file).strip():
        raise MissingArgumentError("No backup file specified.")
    backup_path = Path(request.backup_file)
    if not backup_path.is_file():
        raise BackupFileNotFoundError(str(request.backup_file))

    image_format, format_warning = detect_image_format(backup_path)
    result = OperationResult.success(
        operation="restore_flash",
        board=board.key,
        bytes_len=backup_path.stat().st_size,
    )
    if format_warning:
        _warn(result, format_warning, warn)
    result.metadata["backup_file"] = backup_path
    result.metadata["format"] = image_format.value

    _require_device(tool, board.key, log)

    log(f"Restoring backup: {backup_path} ({result.bytes_len} bytes, {image_format.value} format)")
    if image_format is ImageFormat.CONTAINER:
        tool.load_container(backup_path)
    else:
        result.region = f"0x{board.flash_start:08X}"
        tool.load_raw(backup_path, board.flash_start)

    result.metadata["rebooted"] = False
    if not request.no_reboot:
        log("Rebooting device...")
        try:
            tool.reboot()
            result.metadata["rebooted"] = True
        except ExternalToolError as exc:
            _warn(result, f"Reboot failed: {exc}", warn)

    return result
