"""
Exception hierarchy for backup and restore workflows.

Every failure is terminal for the current invocation. The CLI catches
BadgwareFlashError, prints the message with a remediation hint, and exits 1.
"""

from typing import Optional, Sequence


class BadgwareFlashError(Exception):
    """Base exception for backup/restore operations."""


class ToolNotFoundError(BadgwareFlashError):
    """picotool is not installed or not on PATH."""

    def __init__(self, executable: str = "picotool"):
        self.executable = executable
        super().__init__(
            f"{executable} not found. Install from https://github.com/raspberrypi/picotool"
        )


class UnknownBoardError(BadgwareFlashError, ValueError):
    """Board identifier is not in the registry."""

    def __init__(self, board_id: str, supported: Sequence[str]):
        self.board_id = board_id
        self.supported = tuple(supported)
        super().__init__(
            f"Unknown board: '{board_id}'. Supported boards: {', '.join(self.supported)}"
        )


class DeviceNotFoundError(BadgwareFlashError):
    """No device in BOOTSEL mode answered the probe."""

    def __init__(self, board_id: str):
        self.board_id = board_id
        super().__init__(
            f"No device found. Put the {board_id} in BOOTSEL mode: "
            "hold BOOT, press RESET, release both."
        )


class BackupFileNotFoundError(BadgwareFlashError, FileNotFoundError):
    """Backup file passed to restore does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Backup file not found: {path}")

    def __str__(self) -> str:
        return f"Backup file not found: {self.path}"


class MissingArgumentError(BadgwareFlashError, ValueError):
    """A required argument was empty or absent."""


class ExternalToolError(BadgwareFlashError):
    """picotool exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, output: Optional[str] = None):
        self.command = list(command)
        self.returncode = returncode
        self.output = output or ""
        message = f"{' '.join(self.command)} exited with status {returncode}"
        if self.output.strip():
            message = f"{message}: {self.output.strip()}"
        super().__init__(message)
