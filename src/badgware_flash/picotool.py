"""
picotool wrapper

Runs the Raspberry Pi picotool utility as a subprocess. picotool owns the
whole USB/BOOTSEL exchange and UF2 handling; this module only builds the
command lines and reports exit status.

This module provides:
- Availability check (is picotool on PATH)
- Device probe and short identification
- Flash dump (raw range or full UF2)
- Flash load (UF2 or raw binary at an address)
- Reboot out of BOOTSEL mode
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from badgware_flash.config import DEVICE_INFO_LINES, get_picotool_executable
from badgware_flash.errors import ExternalToolError, ToolNotFoundError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class ToolResult:
    """Outcome of one picotool invocation."""
    command: List[str]
    returncode: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class Picotool:
    """
    Command-style interface to picotool.

    Device operations (save, load, reboot) stream picotool's own output to
    the terminal; probe and describe capture it.

    Example:
        tool = Picotool()
        if tool.available() and tool.probe():
            tool.dump_all("backups/tufty.uf2")
    """

    def __init__(self, executable: Optional[str] = None):
        """
        Args:
            executable: picotool name or path (default from config)
        """
        self.executable = executable or get_picotool_executable()

    def available(self) -> bool:
        """Return True if the executable can be found."""
        return shutil.which(self.executable) is not None

    def _run(self, args: List[str], capture: bool = False) -> ToolResult:
        cmd = [self.executable] + args
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            if capture:
                proc = subprocess.run(
                    cmd,
                    check=False,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    text=True,
                )
            else:
                proc = subprocess.run(cmd, check=False)
        except FileNotFoundError:
            raise ToolNotFoundError(self.executable)

        output = proc.stdout if capture and proc.stdout else ""
        logger.debug(f"{cmd[0]} {args[0]} exited with {proc.returncode}")
        return ToolResult(command=cmd, returncode=proc.returncode, output=output)

    def _check(self, result: ToolResult) -> ToolResult:
        if not result.ok:
            raise ExternalToolError(result.command, result.returncode, result.output)
        return result

    # ------------------------------------------------------------------
    # Device queries
    # ------------------------------------------------------------------

    def probe(self) -> bool:
        """Return True if a device in BOOTSEL mode answers `picotool info`."""
        return self._run(["info"], capture=True).ok

    def describe(self, max_lines: int = DEVICE_INFO_LINES) -> str:
        """
        Return the first lines of `picotool info` for display.

        Returns:
            Identification text, or "" if picotool failed.
        """
        result = self._run(["info"], capture=True)
        if not result.ok:
            return ""
        lines = result.output.splitlines()[:max_lines]
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Flash operations
    # ------------------------------------------------------------------

    def dump_range(self, start: int, end: int, out_path: PathLike) -> ToolResult:
        """Save flash bytes in [start, end) to a raw binary file."""
        return self._check(self._run([
            "save", "-r", f"0x{start:08X}", f"0x{end:08X}", str(out_path),
        ]))

    def dump_all(self, out_path: PathLike) -> ToolResult:
        """Save all of flash as a UF2 image."""
        return self._check(self._run(["save", "-a", str(out_path)]))

    def load_container(self, in_path: PathLike) -> ToolResult:
        """Write a UF2 image; addresses come from the file itself."""
        return self._check(self._run(["load", "-v", str(in_path)]))

    def load_raw(self, in_path: PathLike, start: int) -> ToolResult:
        """Write a raw binary image starting at `start`."""
        return self._check(self._run([
            "load", "-v", "-t", "bin", str(in_path), "-o", f"0x{start:08X}",
        ]))

    def reboot(self) -> ToolResult:
        """Reboot the device out of BOOTSEL mode."""
        return self._check(self._run(["reboot"]))
