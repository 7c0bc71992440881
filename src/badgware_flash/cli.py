"""
Badgware Flash CLI

Back up and restore the full flash of Badgware RP2350 boards over picotool.
The board must be in BOOTSEL mode: hold BOOT, press RESET, release both.
"""

import sys
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.logging import RichHandler

from badgware_flash.boards import list_boards
from badgware_flash.config import CLI_NAME, DEFAULT_BOARD, get_backup_dir
from badgware_flash.errors import BadgwareFlashError
from badgware_flash.core.actions import (
    BackupRequest,
    RestoreRequest,
    backup_flash as core_backup_flash,
    restore_flash as core_restore_flash,
)
from badgware_flash.core.catalog import list_backups as core_list_backups
from badgware_flash.core.messages import (
    MessageLevel,
    WarningCode,
    WarningItem,
    error_to_warning,
    warning_from_message,
)

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = logging.getLogger("badgware_flash")

# Setup Rich console
console = Console()

app = typer.Typer(help="Badgware Flash - back up and restore RP2350 badge flash")

BOARD_HELP = "Target board: " + ", ".join(
    f"{profile.key} ({profile.name}, {profile.display})" for profile in list_boards()
)


@app.callback()
def global_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Badgware Flash - back up and restore RP2350 badge flash."""
    if verbose:
        logger.setLevel(logging.DEBUG)


def print_header(text: str) -> None:
    """Print fancy header."""
    console.print(Panel(text, expand=False, style="bold blue"))


def print_info(text: str) -> None:
    """Print a status line."""
    console.print(text, style="cyan", markup=False, highlight=False, soft_wrap=True)


def print_success(text: str) -> None:
    """Print success message."""
    console.print(f"✓ {text}", style="green", markup=False, soft_wrap=True)


def print_warning(text: str) -> None:
    """Print warning message."""
    console.print(f"⚠️  {text}", style="yellow", markup=False, soft_wrap=True)


def print_error(text: str) -> None:
    """Print error message."""
    console.print(f"❌ {text}", style="red", markup=False, soft_wrap=True)


def print_structured_warning(warning: WarningItem, verbose: bool = False) -> None:
    """Print a structured warning with optional remediation."""
    if warning.level == MessageLevel.ERROR:
        print_error(warning.title)
    elif warning.level == MessageLevel.WARN:
        print_warning(warning.title)
    else:
        print_info(warning.title)
    if verbose and warning.detail:
        console.print(f"   {warning.detail}", style="dim", markup=False)
    if verbose and warning.remediation:
        console.print(f"   → {warning.remediation}", style="cyan", markup=False)


def print_pipeline_warning(message: str) -> None:
    """Print a pipeline warning as soon as it is raised."""
    print_structured_warning(warning_from_message(message), verbose=True)


def fail(exc: BadgwareFlashError) -> None:
    """Print a pipeline error with its remediation and exit 1."""
    console.print()
    print_structured_warning(error_to_warning(exc), verbose=True)
    sys.exit(1)


def show_backups(directory: str) -> None:
    """Print the backup catalog for `directory`."""
    root = Path(directory)
    if not root.is_dir():
        print_info(f"No {directory}/ directory found. No backups have been created yet.")
        print_info(f"Create one with: {CLI_NAME} backup")
        return

    entries = core_list_backups(root)
    if not entries:
        print_structured_warning(
            WarningItem(MessageLevel.INFO, WarningCode.W_NO_BACKUPS, f"No backup files found in {directory}/"),
            verbose=True,
        )
        return

    table = Table(title=f"Available backups in {directory}/")
    table.add_column("Size", style="green", justify="right")
    table.add_column("Bytes", style="dim", justify="right")
    table.add_column("File", style="cyan")

    for entry in entries:
        table.add_row(entry.human_size, f"{entry.size_bytes:,}", str(entry.path))

    console.print(table)
    console.print()
    print_info(f"Restore with: {CLI_NAME} restore [--board BOARD] {directory}/<filename>")


@app.command()
def backup(
    filename: Optional[str] = typer.Argument(
        None, help="Output filename (default: <board>-backup-<timestamp>.uf2)"
    ),
    board: str = typer.Option(DEFAULT_BOARD, "--board", "-b", help=BOARD_HELP),
    raw: bool = typer.Option(False, "--raw", "-r", help="Save as raw binary instead of UF2"),
    directory: Optional[str] = typer.Option(
        None, "--dir", "-d", help="Backup directory (default: backups)"
    ),
) -> None:
    """
    Dump the board's flash to a backup file.

    The device must be in BOOTSEL mode (hold BOOT, press RESET, release both).

    \b
    Example:
        badgware-flash backup --board badger
        badgware-flash backup --board tufty --raw factory.bin
    """
    print_header("Flash Backup")

    request = BackupRequest(
        board=board,
        raw_mode=raw,
        output_directory=directory or get_backup_dir(),
        explicit_filename=filename,
    )

    try:
        result = core_backup_flash(
            request, log_cb=print_info, warn_cb=print_pipeline_warning
        )
    except BadgwareFlashError as exc:
        fail(exc)
        return

    logger.debug(result.to_summary())
    console.print()
    output_path = result.metadata["output_path"]
    print_success(f"Backup complete: {output_path} ({result.bytes_len} bytes)")
    console.print()
    print_info("To restore later, run:")
    print_info(f"  {result.metadata['restore_command']}")


@app.command()
def restore(
    backup_file: Optional[str] = typer.Argument(None, help="Path to .uf2 or .bin backup file"),
    board: str = typer.Option(DEFAULT_BOARD, "--board", "-b", help=BOARD_HELP),
    list_only: bool = typer.Option(False, "--list", help="List available backups and exit"),
    no_reboot: bool = typer.Option(False, "--no-reboot", help="Do not reboot after flashing"),
    directory: Optional[str] = typer.Option(
        None, "--dir", "-d", help="Backup directory for --list (default: backups)"
    ),
) -> None:
    """
    Restore a flash backup onto the board.

    .uf2 files are loaded with their own addresses; .bin files are loaded at
    the start of flash (0x10000000). This overwrites the device flash.

    \b
    Example:
        badgware-flash restore backups/tufty-backup-20250610-143022.uf2
        badgware-flash restore --board blinky backups/factory.bin
        badgware-flash restore --list
    """
    if list_only:
        show_backups(directory or get_backup_dir())
        return

    print_header("Flash Restore")

    request = RestoreRequest(backup_file=backup_file, board=board, no_reboot=no_reboot)

    try:
        result = core_restore_flash(
            request, log_cb=print_info, warn_cb=print_pipeline_warning
        )
    except BadgwareFlashError as exc:
        fail(exc)
        return

    logger.debug(result.to_summary())
    console.print()
    print_success("Restore complete")
    if result.metadata.get("rebooted"):
        print_info(f"The {result.board} should now be running the backed-up firmware.")
    elif no_reboot:
        print_info("Device left in BOOTSEL mode (--no-reboot).")


@app.command("list-backups")
def list_backups(
    directory: Optional[str] = typer.Option(
        None, "--dir", "-d", help="Backup directory (default: backups)"
    ),
) -> None:
    """List backup files, largest first."""
    show_backups(directory or get_backup_dir())


@app.command()
def boards() -> None:
    """List supported boards and their flash layout."""
    table = Table(title="Supported Boards")
    table.add_column("Board", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Display", style="magenta")
    table.add_column("Flash", style="yellow", no_wrap=True)
    table.add_column("Size", style="blue", no_wrap=True)

    for profile in list_boards():
        table.add_row(
            profile.key,
            profile.name,
            profile.display,
            profile.flash_region,
            f"{profile.flash_size // (1024 * 1024)} MB",
        )

    console.print(table)


def main() -> None:
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"\n[red bold]Fatal error:[/red bold] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
