"""
Result objects for core operations.

Backup and restore both return an OperationResult that the CLI renders.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class OperationResult:
    """
    Unified result object for backup and restore.

    Attributes:
        ok: Whether the operation completed successfully
        operation: Name of the operation ("backup_flash", "restore_flash")
        board: Board identifier the operation targeted
        region: Flash region description (e.g., "0x10000000-0x11000000")
        bytes_len: Size of the backup file written or read
        warnings: Non-blocking issues encountered
        metadata: Additional operation-specific data
    """
    ok: bool
    operation: str
    board: str = ""
    region: str = ""
    bytes_len: int = 0
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def to_summary(self) -> str:
        """Generate a human-readable summary string."""
        status = "SUCCESS" if self.ok else "FAILED"
        lines = [f"[{status}] {self.operation}"]

        if self.board:
            lines.append(f"  Board: {self.board}")
        if self.region:
            lines.append(f"  Region: {self.region}")
        if self.bytes_len:
            lines.append(f"  Bytes: {self.bytes_len:,}")

        if self.warnings:
            lines.append("  Warnings:")
            for warn in self.warnings:
                lines.append(f"    - {warn}")

        return "\n".join(lines)

    @classmethod
    def success(
        cls,
        operation: str,
        board: str = "",
        region: str = "",
        bytes_len: int = 0,
        **kwargs,
    ) -> "OperationResult":
        """Create a successful result."""
        return cls(
            ok=True,
            operation=operation,
            board=board,
            region=region,
            bytes_len=bytes_len,
            **kwargs,
        )
