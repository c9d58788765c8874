#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for postkit commands.

Functions:
    setup_logger: Initialize PostkitLogger for CLI operations

Classes:
    OperationStats: Files processed, errors and elapsed time
    ListingStats: Adds listed/skipped post counts for listing builds

Usage:
    from postkit.core.cli import setup_logger, ListingStats

    logger = setup_logger(log_dir, "listing")
    stats = ListingStats()
    stats.files_processed += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, Optional

# --- Local imports ---
from postkit.core.logging_manager import PostkitLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> PostkitLogger:
    """
    Setup logging for CLI operations.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'validators')

    Returns:
        Configured PostkitLogger writing under ``log_dir/operations``
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return PostkitLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of files successfully processed
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Seconds elapsed since start_time (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        """Human-readable summary of operation statistics."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class ListingStats(OperationStats):
    """
    Statistics for listing builds.

    Attributes:
        posts_listed: Posts included in the listing
        drafts_skipped: Draft posts left out of the listing
    """
    posts_listed: int = 0
    drafts_skipped: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.posts_listed < 0:
            raise ValueError(f"posts_listed must be non-negative, got {self.posts_listed}")
        if self.drafts_skipped < 0:
            raise ValueError(f"drafts_skipped must be non-negative, got {self.drafts_skipped}")

    def summary(self) -> str:
        """Summary with listing metrics."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.posts_listed} listed, "
            f"{self.drafts_skipped} drafts skipped, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "posts_listed": self.posts_listed,
            "drafts_skipped": self.drafts_skipped,
        })
        return d
