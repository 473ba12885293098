"""Shared utilities for the localdisk CLI."""
from __future__ import annotations

import os
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape

from localdisk.core.config import LocalDiskConfig, get_config
from localdisk.discovery.builder import DiskInventory


def is_mock(config: Optional[LocalDiskConfig] = None) -> bool:
    """Return True when the CLI runs against canned disks."""
    if os.environ.get("LOCALDISK_MOCK") == "1":
        return True
    return bool(config and config.mock)


def get_inventory(config: Optional[LocalDiskConfig] = None) -> DiskInventory:
    """Create the inventory for the configured mode.

    Uses the global configuration unless one is passed.

    Raises:
        NativeSourceUnavailableError: libstoragemgmt binding is missing
    """
    config = config or get_config()
    if is_mock(config):
        from localdisk.discovery.mock import mock_inventory
        return mock_inventory()

    from localdisk.discovery.sources import LsmNativeSource, SysfsSource
    return DiskInventory(LsmNativeSource(), SysfsSource(config.sysfs_root))


def print_lines(console: Console, lines: Iterable[str]) -> None:
    """Print pre-formatted text verbatim (no markup, wrapping or highlighting)."""
    for line in lines:
        console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_error(console: Console, message: str, prefix: str = "✗") -> None:
    """Print error message with consistent formatting.

    Args:
        console: Rich console for output
        message: Error message
        prefix: Prefix symbol (default: ✗)
    """
    console.print(f"[red]{prefix}[/red] {escape(message)}", highlight=False, soft_wrap=True)
