#!/usr/bin/env python3
"""localdisk CLI - inventory and fault LED control for local disks."""
from typing import Optional

import typer
from rich.console import Console

from localdisk.cli_support import get_inventory, print_error, print_lines
from localdisk.core.config import load_config, set_config
from localdisk.core.errors import (
    ConfigValidationError,
    DeviceNotFoundError,
    LedControlError,
    NativeSourceUnavailableError,
)
from localdisk.core.logger import get_logger, set_verbose, setup_file_logging
from localdisk.formatting import render_detail, render_table

app = typer.Typer(
    name="localdisk",
    help="""localdisk - local disk inventory via libstoragemgmt and sysfs

Quick start:
  localdisk -list                      # Table of all local disks
  localdisk -show /dev/sda             # Details for one disk
  localdisk -fail-led-on /dev/sda      # Light the fault LED
""",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)

LED_ERROR_MESSAGE = "Unable to set the disks fault LED beacon"


@app.command()
def main(
    list_disks: bool = typer.Option(False, "-list", "--list", help="List all local disks"),
    show: Optional[str] = typer.Option(
        None, "-show", "--show", metavar="DEVICE",
        help="Show a specific disk matching given /dev name",
    ),
    fail_led_on: Optional[str] = typer.Option(
        None, "-fail-led-on", "--fail-led-on", metavar="DEVICE",
        help="Activate fail LED on a given device",
    ),
    fail_led_off: Optional[str] = typer.Option(
        None, "-fail-led-off", "--fail-led-off", metavar="DEVICE",
        help="De-activate fail LED on a given device",
    ),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to localdisk.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log attribute read failures"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Inventory local disks or toggle a disk's fault LED."""
    if not any([list_disks, show, fail_led_on, fail_led_off]):
        return

    try:
        config = load_config(config_path)
    except (FileNotFoundError, ConfigValidationError) as e:
        print_error(console, str(e))
        raise typer.Exit(1) from e

    if verbose:
        config.verbose = True
    if log_file:
        config.log_file = log_file
    set_verbose(config.verbose)
    if config.log_file:
        setup_file_logging(config.log_file, verbose=config.verbose)
    set_config(config)

    try:
        inventory = get_inventory()
    except NativeSourceUnavailableError as e:
        print_error(console, str(e))
        raise typer.Exit(1) from e

    if list_disks:
        print_lines(console, render_table(inventory.records()))
        return

    if show:
        try:
            record = inventory.record(show)
        except DeviceNotFoundError as e:
            logger.debug(str(e))
            print_error(console, f"Unable to list device {show}")
            raise typer.Exit(1) from e
        print_lines(console, render_detail(record))
        return

    failed = False
    for device_path, state in ((fail_led_on, "on"), (fail_led_off, "off")):
        if not device_path:
            continue
        try:
            inventory.set_fail_led(device_path, state)
        except LedControlError as e:
            logger.debug(str(e))
            failed = True
    if failed:
        print_error(console, LED_ERROR_MESSAGE)


if __name__ == "__main__":
    app()
