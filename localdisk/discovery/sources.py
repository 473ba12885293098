"""Attribute sources: libstoragemgmt local-disk API and sysfs.

Read accessors never raise; a failed lookup returns ``None`` and the caller
picks the default.
"""
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from localdisk.core.errors import (
    InvalidDevicePathError,
    LedControlError,
    NativeSourceUnavailableError,
)
from localdisk.core.logger import get_logger

logger = get_logger(__name__)


def extract_device_name(device_path: str) -> str:
    """Return the final segment of a slash-delimited device path.

    >>> extract_device_name("/dev/sda")
    'sda'
    """
    components = device_path.split("/")
    if len(components) < 2:
        raise InvalidDevicePathError(device_path)
    return components[-1]


class LsmNativeSource:
    """Per-disk facts from libstoragemgmt's ``lsm.LocalDisk``.

    The binding ships with the distribution package (python3-libstoragemgmt)
    and is loaded when the source is created.
    """

    def __init__(self):
        try:
            import lsm
        except ImportError as e:
            raise NativeSourceUnavailableError(
                f"libstoragemgmt Python binding not available: {e}"
            ) from e
        self._lsm = lsm
        self._local_disk = lsm.LocalDisk

    def _query(self, getter: Callable[[str], Any], device_path: str, what: str) -> Optional[Any]:
        try:
            return getter(device_path)
        except self._lsm.LsmError as e:
            logger.debug(f"{what} unavailable for {device_path}: {e}")
            return None

    def list_disks(self) -> List[str]:
        try:
            return list(self._local_disk.list())
        except self._lsm.LsmError as e:
            logger.debug(f"disk enumeration failed: {e}")
            return []

    def serial_number(self, device_path: str) -> Optional[str]:
        return self._query(self._local_disk.serial_num_get, device_path, "serial number")

    def vpd83(self, device_path: str) -> Optional[str]:
        return self._query(self._local_disk.vpd83_get, device_path, "VPD 0x83 id")

    def health_status(self, device_path: str) -> Optional[int]:
        return self._query(self._local_disk.health_status_get, device_path, "health status")

    def rpm(self, device_path: str) -> Optional[int]:
        return self._query(self._local_disk.rpm_get, device_path, "rpm")

    def link_type(self, device_path: str) -> Optional[int]:
        return self._query(self._local_disk.link_type_get, device_path, "link type")

    def link_speed(self, device_path: str) -> Optional[int]:
        return self._query(self._local_disk.link_speed_get, device_path, "link speed")

    def led_status(self, device_path: str) -> Optional[int]:
        return self._query(self._local_disk.led_status_get, device_path, "LED status")

    def fault_led_on(self, device_path: str) -> None:
        self._set_led(self._local_disk.fault_led_on, device_path, "on")

    def fault_led_off(self, device_path: str) -> None:
        self._set_led(self._local_disk.fault_led_off, device_path, "off")

    def _set_led(self, setter: Callable[[str], Any], device_path: str, state: str) -> None:
        try:
            setter(device_path)
        except self._lsm.LsmError as e:
            raise LedControlError(device_path, state, str(e)) from e


class SysfsSource:
    """Text attributes from the kernel block device class."""

    def __init__(self, root: str = "/sys/class/block"):
        self.root = Path(root)

    def _read(self, device_path: str, relative: str) -> Optional[str]:
        try:
            dev_name = extract_device_name(device_path)
        except InvalidDevicePathError as e:
            logger.debug(str(e))
            return None

        path = self.root / dev_name / relative
        try:
            return path.read_text().strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"attribute read error for {relative} on device {dev_name}: {e}")
            return None

    def attribute(self, device_path: str, name: str) -> Optional[str]:
        """Read ``<root>/<dev>/device/<name>`` (model, vendor, wwid, rev)."""
        return self._read(device_path, f"device/{name}")

    def block_attribute(self, device_path: str, name: str) -> Optional[str]:
        """Read ``<root>/<dev>/<name>`` (size and queue geometry)."""
        return self._read(device_path, name)


class InMemoryNativeSource:
    """Native source double backed by a dict of per-path facts.

    Each value of ``disks`` maps field names (``serial_number``, ``vpd83``,
    ``health_status``, ``rpm``, ``link_type``, ``link_speed``,
    ``led_status``) to raw values; absent fields read as ``None``. Paths in
    ``failing_leds`` refuse LED changes.
    """

    def __init__(self, disks: Dict[str, Dict[str, Any]], failing_leds: Optional[List[str]] = None):
        self.disks = {path: dict(facts) for path, facts in disks.items()}
        self.failing_leds = set(failing_leds or [])
        self.led_calls: List[tuple] = []

    def _get(self, device_path: str, field: str) -> Optional[Any]:
        return self.disks.get(device_path, {}).get(field)

    def list_disks(self) -> List[str]:
        return list(self.disks)

    def serial_number(self, device_path: str) -> Optional[str]:
        return self._get(device_path, "serial_number")

    def vpd83(self, device_path: str) -> Optional[str]:
        return self._get(device_path, "vpd83")

    def health_status(self, device_path: str) -> Optional[int]:
        return self._get(device_path, "health_status")

    def rpm(self, device_path: str) -> Optional[int]:
        return self._get(device_path, "rpm")

    def link_type(self, device_path: str) -> Optional[int]:
        return self._get(device_path, "link_type")

    def link_speed(self, device_path: str) -> Optional[int]:
        return self._get(device_path, "link_speed")

    def led_status(self, device_path: str) -> Optional[int]:
        return self._get(device_path, "led_status")

    def fault_led_on(self, device_path: str) -> None:
        self._set_led(device_path, "on")

    def fault_led_off(self, device_path: str) -> None:
        self._set_led(device_path, "off")

    def _set_led(self, device_path: str, state: str) -> None:
        self.led_calls.append((device_path, state))
        if device_path not in self.disks or device_path in self.failing_leds:
            raise LedControlError(device_path, state, "no LED control for this disk")


class InMemorySysfsSource:
    """Sysfs double: ``{dev_name: {relative_path: text}}``.

    Device attributes use ``device/<name>`` keys, geometry uses ``size`` and
    ``queue/...`` keys, mirroring the on-disk layout.
    """

    def __init__(self, tree: Dict[str, Dict[str, str]]):
        self.tree = tree

    def _read(self, device_path: str, relative: str) -> Optional[str]:
        try:
            dev_name = extract_device_name(device_path)
        except InvalidDevicePathError:
            return None
        value = self.tree.get(dev_name, {}).get(relative)
        return value.strip() if value is not None else None

    def attribute(self, device_path: str, name: str) -> Optional[str]:
        return self._read(device_path, f"device/{name}")

    def block_attribute(self, device_path: str, name: str) -> Optional[str]:
        return self._read(device_path, name)
