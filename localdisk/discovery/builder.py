"""Assemble disk records from libstoragemgmt and sysfs facts."""
import os
from typing import Callable, List

from localdisk.core import codes
from localdisk.core.errors import DeviceNotFoundError
from localdisk.core.logger import get_logger
from localdisk.models.disk import DiskRecord

logger = get_logger(__name__)


class DiskRecordBuilder:
    """Build one DiskRecord per device path.

    ``native`` supplies the libstoragemgmt facts and ``sysfs`` the kernel
    attributes; either may be a real source or an in-memory double.
    """

    def __init__(self, native, sysfs, path_exists: Callable[[str], bool] = os.path.exists):
        self.native = native
        self.sysfs = sysfs
        self.path_exists = path_exists

    def build(self, device_path: str) -> DiskRecord:
        """Collect and derive every field for ``device_path``.

        Raises:
            DeviceNotFoundError: the device path does not exist
        """
        if not self.path_exists(device_path):
            raise DeviceNotFoundError(device_path)

        native = self.native
        sysfs = self.sysfs

        # Every lookup runs even when an earlier one came back empty
        serial_number = native.serial_number(device_path)
        vpd83 = native.vpd83(device_path)
        rpm = native.rpm(device_path)
        link_type = native.link_type(device_path)
        link_speed = native.link_speed(device_path)
        led_status = native.led_status(device_path)
        health = native.health_status(device_path)

        size_sectors = codes.parse_int(sysfs.block_attribute(device_path, "size"))
        model = sysfs.attribute(device_path, "model")
        vendor = sysfs.attribute(device_path, "vendor")
        wwid = sysfs.attribute(device_path, "wwid")
        revision = sysfs.attribute(device_path, "rev")
        logical = sysfs.block_attribute(device_path, "queue/logical_block_size") or ""
        physical = sysfs.block_attribute(device_path, "queue/physical_block_size") or ""

        sector_format = codes.classify_sector_format(logical, physical)
        rpm = rpm or 0
        ident_led, fail_led = codes.decode_leds(led_status or 0)

        return DiskRecord(
            device_path=device_path,
            device_class=codes.device_class(rpm),
            serial_number=serial_number or "",
            vpd83=vpd83 or "",
            size_sectors=size_sectors,
            size_bytes=codes.size_in_bytes(size_sectors, sector_format, logical),
            sector_format=sector_format,
            transport=codes.link_type_text(link_type),
            link_speed=link_speed or 0,
            rpm=rpm,
            ident_led=ident_led,
            fail_led=fail_led,
            health=codes.health_text(health),
            vendor=vendor or "",
            model=model or "",
            revision=revision or "",
            wwid=wwid or "",
        )


class DiskInventory:
    """Operations over the local disk set: list, show one, fault LED."""

    def __init__(self, native, sysfs, path_exists: Callable[[str], bool] = os.path.exists):
        self.native = native
        self.builder = DiskRecordBuilder(native, sysfs, path_exists)

    def list_paths(self) -> List[str]:
        """Device paths in the order the storage library reports them."""
        return self.native.list_disks()

    def records(self) -> List[DiskRecord]:
        """One record per enumerated disk, in enumeration order.

        A disk that disappears between enumeration and lookup still gets a
        row carrying only its path.
        """
        result = []
        for device_path in self.list_paths():
            try:
                result.append(self.builder.build(device_path))
            except DeviceNotFoundError as e:
                logger.debug(str(e))
                result.append(DiskRecord(device_path=device_path))
        return result

    def record(self, device_path: str) -> DiskRecord:
        return self.builder.build(device_path)

    def set_fail_led(self, device_path: str, state: str) -> None:
        """Switch the fault LED; states other than on/off do nothing.

        Raises:
            LedControlError: the storage library refused the change
        """
        if state == "on":
            self.native.fault_led_on(device_path)
        elif state == "off":
            self.native.fault_led_off(device_path)
        else:
            return
        logger.debug(f"fault LED {state} requested for {device_path}")
