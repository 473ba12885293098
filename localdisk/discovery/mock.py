"""Canned disks for mock mode (no libstoragemgmt or sysfs needed)."""
from localdisk.core import codes
from localdisk.discovery.builder import DiskInventory
from localdisk.discovery.sources import InMemoryNativeSource, InMemorySysfsSource

# LED bit-fields use libstoragemgmt's LED_STATUS_* values
_IDENT_ON = 0x02
_IDENT_OFF = 0x04
_FAULT_OFF = 0x20

MOCK_NATIVE = {
    "/dev/nvme0n1": {
        "serial_number": "S64ANS0T123456",
        "vpd83": "eui.0025385b71b2a3c4",
        "health_status": codes.HEALTH_STATUS_GOOD,
        "rpm": 0,
        "link_type": codes.LINK_TYPE_PCIE,
        "link_speed": 32000,
        "led_status": codes.LED_STATUS_NOT_SUPPORTED,
    },
    "/dev/sda": {
        "serial_number": "WD-WX12D8123456",
        "vpd83": "50014ee2b5c4d6e8",
        "health_status": codes.HEALTH_STATUS_GOOD,
        "rpm": 5400,
        "link_type": codes.LINK_TYPE_ATA,
        "link_speed": 6000,
        "led_status": _IDENT_OFF | _FAULT_OFF,
    },
    "/dev/sdb": {
        "serial_number": "ZL2ABC34",
        "vpd83": "5000c500a1b2c3d4",
        "health_status": codes.HEALTH_STATUS_WARN,
        "rpm": 7200,
        "link_type": codes.LINK_TYPE_SAS,
        "link_speed": 12000,
        "led_status": _IDENT_ON | _FAULT_OFF,
    },
}

MOCK_SYSFS = {
    "nvme0n1": {
        "size": "3907029168",
        "queue/logical_block_size": "512",
        "queue/physical_block_size": "512",
        "device/model": "Samsung SSD 990 PRO 2TB",
        "device/wwid": "eui.0025385b71b2a3c4",
    },
    "sda": {
        "size": "7814037168",
        "queue/logical_block_size": "512",
        "queue/physical_block_size": "4096",
        "device/model": "WDC WD40EFPX-68C",
        "device/vendor": "ATA",
        "device/rev": "0A81",
        "device/wwid": "naa.50014ee2b5c4d6e8",
    },
    "sdb": {
        "size": "2441609216",
        "queue/logical_block_size": "4096",
        "queue/physical_block_size": "4096",
        "device/model": "ST10000NM0226",
        "device/vendor": "SEAGATE",
        "device/rev": "E004",
        "device/wwid": "naa.5000c500a1b2c3d4",
    },
}


def mock_inventory() -> DiskInventory:
    """Inventory over the canned disks; unknown paths do not exist."""
    native = InMemoryNativeSource(MOCK_NATIVE)
    sysfs = InMemorySysfsSource(MOCK_SYSFS)
    return DiskInventory(native, sysfs, path_exists=lambda path: path in native.disks)
