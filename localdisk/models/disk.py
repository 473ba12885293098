"""Local disk models."""
from dataclasses import dataclass
from enum import Enum


class DeviceClass(Enum):
    """Disk media class."""
    FLASH = "Flash"
    HDD = "HDD"


class SectorFormat(Enum):
    """Logical/physical block size relationship."""
    LEGACY_512 = "512"
    NATIVE_4K = "4KN"
    EMULATED_512 = "512e"


class LedState(Enum):
    """Indicator LED state."""
    ON = "ON"
    OFF = "OFF"
    UNKNOWN = "UNKNOWN"
    UNAVAILABLE = "Unavailable"


@dataclass
class DiskRecord:
    """Everything known about one local disk for a single invocation."""
    device_path: str                                    # /dev/sda
    device_class: DeviceClass = DeviceClass.FLASH       # Flash iff rpm == 0
    serial_number: str = ""
    vpd83: str = ""                                     # SCSI VPD page 0x83 id
    size_sectors: int = 0
    size_bytes: int = 0
    sector_format: SectorFormat = SectorFormat.NATIVE_4K
    transport: str = ""                                 # link type text
    link_speed: int = 0                                 # raw units from LSM
    rpm: int = 0
    ident_led: LedState = LedState.UNKNOWN
    fail_led: LedState = LedState.UNKNOWN
    health: str = "Unknown"
    vendor: str = ""
    model: str = ""
    revision: str = ""
    wwid: str = ""
