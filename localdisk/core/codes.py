"""Lookup tables and pure derivations for raw disk facts.

Numeric codes mirror the constants of libstoragemgmt's ``lsm.Disk`` class so
the tables can be used without importing the binding.
"""
from typing import Dict, Optional, Tuple

from localdisk.models.disk import DeviceClass, LedState, SectorFormat

HEALTH_STATUS_UNKNOWN = -1
HEALTH_STATUS_FAIL = 0
HEALTH_STATUS_WARN = 1
HEALTH_STATUS_GOOD = 2

HEALTH_TEXT: Dict[int, str] = {
    HEALTH_STATUS_UNKNOWN: "Unknown",
    HEALTH_STATUS_FAIL: "Fail",
    HEALTH_STATUS_WARN: "Warn",
    HEALTH_STATUS_GOOD: "Good",
}

LINK_TYPE_NO_SUPPORT = -2
LINK_TYPE_UNKNOWN = -1
LINK_TYPE_FC = 0
LINK_TYPE_SSA = 2
LINK_TYPE_SBP = 3
LINK_TYPE_SRP = 4
LINK_TYPE_ISCSI = 5
LINK_TYPE_SAS = 6
LINK_TYPE_ADT = 7
LINK_TYPE_ATA = 8
LINK_TYPE_USB = 9
LINK_TYPE_SOP = 10
LINK_TYPE_PCIE = 11

LINK_TYPE_TEXT: Dict[int, str] = {
    LINK_TYPE_NO_SUPPORT: "Not supported by LSM",
    LINK_TYPE_UNKNOWN: "Unknown",
    LINK_TYPE_FC: "FibreChannel",
    LINK_TYPE_SSA: "SSA",
    LINK_TYPE_SBP: "Serial Bus Protocol",
    LINK_TYPE_SRP: "SCSI RDMA",
    LINK_TYPE_ISCSI: "iSCSI",
    LINK_TYPE_SAS: "SAS",
    LINK_TYPE_ADT: "Automated Drive(Tape)",
    LINK_TYPE_ATA: "IDE/SATA",
    LINK_TYPE_USB: "USB",
    LINK_TYPE_SOP: "SCSI over PCIe",
    LINK_TYPE_PCIE: "PCIe",
}

# LED_STATUS_UNKNOWN in libstoragemgmt: the disk exposes no LED control
LED_STATUS_NOT_SUPPORTED = 1

IDENT_LED_OFFSET = 1
FAIL_LED_OFFSET = 4
LED_FIELD_MASK = 0b111

LED_FIELD_STATES: Dict[int, LedState] = {
    1: LedState.ON,
    2: LedState.OFF,
    4: LedState.UNKNOWN,
}

DEFAULT_SECTOR_SIZE = 512


def health_text(code: Optional[int]) -> str:
    """Display text for a health code; a failed read reports Unknown."""
    if code is None:
        return HEALTH_TEXT[HEALTH_STATUS_UNKNOWN]
    return HEALTH_TEXT.get(code, "")


def link_type_text(code: Optional[int]) -> str:
    """Display text for a link type code, empty when unmapped."""
    if code is None:
        return ""
    return LINK_TYPE_TEXT.get(code, "")


def led_state(bit_field: int, offset: int) -> LedState:
    """Decode the 3-bit LED sub-field starting at ``offset``."""
    value = (bit_field >> offset) & LED_FIELD_MASK
    return LED_FIELD_STATES.get(value, LedState.UNKNOWN)


def decode_leds(bit_field: int) -> Tuple[LedState, LedState]:
    """Return ``(ident, fail)`` LED states for a raw LED bit-field."""
    if bit_field == LED_STATUS_NOT_SUPPORTED:
        return LedState.UNAVAILABLE, LedState.UNAVAILABLE
    return led_state(bit_field, IDENT_LED_OFFSET), led_state(bit_field, FAIL_LED_OFFSET)


def classify_sector_format(logical: str, physical: str) -> SectorFormat:
    """Classify the logical/physical block size relationship.

    Both arguments are the raw sysfs strings, compared as text.
    """
    if logical == physical:
        if logical == str(DEFAULT_SECTOR_SIZE):
            return SectorFormat.LEGACY_512
        return SectorFormat.NATIVE_4K
    return SectorFormat.EMULATED_512


def size_in_bytes(sectors: int, sector_format: SectorFormat, logical: str) -> int:
    if sector_format is SectorFormat.NATIVE_4K:
        return sectors * parse_int(logical)
    return sectors * DEFAULT_SECTOR_SIZE


def device_class(rpm: int) -> DeviceClass:
    return DeviceClass.FLASH if rpm == 0 else DeviceClass.HDD


def parse_int(text: Optional[str]) -> int:
    """Parse sysfs numeric text, 0 when empty, malformed or negative."""
    if not text:
        return 0
    try:
        value = int(text.strip())
    except ValueError:
        return 0
    return max(value, 0)
