"""Plain-text rendering of disk records."""
from enum import Enum
from typing import Iterable, List

from localdisk.models.disk import DiskRecord

UNIT = 1024
UNIT_PREFIXES = "KMGTPE"

# (record field, header, format spec) per table column
TABLE_COLUMNS = [
    ("device_path", "Device Path", "<16"),
    ("device_class", "Type", ">6"),
    ("serial_number", "Serial Number", "<15"),
    ("vpd83", "VPD83", ">32"),
    ("size_sectors", "Sectors", ">12"),
    ("size_bytes", "Size", ">15"),
    ("sector_format", "Sector", ">6"),
    ("transport", "Transport", ">10"),
    ("rpm", "RPM", ">5"),
    ("link_speed", "Bus Speed", ">9"),
    ("ident_led", "IDENT", ">11"),
    ("fail_led", "FAIL", ">11"),
    ("health", "Health", ">7"),
    ("vendor", "Vendor", ">16"),
    ("model", "Model", ">16"),
    ("revision", "Revision", ">8"),
    ("wwid", "wwid", ">20"),
]

# (record field, label) per detail line
DETAIL_FIELDS = [
    ("device_path", "Device Path"),
    ("device_class", "Type"),
    ("serial_number", "Serial Number"),
    ("vpd83", "VPD83"),
    ("size_sectors", "Sectors"),
    ("size_bytes", "Size"),
    ("sector_format", "Sector Format"),
    ("transport", "Transport"),
    ("rpm", "RPM"),
    ("link_speed", "Bus Speed"),
    ("ident_led", "IDENT LED"),
    ("fail_led", "FAIL LED"),
    ("health", "Health"),
    ("vendor", "Vendor"),
    ("model", "Model"),
    ("revision", "Revision"),
    ("wwid", "wwid"),
]

DETAIL_LABEL_WIDTH = 15


def bytes_to_human(size_bytes: int) -> str:
    """Convert a byte count to the largest binary unit it fills.

    >>> bytes_to_human(500)
    '500 B'
    >>> bytes_to_human(1024)
    '1.0 KiB'
    """
    if size_bytes < UNIT:
        return f"{size_bytes} B"
    div, exp = UNIT, 0
    n = size_bytes // UNIT
    while n >= UNIT and exp < len(UNIT_PREFIXES) - 1:
        div *= UNIT
        exp += 1
        n //= UNIT
    return f"{size_bytes / div:.1f} {UNIT_PREFIXES[exp]}iB"


def _display_value(record: DiskRecord, field: str) -> object:
    value = getattr(record, field)
    if field == "size_bytes":
        return bytes_to_human(value)
    if isinstance(value, Enum):
        return value.value
    return value


def _format_row(values: Iterable[object]) -> str:
    return " ".join(f"{value:{spec}}" for value, (_, _, spec) in zip(values, TABLE_COLUMNS))


def render_table(records: Iterable[DiskRecord]) -> List[str]:
    """Header line plus one fixed-width line per record, order preserved."""
    lines = [_format_row(header for _, header, _ in TABLE_COLUMNS)]
    for record in records:
        lines.append(_format_row(_display_value(record, field) for field, _, _ in TABLE_COLUMNS))
    return lines


def render_detail(record: DiskRecord) -> List[str]:
    """``Label : value`` lines for a single record."""
    return [
        f"{label:<{DETAIL_LABEL_WIDTH}}: {_display_value(record, field)}"
        for field, label in DETAIL_FIELDS
    ]
