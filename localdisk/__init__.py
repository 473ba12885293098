"""localdisk - local disk inventory and fault LED control."""
from localdisk.discovery import DiskInventory, DiskRecordBuilder
from localdisk.formatting import bytes_to_human, render_detail, render_table
from localdisk.models import DeviceClass, DiskRecord, LedState, SectorFormat

__version__ = "0.1.0"

__all__ = [
    'DeviceClass',
    'DiskInventory',
    'DiskRecord',
    'DiskRecordBuilder',
    'LedState',
    'SectorFormat',
    'bytes_to_human',
    'render_detail',
    'render_table',
]
