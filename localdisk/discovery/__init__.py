"""Local disk discovery: attribute sources and record building."""
from localdisk.discovery.builder import DiskInventory, DiskRecordBuilder
from localdisk.discovery.sources import LsmNativeSource, SysfsSource, extract_device_name

__all__ = [
    'DiskInventory',
    'DiskRecordBuilder',
    'LsmNativeSource',
    'SysfsSource',
    'extract_device_name',
]
