"""Data models for localdisk."""
from localdisk.models.disk import DeviceClass, DiskRecord, LedState, SectorFormat

__all__ = [
    'DeviceClass',
    'DiskRecord',
    'LedState',
    'SectorFormat',
]
