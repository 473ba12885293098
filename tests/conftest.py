"""Shared test fixtures for localdisk tests."""
import pytest

from localdisk.core import codes
from localdisk.core.config import set_config
from localdisk.discovery.builder import DiskInventory
from localdisk.discovery.sources import InMemoryNativeSource, InMemorySysfsSource


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep host config files and LOCALDISK_* variables out of tests."""
    for var in (
        "LOCALDISK_CONFIG",
        "LOCALDISK_SYSFS_ROOT",
        "LOCALDISK_MOCK",
        "LOCALDISK_VERBOSE",
        "LOCALDISK_LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("localdisk.core.config.CONFIG_PATHS", [str(tmp_path / "localdisk.yml")])
    set_config(None)
    yield
    set_config(None)


# Common test data
@pytest.fixture
def flash_native():
    """libstoragemgmt facts for a single flash disk at /dev/sda."""
    return {
        "/dev/sda": {
            "serial_number": "S3Z8NB0K123456",
            "vpd83": "5002538e40a1b2c3",
            "health_status": codes.HEALTH_STATUS_GOOD,
            "rpm": 0,
            "link_type": codes.LINK_TYPE_ATA,
            "link_speed": 6000,
            "led_status": 0x04 | 0x20,
        }
    }


@pytest.fixture
def flash_sysfs():
    """sysfs attributes for /dev/sda: 4K native, 1000000 sectors."""
    return {
        "sda": {
            "size": "1000000\n",
            "queue/logical_block_size": "4096\n",
            "queue/physical_block_size": "4096\n",
            "device/model": "Samsung SSD 870\n",
            "device/vendor": "ATA     \n",
            "device/rev": "2B6Q\n",
            "device/wwid": "naa.5002538e40a1b2c3\n",
        }
    }


@pytest.fixture
def make_inventory():
    """Build a DiskInventory over in-memory sources."""
    def _make(native, sysfs, existing=None, failing_leds=None):
        native_source = InMemoryNativeSource(native, failing_leds=failing_leds)
        sysfs_source = InMemorySysfsSource(sysfs)
        present = set(native) if existing is None else set(existing)
        return DiskInventory(native_source, sysfs_source, path_exists=lambda path: path in present)
    return _make
