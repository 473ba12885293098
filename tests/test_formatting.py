"""Tests for table, detail and size rendering."""
from dataclasses import fields

import pytest

from localdisk.formatting import DETAIL_FIELDS, TABLE_COLUMNS, bytes_to_human, render_detail, render_table
from localdisk.models.disk import DeviceClass, DiskRecord, LedState, SectorFormat


class TestBytesToHuman:
    """Binary unit size strings."""

    @pytest.mark.parametrize("size", [0, 1, 500, 1023])
    def test_below_one_kib_is_plain_bytes(self, size):
        assert bytes_to_human(size) == f"{size} B"

    @pytest.mark.parametrize("size,expected", [
        (1024, "1.0 KiB"),
        (1536, "1.5 KiB"),
        (1024 ** 2, "1.0 MiB"),
        (5 * 1024 ** 3, "5.0 GiB"),
        (4096000000, "3.8 GiB"),
        (4000787030016, "3.6 TiB"),
        (1024 ** 5, "1.0 PiB"),
        (1024 ** 6, "1.0 EiB"),
    ])
    def test_scaled_units(self, size, expected):
        assert bytes_to_human(size) == expected

    @pytest.mark.parametrize("k,suffix", [(1, "KiB"), (2, "MiB"), (3, "GiB"), (4, "TiB"), (5, "PiB"), (6, "EiB")])
    def test_value_stays_below_next_unit(self, k, suffix):
        for size in (1024 ** k, 3 * 1024 ** k + 7, 1000 * 1024 ** k):
            value, unit = bytes_to_human(size).split()
            assert unit == suffix
            assert 1.0 <= float(value) < 1024.0
            assert len(value.split(".")[1]) == 1


@pytest.fixture
def records():
    return [
        DiskRecord(
            device_path="/dev/sdb",
            device_class=DeviceClass.HDD,
            serial_number="ZL2ABC34",
            vpd83="5000c500a1b2c3d4",
            size_sectors=2441609216,
            size_bytes=10000831348736,
            sector_format=SectorFormat.NATIVE_4K,
            transport="SAS",
            link_speed=12000,
            rpm=7200,
            ident_led=LedState.ON,
            fail_led=LedState.OFF,
            health="Warn",
            vendor="SEAGATE",
            model="ST10000NM0226",
            revision="E004",
            wwid="naa.5000c500a1b2c3d4",
        ),
        DiskRecord(device_path="/dev/sda"),
    ]


class TestRenderTable:
    """Fixed-width disk table."""

    def test_header_names_every_column(self, records):
        assert {field for field, _, _ in TABLE_COLUMNS} == {f.name for f in fields(DiskRecord)}
        header = render_table(records)[0]
        for _, name, _ in TABLE_COLUMNS:
            assert name in header

    def test_identifier_and_sector_count_shown(self):
        row = render_table([DiskRecord(device_path="/dev/sdc", vpd83="5000c500deadbeef", size_sectors=123456789)])[1]
        assert "5000c500deadbeef" in row
        assert "123456789" in row

    def test_one_row_per_record_in_order(self, records):
        lines = render_table(records)

        assert len(lines) == 3
        assert lines[1].startswith("/dev/sdb ")
        assert lines[2].startswith("/dev/sda ")

    def test_row_contents(self, records):
        row = render_table(records)[1].split()

        assert row == [
            "/dev/sdb", "HDD", "ZL2ABC34", "5000c500a1b2c3d4", "2441609216", "9.1", "TiB", "4KN", "SAS", "7200", "12000",
            "ON", "OFF", "Warn", "SEAGATE", "ST10000NM0226", "E004", "naa.5000c500a1b2c3d4",
        ]

    def test_columns_are_aligned(self, records):
        lines = render_table(records)
        # Header and rows share column boundaries for the fixed-width prefix
        width = sum(int(spec[1:]) + 1 for _, _, spec in TABLE_COLUMNS) - 1
        assert all(len(line) == width for line in lines)

    def test_empty_table_has_header_only(self):
        assert len(render_table([])) == 1


class TestRenderDetail:
    """Labelled single-disk listing."""

    def test_labels_and_values(self, records):
        lines = render_detail(records[0])

        assert lines[0] == "Device Path    : /dev/sdb"
        assert "Type           : HDD" in lines
        assert "Size           : 9.1 TiB" in lines
        assert "Sector Format  : 4KN" in lines
        assert "RPM            : 7200" in lines
        assert "Bus Speed      : 12000" in lines
        assert "IDENT LED      : ON" in lines
        assert "FAIL LED       : OFF" in lines
        assert "Health         : Warn" in lines
        assert lines[-1] == "wwid           : naa.5000c500a1b2c3d4"

    def test_one_line_per_field(self, records):
        assert {field for field, _ in DETAIL_FIELDS} == {f.name for f in fields(DiskRecord)}
        assert len(render_detail(records[0])) == len(fields(DiskRecord))

    def test_identifier_and_sector_count_shown(self):
        lines = render_detail(DiskRecord(device_path="/dev/sdc", vpd83="5000c500deadbeef", size_sectors=123456789))
        assert "VPD83          : 5000c500deadbeef" in lines
        assert "Sectors        : 123456789" in lines

    def test_empty_values(self, records):
        lines = render_detail(records[1])
        assert "Serial Number  : " in lines
        assert "Size           : 0 B" in lines
