# tests/transport/test_bus.py
"""
retro_core_8080.transport.busモジュールの単体テスト。
"""
import pytest

from retro_core_8080.transport.bus import Bus, RAM, BusAccess, BusAccessType, Device

# @intent:test_suite バスのデバイス登録、読み書き、アクティビティログを検証します。

class TestRAM:
    def test_ram_init_zeroed(self):
        ram = RAM(0x10)
        assert ram.get_size() == 0x10
        assert ram.dump() == bytes(0x10)

    def test_ram_init_with_contents(self):
        ram = RAM(4, [0x01, 0x02])
        assert ram.dump() == bytes([0x01, 0x02, 0x00, 0x00])

    def test_ram_init_with_fill(self):
        ram = RAM(3, [0xAA], fill=0xFF)
        assert ram.dump() == bytes([0xAA, 0xFF, 0xFF])

    def test_ram_read_write(self):
        ram = RAM(0x100)
        ram.write(0x10, 0xAB)
        assert ram.read(0x10) == 0xAB


class TestBus:

    @pytest.fixture
    def bus(self):
        bus = Bus()
        bus.register_device(0x0000, 0x00FF, RAM(0x100))
        return bus

    def test_register_and_read_write(self, bus):
        bus.write(0x0080, 0x5A)
        assert bus.read(0x0080) == 0x5A

    def test_device_offset(self):
        bus = Bus()
        low = RAM(0x10)
        high = RAM(0x10)
        bus.register_device(0x0000, 0x000F, low)
        bus.register_device(0x0010, 0x001F, high)
        bus.write(0x0012, 0x77)
        assert high.read(0x02) == 0x77
        assert low.read(0x02) == 0x00

    # @intent:test_case_log 読み書きが記録され、取得時にクリアされることを検証します。
    def test_activity_log(self, bus):
        bus.write(0x0001, 0x11)
        bus.read(0x0001)
        log = bus.get_and_clear_activity_log()
        assert log == [
            BusAccess(address=0x0001, data=0x11, access_type=BusAccessType.WRITE),
            BusAccess(address=0x0001, data=0x11, access_type=BusAccessType.READ),
        ]
        assert bus.get_and_clear_activity_log() == []

    def test_peek_is_not_logged(self, bus):
        bus.write(0x0002, 0x22)
        bus.get_and_clear_activity_log()
        assert bus.peek(0x0002) == 0x22
        assert bus.get_and_clear_activity_log() == []

    def test_custom_device(self):
        class ConstantDevice(Device):
            def read(self, address: int) -> int:
                return 0xC3

            def write(self, address: int, data: int) -> None:
                pass

        bus = Bus()
        bus.register_device(0x0000, 0xFFFF, ConstantDevice())
        assert bus.read(0x1234) == 0xC3
