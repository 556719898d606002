# tests/core/test_errors.py
"""
retro_core_8080.core.errorsモジュールの単体テスト。
"""
from retro_core_8080.core.errors import CpuError, UnimplementedOpcodeError, MemoryAccessError


class TestErrors:
    def test_unimplemented_opcode_message(self):
        err = UnimplementedOpcodeError(0xCB, 0x0102)
        assert err.opcode == 0xCB
        assert err.pc == 0x0102
        assert str(err) == "Unimplemented instruction $CB at $0102"

    def test_memory_access_error_default_message(self):
        err = MemoryAccessError(0x0010, 0x10)
        assert err.address == 0x0010
        assert err.size == 0x10
        assert "0x0010" in str(err)

    def test_error_kinds_are_distinct(self):
        assert isinstance(MemoryAccessError(0), CpuError)
        assert isinstance(MemoryAccessError(0), IndexError)
        assert not isinstance(UnimplementedOpcodeError(0, 0), IndexError)
        assert not issubclass(UnimplementedOpcodeError, MemoryAccessError)
