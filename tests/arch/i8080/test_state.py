# tests/arch/i8080/test_state.py
"""
retro_core_8080.arch.i8080.stateモジュールの単体テスト。
"""
import pytest

from retro_core_8080.arch.i8080.state import I8080CpuState, ConditionFlags

# @intent:test_suite 8080のレジスタファイルとフラグアクセサを検証します。

class TestI8080CpuState:

    # @intent:test_case_init 全てのレジスタとフラグがゼロで初期化されることを検証します。
    def test_initial_state_is_zeroed(self):
        state = I8080CpuState()
        for reg in ("a", "b", "c", "d", "e", "h", "l", "pc", "sp", "int_enable"):
            assert getattr(state, reg) == 0
        assert state.condition == ConditionFlags(0)

    def test_flag_bit_positions(self):
        assert ConditionFlags.Z == 0x01
        assert ConditionFlags.S == 0x02
        assert ConditionFlags.P == 0x04
        assert ConditionFlags.CY == 0x08
        assert ConditionFlags.AC == 0x10

    # @intent:test_case_accessor フラグプロパティが対応するビットのみを操作することを検証します。
    @pytest.mark.parametrize("name, flag", [
        ("flag_z", ConditionFlags.Z),
        ("flag_s", ConditionFlags.S),
        ("flag_p", ConditionFlags.P),
        ("flag_cy", ConditionFlags.CY),
        ("flag_ac", ConditionFlags.AC),
    ])
    def test_flag_accessors(self, name, flag):
        state = I8080CpuState()
        setattr(state, name, True)
        assert getattr(state, name) is True
        assert state.condition == flag

        state.condition = ConditionFlags.Z | ConditionFlags.S | ConditionFlags.P | ConditionFlags.CY | ConditionFlags.AC
        setattr(state, name, False)
        assert getattr(state, name) is False
        assert int(state.condition) == 0x1F & ~int(flag)

    # @intent:test_case_pair HLは上位H・下位Lのバイト連結であることを検証します。
    def test_hl_pair_concatenates_bytes(self):
        state = I8080CpuState(h=0x12, l=0x34)
        assert state.hl == 0x1234

    def test_hl_pair_setter_splits_value(self):
        state = I8080CpuState()
        state.hl = 0xBEEF
        assert state.h == 0xBE
        assert state.l == 0xEF

    def test_bc_de_pairs(self):
        state = I8080CpuState(b=0x01, c=0x02, d=0xFE, e=0xFF)
        assert state.bc == 0x0102
        assert state.de == 0xFEFF
        state.bc = 0x1_ABCD  # 16ビットを超える部分は捨てられる
        assert (state.b, state.c) == (0xAB, 0xCD)
