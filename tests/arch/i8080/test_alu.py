# tests/arch/i8080/test_alu.py
"""
retro_core_8080.arch.i8080.aluモジュールの単体テスト。
フラグ計算の境界値を中心に検証します。
"""
import pytest

from retro_core_8080.arch.i8080.alu import calculate_parity, compute_flags, add8
from retro_core_8080.arch.i8080.state import ConditionFlags

# @intent:test_suite パリティ、フラグ計算、8ビット加算の正確性を検証します。

class TestParity:
    def test_two_bits_is_even(self):
        assert calculate_parity(0b00000011) is True

    def test_one_bit_is_odd(self):
        assert calculate_parity(0b00000001) is False

    def test_zero_is_even(self):
        assert calculate_parity(0x00) is True

    def test_all_bits_set_is_even(self):
        assert calculate_parity(0xFF) is True

    def test_only_low_byte_counts(self):
        # 0x100のビット8は無視される
        assert calculate_parity(0x101) is False

    def test_matches_bit_count(self):
        for value in range(0x100):
            assert calculate_parity(value) == (bin(value).count("1") % 2 == 0)


class TestComputeFlags:
    def test_zero(self):
        flags = compute_flags(0x00)
        assert ConditionFlags.Z in flags
        assert ConditionFlags.P in flags
        assert ConditionFlags.CY not in flags

    def test_zero_after_truncation(self):
        flags = compute_flags(0x100)
        assert ConditionFlags.Z in flags
        assert ConditionFlags.CY in flags

    # @intent:test_case_boundary Sフラグはビット7(0x80)を判定することを検証します。
    def test_sign_uses_bit_7(self):
        assert ConditionFlags.S in compute_flags(0x80)
        assert ConditionFlags.S in compute_flags(0xFF)
        assert ConditionFlags.S in compute_flags(0x1F0)

    def test_sign_ignores_bit_3(self):
        assert ConditionFlags.S not in compute_flags(0x08)
        assert ConditionFlags.S not in compute_flags(0x7F)

    # @intent:test_case_boundary キャリーは0xFFを「超えた」場合のみセットされることを検証します。
    def test_carry_not_set_at_exactly_ff(self):
        assert ConditionFlags.CY not in compute_flags(0xFF)

    def test_carry_set_above_ff(self):
        assert ConditionFlags.CY in compute_flags(0x100)
        assert ConditionFlags.CY in compute_flags(0x1FF)

    def test_parity_of_truncated_byte(self):
        assert ConditionFlags.P in compute_flags(0x03)
        assert ConditionFlags.P not in compute_flags(0x15)
        # 0x103: 下位バイト0x03は偶数パリティ
        assert ConditionFlags.P in compute_flags(0x103)

    def test_aux_carry_is_never_produced(self):
        for value in (0x00, 0x0F, 0x10, 0xFF, 0x100, 0x1FF):
            assert ConditionFlags.AC not in compute_flags(value)

    def test_exact_flag_sets(self):
        assert compute_flags(0x15) == ConditionFlags(0)
        assert compute_flags(0x100) == ConditionFlags.Z | ConditionFlags.P | ConditionFlags.CY
        assert compute_flags(0x80) == ConditionFlags.S


class TestAdd8:
    # @intent:test_case_property 全ての8ビット入力で結果が(a + b) mod 256になることを検証します。
    def test_truncation_for_all_inputs(self):
        for a in range(0x100):
            for b in range(0, 0x100, 7):
                result, flags = add8(a, b)
                assert result == (a + b) % 256
                assert (ConditionFlags.CY in flags) == (a + b > 0xFF)
                assert (ConditionFlags.Z in flags) == (result == 0)

    def test_carry_out(self):
        result, flags = add8(0xFF, 0x01)
        assert result == 0x00
        assert ConditionFlags.CY in flags
        assert ConditionFlags.Z in flags

    def test_carry_in(self):
        result, flags = add8(0x00, 0x00, carry_in=1)
        assert result == 0x01
        assert ConditionFlags.CY not in flags
        assert ConditionFlags.Z not in flags

    def test_carry_in_reaches_boundary(self):
        result, flags = add8(0xFE, 0x00, carry_in=1)
        assert result == 0xFF
        assert ConditionFlags.CY not in flags

        result, flags = add8(0xFF, 0x00, carry_in=1)
        assert result == 0x00
        assert ConditionFlags.CY in flags

    def test_is_deterministic(self):
        assert add8(0x7F, 0x01) == add8(0x7F, 0x01)
