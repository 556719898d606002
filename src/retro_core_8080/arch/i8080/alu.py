"""
8080 ALU (算術論理演算ユニット) およびフラグ計算ユーティリティ。

演算結果（切り捨て前の値）に基づいたコンディションフラグ（Z, S, P, CY, AC）の計算を担当します。
ここに定義される関数は全て純粋関数であり、CPUの状態を直接変更しません。
"""
from typing import Tuple

from retro_core_8080.arch.i8080.state import ConditionFlags, NO_FLAGS

# @intent:responsibility 指定されたバイト値のパリティ（ビット1の数が偶数ならTrue）を計算します。
def calculate_parity(val: int) -> bool:
    """8ビット値のパリティ（偶数ならTrue）を計算します。"""
    val &= 0xFF
    val ^= val >> 4
    val ^= val >> 2
    val ^= val >> 1
    return (val & 1) == 0

# @intent:responsibility 切り捨て前の演算結果から、全てのフラグを新たに計算します。
# @intent:post-condition 返り値は直前のフラグ状態に一切依存しません。ACは常にクリアされます。
def compute_flags(intermediate: int) -> ConditionFlags:
    """
    ADD/ADC命令の結果からコンディションフラグを計算します。

    - Z: 下位8ビットが0
    - S: 切り捨て後の8ビット値のビット7 (0x80)
    - P: 下位8ビットのビット1の数が偶数
    - CY: 切り捨て前の値が0xFFを超える
    """
    res8 = intermediate & 0xFF
    flags = NO_FLAGS

    if res8 == 0:
        flags |= ConditionFlags.Z
    if res8 & 0x80:
        flags |= ConditionFlags.S
    if calculate_parity(res8):
        flags |= ConditionFlags.P
    if intermediate > 0xFF:
        flags |= ConditionFlags.CY

    return flags

# @intent:responsibility 8ビット加算（キャリー入力付き）を行い、切り捨て後の結果とフラグを返します。
def add8(accumulator: int, operand: int, carry_in: int = 0) -> Tuple[int, ConditionFlags]:
    """ADD/ADC命令の演算本体。"""
    result = accumulator + operand + carry_in
    return result & 0xFF, compute_flags(result)
