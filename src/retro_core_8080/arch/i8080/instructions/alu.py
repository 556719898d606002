"""
8080 算術演算 (ADD/ADC) 命令の実装。

0x80-0x8Fの16命令は、オペランドセレクタとキャリー入力の有無だけが異なるため、
ARITH_TABLEで(オペランド, キャリー入力)に変換し、単一の実行関数で処理します。
"""
from typing import Dict, Tuple

from retro_core_8080.arch.i8080.state import I8080CpuState
from retro_core_8080.transport.bus import Bus
from retro_core_8080.core.snapshot import Operation
from retro_core_8080.arch.i8080.alu import add8
from .base import REGISTER_CODES, get_register_value

# オペコード -> (オペランド名, キャリー入力を加えるか)
ARITH_TABLE: Dict[int, Tuple[str, bool]] = {
    **{0x80 | code: (name, False) for code, name in REGISTER_CODES.items()}, # ADD r
    **{0x88 | code: (name, True) for code, name in REGISTER_CODES.items()},  # ADC r
}

# --- Decoding Functions ---

# @intent:responsibility ADD r / ADC r 形式の命令をデコードします。
def decode_arith_r(opcode: int, bus: Bus, pc: int) -> Operation:
    """ADD/ADC r命令をデコードします。"""
    operand, with_carry = ARITH_TABLE[opcode]
    return Operation(
        opcode_hex=f"{opcode:02X}",
        mnemonic=f"{'ADC' if with_carry else 'ADD'} {operand}",
        operands=[operand],
        length=1
    )

# --- Execution Functions ---

# @intent:responsibility ADD/ADC命令を実行し、アキュムレータとフラグを更新します。
# @intent:pre-condition キャリー入力はフラグ再計算の前に読み取ります。
def execute_arith_r(state: I8080CpuState, bus: Bus, operation: Operation) -> None:
    operand, with_carry = ARITH_TABLE[int(operation.opcode_hex, 16)]
    # オペランドを先に読む。Mの読み込みが失敗した場合、状態は変更されない
    val = get_register_value(state, bus, operand)
    carry_in = 1 if with_carry and state.flag_cy else 0
    state.a, state.condition = add8(state.a, val, carry_in)
