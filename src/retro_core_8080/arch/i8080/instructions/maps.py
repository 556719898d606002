"""
8080 命令マッピング定義。
各命令モジュールから関数をインポートし、オペコードと関数の対応表を構築します。
"""
from .alu import ARITH_TABLE, decode_arith_r, execute_arith_r
from .control import decode_00, execute_00

DECODE_MAP = {
    0x00: decode_00,
    **{op: decode_arith_r for op in ARITH_TABLE}, # ADD r, ADC r
}

EXECUTE_MAP = {
    0x00: execute_00,
    **{op: execute_arith_r for op in ARITH_TABLE},
}
