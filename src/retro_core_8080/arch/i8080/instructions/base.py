"""
8080命令セット実装のための共通ヘルパー関数と定数。
"""
from retro_core_8080.arch.i8080.state import I8080CpuState
from retro_core_8080.transport.bus import Bus

# 下位3ビットのオペランドセレクタ。"M"は(HL)が指すメモリ
REGISTER_CODES = {
    0b000: "B", 0b001: "C", 0b010: "D", 0b011: "E",
    0b100: "H", 0b101: "L", 0b110: "M", 0b111: "A"
}

# @intent:utility_function レジスタ名（またはM）に基づいて現在の値を取得します。
# @intent:post-condition Mの場合はバス経由で読み込むため、範囲外のHLはMemoryAccessErrorになります。
def get_register_value(state: I8080CpuState, bus: Bus, reg_name: str) -> int:
    if reg_name == "M":
        return bus.read(state.hl)
    return getattr(state, reg_name.lower())
