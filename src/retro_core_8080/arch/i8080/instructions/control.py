"""
8080 制御命令の実装。
"""
from retro_core_8080.arch.i8080.state import I8080CpuState
from retro_core_8080.transport.bus import Bus
from retro_core_8080.core.snapshot import Operation

def decode_00(opcode: int, bus: Bus, pc: int) -> Operation:
    """NOP命令をデコードします。"""
    return Operation(opcode_hex="00", mnemonic="NOP", operands=[], length=1)

def execute_00(state: I8080CpuState, bus: Bus, operation: Operation) -> None:
    pass
