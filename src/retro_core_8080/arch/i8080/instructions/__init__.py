"""
8080命令セット実装パッケージ。
"""
from retro_core_8080.transport.bus import Bus
from retro_core_8080.core.errors import UnimplementedOpcodeError
from retro_core_8080.core.snapshot import Operation
from retro_core_8080.arch.i8080.state import I8080CpuState
from .maps import DECODE_MAP, EXECUTE_MAP

# @intent:responsibility 与えられたオペコードを8080の命令としてデコードします。
# @intent:pre-condition `pc`はデコードするオペコードの先頭アドレスを指している必要があります。
def decode_opcode(opcode: int, bus: Bus, pc: int) -> Operation:
    """
    8080のオペコードをデコードし、Operationオブジェクトを返します。
    未知のオペコードの場合はUnimplementedOpcodeErrorを送出します。
    """
    decoder = DECODE_MAP.get(opcode)
    if decoder is None:
        raise UnimplementedOpcodeError(opcode, pc)
    return decoder(opcode, bus, pc)

# @intent:responsibility デコードされた8080命令を実行し、CPUの状態を変更します。
def execute_instruction(operation: Operation, state: I8080CpuState, bus: Bus) -> None:
    opcode = int(operation.opcode_hex, 16)
    executor = EXECUTE_MAP.get(opcode)
    if executor is None:
        raise UnimplementedOpcodeError(opcode, state.pc)
    executor(state, bus, operation)
