# retro_core_8080/arch/i8080/cpu.py
"""
8080 CPUエミュレーションの中心モジュール。

このモジュールは8080 CPUの具体的な実装を提供し、
AbstractCpuインターフェースを実装します。
"""
import logging
from typing import Dict, Iterable, Optional

from retro_core_8080.core.cpu import AbstractCpu
from retro_core_8080.core.errors import UnimplementedOpcodeError
from retro_core_8080.core.snapshot import Operation
from retro_core_8080.arch.i8080.state import I8080CpuState
from retro_core_8080.arch.i8080.instructions import decode_opcode, execute_instruction
from retro_core_8080.transport.bus import Bus, RAM

logger = logging.getLogger(__name__)

ADDRESS_SPACE_SIZE = 0x10000

# @intent:responsibility 8080 CPUの具体的なエミュレーションロジックを提供します。
class I8080Cpu(AbstractCpu):
    """
    8080 CPUをエミュレートするクラス。

    メモリは呼び出し側が渡した内容をコピーしたRAMとして、アドレス0から配置されます。
    CPUはそのRAMとバスを排他的に所有します。
    """
    # @intent:responsibility メモリ内容からRAMとバスを構築し、CPUを初期化します。
    # @intent:pre-condition memoryが空の場合はmemory_sizeで正のサイズを指定する必要があります。
    def __init__(self, memory: Iterable[int] = b"", memory_size: Optional[int] = None, fill: int = 0x00):
        contents = bytes(memory)
        size = memory_size if memory_size is not None else len(contents)
        if size > ADDRESS_SPACE_SIZE:
            raise ValueError(f"Memory size {size} exceeds the 64KB address space.")
        self._ram = RAM(size, contents, fill=fill)
        bus = Bus()
        bus.register_device(0x0000, size - 1, self._ram)
        super().__init__(bus)

    def _create_initial_state(self) -> I8080CpuState:
        return I8080CpuState()

    @property
    def ram(self) -> RAM:
        return self._ram

    # @intent:responsibility 現在のPCからオペコードをフェッチします。PCのインクリメントは実行成功後に行います。
    def _fetch(self) -> int:
        return self._bus.read(self._state.pc)

    # @intent:rationale 実際のデコードロジックは`instructions`パッケージに委譲します。
    def _decode(self, opcode: int) -> Operation:
        try:
            return decode_opcode(opcode, self._bus, self._state.pc)
        except UnimplementedOpcodeError:
            logger.warning("Unimplemented instruction $%02X at $%04X", opcode, self._state.pc)
            raise

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._bus)

    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        return {
            "A": s.a, "B": s.b, "C": s.c, "D": s.d, "E": s.e, "H": s.h, "L": s.l,
            "BC": s.bc, "DE": s.de, "HL": s.hl,
            "SP": s.sp, "PC": s.pc,
            "F": int(s.condition), "INTE": s.int_enable,
        }

    def get_flag_state(self) -> Dict[str, bool]:
        s = self._state
        return {
            "Z": s.flag_z,
            "S": s.flag_s,
            "P": s.flag_p,
            "CY": s.flag_cy,
            "AC": s.flag_ac,
        }
