# src/retro_core_8080/__init__.py
"""
8080互換CPUの実行コア。

1回の呼び出しで1命令を実行し、レジスタ・フラグ・メモリを更新します。
"""
from retro_core_8080.arch.i8080.cpu import I8080Cpu
from retro_core_8080.arch.i8080.state import I8080CpuState, ConditionFlags
from retro_core_8080.core.errors import CpuError, UnimplementedOpcodeError, MemoryAccessError
from retro_core_8080.core.snapshot import Snapshot, Operation


def step(cpu: I8080Cpu) -> Snapshot:
    """
    CPUを1命令進めます。CPUは参照で受け取り、呼び出し後も同じインスタンスを使い続けられます。
    """
    return cpu.step()


__all__ = [
    "I8080Cpu", "I8080CpuState", "ConditionFlags",
    "CpuError", "UnimplementedOpcodeError", "MemoryAccessError",
    "Snapshot", "Operation", "step",
]
