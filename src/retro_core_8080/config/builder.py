import logging
from typing import List

from retro_core_8080.arch.i8080.cpu import I8080Cpu, ADDRESS_SPACE_SIZE
from retro_core_8080.arch.i8080.state import ConditionFlags
from .models import SystemConfig, CpuInitialState, MemoryRegion

logger = logging.getLogger(__name__)

SUPPORTED_ARCHITECTURES = ("8080", "I8080", "INTEL8080")

# 初期値として設定できるレジスタ。値は幅を超えるとValueError
_BYTE_REGISTERS = ("a", "b", "c", "d", "e", "h", "l", "int_enable")
_WORD_REGISTERS = ("bc", "de", "hl", "pc", "sp")

# @intent:responsibility システム構成（Config）に基づいて、メモリとCPUを生成し、初期状態を適用します。
class SystemBuilder:
    def build_system(self, config: SystemConfig) -> I8080Cpu:
        if config.architecture.upper() not in SUPPORTED_ARCHITECTURES:
            raise ValueError(f"Unsupported architecture: {config.architecture}")

        cpu = I8080Cpu(self._build_memory(config.memory_map))
        self.apply_initial_state(cpu, config.initial_state)
        logger.info("Built 8080 system with %d bytes of memory", cpu.ram.get_size())
        return cpu

    # @intent:responsibility メモリマップからCPUが所有する単一のRAMの内容を組み立てます。
    # @intent:pre-condition 領域はアドレス0から隙間なく連続している必要があります。
    def _build_memory(self, memory_map: List[MemoryRegion]) -> bytearray:
        if not memory_map:
            raise ValueError("Memory map must define at least one region.")

        contents = bytearray()
        for region in sorted(memory_map, key=lambda r: r.start):
            if region.start != len(contents):
                raise ValueError(
                    f"Memory region {region.start:04X}-{region.end:04X} is not contiguous "
                    f"(expected start {len(contents):04X})."
                )
            if region.end < region.start:
                raise ValueError(f"Invalid memory region {region.start:04X}-{region.end:04X}.")
            if region.end >= ADDRESS_SPACE_SIZE:
                raise ValueError(
                    f"Memory region {region.start:04X}-{region.end:04X} exceeds the 64KB address space."
                )
            if not 0 <= region.initial_value <= 0xFF:
                raise ValueError(f"Initial value {region.initial_value} is not an 8-bit value.")
            if region.type.upper() != "RAM":
                logger.warning(
                    "Unknown device type '%s' for range %04X-%04X, defaulting to RAM",
                    region.type, region.start, region.end
                )
            contents.extend([region.initial_value] * (region.end - region.start + 1))
        return contents

    # @intent:responsibility Configで定義された初期状態をCPUに適用します。
    def apply_initial_state(self, cpu: I8080Cpu, config_state: CpuInitialState) -> None:
        """
        CPUをリセットし、Configから指定された初期値を適用します。
        """
        cpu.reset()
        state = cpu.get_state()
        state.pc = self._check_range("pc", config_state.pc, 0xFFFF)
        state.sp = self._check_range("sp", config_state.sp, 0xFFFF)

        for reg_name, value in config_state.registers.items():
            if reg_name == "condition":
                state.condition = ConditionFlags(self._check_range(reg_name, value, 0x1F))
            elif reg_name in _BYTE_REGISTERS:
                setattr(state, reg_name, self._check_range(reg_name, value, 0xFF))
            elif reg_name in _WORD_REGISTERS:
                setattr(state, reg_name, self._check_range(reg_name, value, 0xFFFF))
            else:
                raise ValueError(f"Unknown register in initial state: {reg_name}")

    def _check_range(self, reg_name: str, value: int, maximum: int) -> int:
        if not 0 <= value <= maximum:
            raise ValueError(f"Initial value {value} for {reg_name} is out of range 0..{maximum:#x}.")
        return value
