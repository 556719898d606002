from dataclasses import dataclass, field
from typing import List

@dataclass
class MemoryRegion:
    start: int
    end: int
    type: str = "RAM"
    label: str = ""
    initial_value: int = 0x00

@dataclass
class CpuInitialState:
    pc: int = 0x0000
    sp: int = 0x0000
    registers: dict = field(default_factory=dict)

@dataclass
class SystemConfig:
    architecture: str = "8080"
    memory_map: List[MemoryRegion] = field(default_factory=list)
    initial_state: CpuInitialState = field(default_factory=CpuInitialState)
