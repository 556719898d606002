import yaml
from typing import Dict, Any
from .models import SystemConfig, MemoryRegion, CpuInitialState

# @intent:responsibility YAML形式のシステム構成を読み込み、SystemConfigに変換します。
class ConfigLoader:
    def load_from_file(self, path: str) -> SystemConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def load_from_string(self, text: str) -> SystemConfig:
        return self._parse_config(yaml.safe_load(text) or {})

    def _parse_config(self, data: Dict[str, Any]) -> SystemConfig:
        if not isinstance(data, dict):
            raise ValueError("System configuration must be a mapping.")

        arch = str(data.get("architecture", "8080"))

        memory_map = []
        memory_map_data = data.get("memory_map") or []
        if not isinstance(memory_map_data, list):
            raise ValueError("memory_map must be a list of regions.")
        for region_data in memory_map_data:
            if not isinstance(region_data, dict):
                raise ValueError(f"Memory region must be a mapping: {region_data}")
            if "start" not in region_data or "end" not in region_data:
                raise ValueError(f"Memory region requires 'start' and 'end': {region_data}")
            memory_map.append(MemoryRegion(
                start=self._parse_int(region_data["start"]),
                end=self._parse_int(region_data["end"]),
                type=region_data.get("type", "RAM"),
                label=region_data.get("label", ""),
                initial_value=self._parse_int(region_data.get("initial_value", 0)),
            ))

        initial_state_data = data.get("initial_state") or {}
        if not isinstance(initial_state_data, dict):
            raise ValueError("initial_state must be a mapping.")
        registers_data = initial_state_data.get("registers") or {}
        if not isinstance(registers_data, dict):
            raise ValueError("initial_state.registers must be a mapping.")
        registers = {
            str(name).lower(): self._parse_int(value)
            for name, value in registers_data.items()
        }
        initial_state = CpuInitialState(
            pc=self._parse_int(initial_state_data.get("pc", 0)),
            sp=self._parse_int(initial_state_data.get("sp", 0)),
            registers=registers
        )

        return SystemConfig(
            architecture=arch,
            memory_map=memory_map,
            initial_state=initial_state
        )

    def _parse_int(self, value: Any) -> int:
        # boolはintのサブクラスなので先に除外する
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                if value.lower().startswith("0x"):
                    return int(value, 16)
                return int(value)
            except ValueError:
                pass
        raise ValueError(f"Invalid integer format: {value}")
