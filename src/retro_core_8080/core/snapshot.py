# retro_core_8080/core/snapshot.py
"""
実行状態の不変スナップショット

このモジュールは、1命令の実行結果（実行後のCPU状態、実行された命令、
そのステップ中のバスアクセス）を記録した不変のデータ構造を定義します。
"""
from dataclasses import dataclass, field
from typing import List

from retro_core_8080.core.state import CpuState
from retro_core_8080.transport.bus import BusAccess


# @intent:responsibility デコードされた命令の詳細を記録します。
@dataclass(frozen=True) # 不変データ構造
class Operation:
    """
    命令の詳細（HEX、ニーモニック、オペランド）を記録するデータクラス。
    """
    opcode_hex: str # 例: "80"
    mnemonic: str # 例: "ADD B"
    operands: List[str] = field(default_factory=list)
    length: int = 1 # 命令のバイト長

# @intent:responsibility ある一時点におけるCPUの状態とバスアクセスを不変に記録します。
@dataclass(frozen=True) # 不変データ構造
class Snapshot:
    """
    1ステップ実行後の状態を記録した不変のデータ構造。
    stateは実行後の状態のコピーであり、以降のステップの影響を受けません。
    """
    pc: int # 実行した命令のアドレス
    state: CpuState
    operation: Operation
    bus_activity: List[BusAccess] = field(default_factory=list)
