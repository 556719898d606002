# retro_core_8080/core/cpu.py
"""
Core Layer (抽象CPU)

このモジュールは、CPUの基本的な状態管理と命令サイクルの駆動に関する抽象化を提供します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
import copy
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from retro_core_8080.transport.bus import Bus
from retro_core_8080.core.errors import CpuError, UnimplementedOpcodeError
from retro_core_8080.core.snapshot import Snapshot, Operation
from retro_core_8080.core.state import CpuState

logger = logging.getLogger(__name__)

# @intent:responsibility 抽象CPUの基本機能とインターフェースを定義します。
class AbstractCpu(ABC):
    """
    全てのCPUエミュレーションの基底となる抽象クラス。
    Busとのインターフェース、基本的な状態管理、命令サイクルの抽象化を提供します。

    状態機械は2状態のみ: ready（次の命令をフェッチ可能）と
    halted-on-error（直前のステップで未実装命令に到達した）。
    メモリアクセス違反はlast_errorに記録されるが、halted-on-errorには遷移しない。
    """
    # @intent:responsibility CPUの状態とバスへの参照を初期化します。
    # @intent:pre-condition `bus`は有効なBusオブジェクトである必要があります。
    def __init__(self, bus: Bus):
        self._bus = bus
        self._state: CpuState = self._create_initial_state()
        self._last_error: Optional[CpuError] = None

    # @intent:responsibility 初期状態のCpuStateオブジェクトを生成します。
    @abstractmethod
    def _create_initial_state(self) -> CpuState:
        """
        CPUの初期状態を生成して返します。
        """
        pass

    # @intent:responsibility CPUをリセットし、初期状態に戻します。メモリ内容は保持されます。
    def reset(self) -> None:
        self._state = self._create_initial_state()
        self._last_error = None

    # @intent:responsibility 現在のCPUの状態を返します。
    def get_state(self) -> CpuState:
        return self._state

    @property
    def bus(self) -> Bus:
        return self._bus

    @property
    def last_error(self) -> Optional[CpuError]:
        """直前のステップで発生したエラー。成功した場合はNone。"""
        return self._last_error

    @property
    def halted_on_error(self) -> bool:
        return isinstance(self._last_error, UnimplementedOpcodeError)

    # @intent:responsibility メモリから次の命令（オペコード）をフェッチします。PCは変更しません。
    @abstractmethod
    def _fetch(self) -> int:
        pass

    # @intent:responsibility フェッチしたオペコードを解析し、Operationオブジェクトに変換します。
    # @intent:post-condition 未知のオペコードの場合はUnimplementedOpcodeErrorを送出します。
    @abstractmethod
    def _decode(self, opcode: int) -> Operation:
        pass

    # @intent:responsibility デコードされた命令を実行し、CPUの状態を更新します。
    @abstractmethod
    def _execute(self, operation: Operation) -> None:
        pass

    # @intent:responsibility CPUを1命令サイクル進め、その結果のスナップショットを返します。
    # @intent:rationale Template Methodパターンを採用し、共通の実行フロー（ログクリア→フェッチ→デコード→実行→PC更新→Snapshot生成）を定義します。
    def step(self) -> Snapshot:
        """
        CPUを1命令サイクル進め、その時点でのCPUとバスの状態を含むSnapshotオブジェクトを返します。

        失敗した場合（未実装命令、範囲外メモリアクセス）はCpuErrorのサブクラスを送出し、
        PCを含む全ての状態は変更されません。
        """
        self._bus.get_and_clear_activity_log()
        initial_pc = self._state.pc

        try:
            opcode = self._fetch()
            operation = self._decode(opcode)
            self._execute(operation)
        except CpuError as e:
            self._last_error = e
            raise

        # 実行後にPCを命令長分進める（失敗時にPCが動かないことを保証するため）
        self._update_pc(operation)
        self._last_error = None
        logger.debug("PC=$%04X %s %s", initial_pc, operation.opcode_hex, operation.mnemonic)

        return self._create_snapshot(initial_pc, operation)

    # @intent:responsibility 命令実行後にPCを更新します。
    def _update_pc(self, operation: Operation) -> None:
        self._state.pc = (self._state.pc + operation.length) & 0xFFFF

    # @intent:responsibility スナップショットを生成します。
    def _create_snapshot(self, initial_pc: int, operation: Operation) -> Snapshot:
        bus_activity = self._bus.get_and_clear_activity_log()
        return Snapshot(
            pc=initial_pc,
            state=copy.deepcopy(self._state),
            operation=operation,
            bus_activity=bus_activity,
        )

    @abstractmethod
    def get_register_map(self) -> Dict[str, int]:
        """
        現在のレジスタ値を辞書形式で返す。
        """
        pass

    @abstractmethod
    def get_flag_state(self) -> Dict[str, bool]:
        """
        現在のフラグ（ステータスレジスタ）の各ビットの状態を辞書形式で返す。
        """
        pass
