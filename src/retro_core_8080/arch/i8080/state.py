# retro_core_8080/arch/i8080/state.py
"""
8080 CPU固有の状態定義。

このモジュールは、8080 CPUのレジスタ、フラグ、およびその他の状態を保持するデータ構造を定義します。
"""
from dataclasses import dataclass
from enum import IntFlag

from retro_core_8080.core.state import CpuState


# @intent:constant コンディションフラグ（5ビット）の各ビット位置を定義します。
class ConditionFlags(IntFlag):
    Z = 0x01   # Zero (ゼロ)
    S = 0x02   # Sign (符号)
    P = 0x04   # Parity (パリティ、偶数でセット)
    CY = 0x08  # Carry (キャリー)
    AC = 0x10  # Auxiliary Carry (補助キャリー)


NO_FLAGS = ConditionFlags(0)


# @intent:responsibility 8080 CPUの全てのレジスタとフラグの状態を保持します。
@dataclass
class I8080CpuState(CpuState):
    """
    8080 CPUのレジスタ状態を保持するデータクラス。
    CpuStateを拡張し、8080固有のレジスタを含みます。
    """
    a: int = 0x00  # Accumulator
    b: int = 0x00
    c: int = 0x00
    d: int = 0x00
    e: int = 0x00
    h: int = 0x00
    l: int = 0x00
    condition: ConditionFlags = NO_FLAGS

    int_enable: int = 0x00  # 割り込み許可（現状どこからも参照されない）

    # @intent:accessor 各フラグビットにアクセスするためのプロパティを提供します。
    # @intent:rationale ゲッターとセッターを通じてconditionの対応するビットを操作します。

    def _get_flag(self, flag: ConditionFlags) -> bool:
        return flag in self.condition

    def _set_flag(self, flag: ConditionFlags, value: bool) -> None:
        if value:
            self.condition |= flag
        else:
            self.condition &= ~flag

    @property
    def flag_z(self) -> bool:
        return self._get_flag(ConditionFlags.Z)

    @flag_z.setter
    def flag_z(self, value: bool) -> None:
        self._set_flag(ConditionFlags.Z, value)

    @property
    def flag_s(self) -> bool:
        return self._get_flag(ConditionFlags.S)

    @flag_s.setter
    def flag_s(self, value: bool) -> None:
        self._set_flag(ConditionFlags.S, value)

    @property
    def flag_p(self) -> bool:
        return self._get_flag(ConditionFlags.P)

    @flag_p.setter
    def flag_p(self, value: bool) -> None:
        self._set_flag(ConditionFlags.P, value)

    @property
    def flag_cy(self) -> bool:
        return self._get_flag(ConditionFlags.CY)

    @flag_cy.setter
    def flag_cy(self, value: bool) -> None:
        self._set_flag(ConditionFlags.CY, value)

    @property
    def flag_ac(self) -> bool:
        return self._get_flag(ConditionFlags.AC)

    @flag_ac.setter
    def flag_ac(self, value: bool) -> None:
        self._set_flag(ConditionFlags.AC, value)

    # 16-bit register pairs (上位バイトを8ビット左シフトし、下位バイトとORで連結する)
    @property
    def bc(self) -> int:
        return (self.b << 8) | self.c

    @bc.setter
    def bc(self, value: int) -> None:
        self.b = (value >> 8) & 0xFF
        self.c = value & 0xFF

    @property
    def de(self) -> int:
        return (self.d << 8) | self.e

    @de.setter
    def de(self, value: int) -> None:
        self.d = (value >> 8) & 0xFF
        self.e = value & 0xFF

    @property
    def hl(self) -> int:
        return (self.h << 8) | self.l

    @hl.setter
    def hl(self, value: int) -> None:
        self.h = (value >> 8) & 0xFF
        self.l = value & 0xFF
