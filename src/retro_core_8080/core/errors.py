# retro_core_8080/core/errors.py
"""
Core Layer (例外定義)

命令サイクル中に発生しうる失敗を表す例外階層を定義します。
算術演算そのものは失敗しません（8ビットの結果は常に折り返されます）。
"""


# @intent:responsibility CPUコアが送出する全ての例外の基底クラス。
class CpuError(Exception):
    pass


# @intent:responsibility フェッチしたオペコードに対応する命令が存在しないことを表します。
# @intent:post-condition 送出時、CPUのPCは失敗した命令の先頭を指したままです。
class UnimplementedOpcodeError(CpuError):
    def __init__(self, opcode: int, pc: int):
        self.opcode = opcode
        self.pc = pc
        super().__init__(f"Unimplemented instruction ${opcode:02X} at ${pc:04X}")


# @intent:responsibility メモリ範囲外、またはどのデバイスにもマップされていないアドレスへのアクセスを表します。
# @intent:rationale IndexErrorも継承し、Transport層の「範囲外アクセスはIndexError」という契約を維持します。
class MemoryAccessError(CpuError, IndexError):
    def __init__(self, address: int, size: int = 0, message: str = ""):
        self.address = address
        self.size = size
        if not message:
            message = f"Address {address:#06x} out of bounds for memory of size {size}."
        super().__init__(message)
