from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple

class ScalarKind(str, Enum):
    U8 = "u8"
    S8 = "s8"
    U16 = "u16"
    S16 = "s16"
    U32 = "u32"
    S32 = "s32"
    U64 = "u64"
    S64 = "s64"
    F32 = "f32"
    F64 = "f64"
    BOOL = "bool"

    @property
    def is_integer(self) -> bool:
        return self.value[0] in "us"

    @property
    def is_float(self) -> bool:
        return self.value[0] == "f"

    @property
    def width(self) -> int:
        """Encoded size in bytes."""
        if self is ScalarKind.BOOL:
            return 1
        return int(self.value[1:]) // 8

def int_range(kind: ScalarKind) -> Optional[Tuple[int, int]]:
    """Inclusive (lo, hi) for integer kinds, None otherwise."""
    if not kind.is_integer:
        return None
    bits = kind.width * 8
    if kind.value.startswith("s"):
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1
