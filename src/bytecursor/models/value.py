from __future__ import annotations
import math
from pydantic import BaseModel, model_validator
from .common import ScalarKind, int_range

F32_MAX = 3.4028234663852886e38

class ScalarValue(BaseModel):
    kind: ScalarKind
    value: bool | int | float

    @model_validator(mode="after")
    def _check_value(self) -> "ScalarValue":
        v = self.value
        if self.kind is ScalarKind.BOOL:
            if not isinstance(v, bool):
                raise ValueError(f"bool expects True/False, got {v!r}")
        elif self.kind.is_float:
            if isinstance(v, bool):
                raise ValueError(f"{self.kind.value} expects a number, got {v!r}")
            v = float(v)
            if self.kind is ScalarKind.F32 and math.isfinite(v) and abs(v) > F32_MAX:
                raise ValueError(f"f32 out of range (+-{F32_MAX}): {v}")
            self.value = v
        else:
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"{self.kind.value} expects an integer, got {v!r}")
            lo, hi = int_range(self.kind)
            if not (lo <= v <= hi):
                raise ValueError(f"{self.kind.value} out of range ({lo}..{hi}): {v}")
        return self
