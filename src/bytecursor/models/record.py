from __future__ import annotations
from pathlib import Path
from pydantic import BaseModel, Field
from typing import List, Sequence
from .common import ScalarKind
from .value import ScalarValue

class Record(BaseModel):
    values: List[ScalarValue] = Field(default_factory=list)

    @property
    def layout(self) -> List[ScalarKind]:
        return [v.kind for v in self.values]

    @classmethod
    def from_pairs(cls, pairs: Sequence[tuple]) -> "Record":
        """Build from (kind, value) pairs, e.g. [("u16", 7), ("bool", True)]."""
        return cls(values=[ScalarValue(kind=k, value=v) for k, v in pairs])

    # Convenience constructors backed by the binary layer
    @classmethod
    def from_binary(
        cls,
        data: bytes | bytearray | memoryview | str | Path,
        layout: str | Sequence[ScalarKind],
        *,
        offset: int = 0,
    ) -> "Record":
        from ..binary.reader import decode_values
        return decode_values(data, layout, offset=offset)

    def to_binary(self) -> bytes:
        from ..binary.writer import write_record
        return write_record(self)
