from __future__ import annotations
from typing import Optional
from .buffer import ByteCursorBuffer
from .scalars import codec_for
from ..models.record import Record

def write_record(record: Record, buf: Optional[ByteCursorBuffer] = None) -> bytes:
    """Encode each value in order at the buffer's cursor.

    Returns the whole storage, so passing an existing buffer appends (or
    overwrites, depending on where its cursor sits) and hands back the result.
    """
    if buf is None:
        buf = ByteCursorBuffer()
    for v in record.values:
        codec_for(v.kind).write(buf, v.value)
    return bytes(buf)
