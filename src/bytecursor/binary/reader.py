from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from .buffer import ByteCursorBuffer, BufferUnderrun
from .scalars import codec_for, layout_width

from bytecursor.models.common import ScalarKind
from bytecursor.models.record import Record
from bytecursor.models.value import ScalarValue

log = logging.getLogger(__name__)

BytesLike = Union[str, Path, bytes, bytearray, memoryview]
Layout = Union[str, Sequence[ScalarKind]]


class ParseError(ValueError):
    pass


# -----------------------------
# Helpers
# -----------------------------

def _load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    return p.read_bytes()


def parse_layout(layout: Layout) -> List[ScalarKind]:
    """
    Turn "u32, s16,f64" (or an existing sequence of kinds) into a list of
    ScalarKind. Order is wire order.
    """
    if not isinstance(layout, str):
        if not layout:
            raise ParseError("empty layout")
        try:
            return [ScalarKind(k) for k in layout]
        except ValueError as e:
            raise ParseError(str(e)) from e

    kinds = []
    for i, tok in enumerate(layout.split(",")):
        tok = tok.strip().lower()
        if not tok:
            raise ParseError(f"empty entry at position {i} in layout {layout!r}")
        try:
            kinds.append(ScalarKind(tok))
        except ValueError:
            known = ", ".join(k.value for k in ScalarKind)
            raise ParseError(f"unknown kind {tok!r} (expected one of: {known})") from None
    return kinds


def _read_record(buf: ByteCursorBuffer, kinds: Sequence[ScalarKind]) -> Record:
    start = buf.tell()
    try:
        values = [ScalarValue(kind=k, value=codec_for(k).read(buf)) for k in kinds]
    except BufferUnderrun as e:
        raise ParseError(f"record truncated at offset {start}: {e}") from e
    return Record(values=values)


def _open(data: BytesLike, offset: int) -> ByteCursorBuffer:
    buf = ByteCursorBuffer.from_bytes(_load_bytes(data))
    if offset < 0 or offset > len(buf):
        raise ParseError(f"offset {offset} outside input of {len(buf)} bytes")
    buf.seek(offset)
    return buf


# -----------------------------
# Decoding
# -----------------------------

def decode_values(data: BytesLike, layout: Layout, *, offset: int = 0) -> Record:
    """Read one value per kind in ``layout``, starting at ``offset``."""
    kinds = parse_layout(layout)
    buf = _open(data, offset)
    return _read_record(buf, kinds)


def iter_records(
    data: BytesLike,
    layout: Layout,
    *,
    offset: int = 0,
    max_records: Optional[int] = None,
) -> Iterator[Record]:
    """
    Repeat ``layout`` over the input until it is exhausted.
    A tail shorter than one record is an error, not silently dropped.
    """
    kinds = parse_layout(layout)
    width = layout_width(kinds)
    buf = _open(data, offset)

    count = 0
    while buf.remaining() > 0:
        if max_records is not None and count >= max_records:
            break
        if buf.remaining() < width:
            raise ParseError(
                f"trailing {buf.remaining()} bytes at offset {buf.tell()} "
                f"(record needs {width})"
            )
        yield _read_record(buf, kinds)
        count += 1

    log.debug("decoded %d records of %d bytes", count, width)
