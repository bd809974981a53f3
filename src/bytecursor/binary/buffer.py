from __future__ import annotations
import logging
import struct

log = logging.getLogger(__name__)

BytesLike = bytes | bytearray | memoryview


class BufferUnderrun(IndexError):
    """A read asked for bytes past the end of the storage."""


def _check_range(value: int, bits: int, signed: bool) -> None:
    if signed:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        lo, hi = 0, (1 << bits) - 1
    if not (lo <= value <= hi):
        kind = f"{'s' if signed else 'u'}{bits}"
        raise ValueError(f"{kind} out of range ({lo}..{hi}): {value}")


def _to_unsigned(value: int, bits: int) -> int:
    """Two's-complement bit pattern of a signed value."""
    _check_range(value, bits, signed=True)
    return value & ((1 << bits) - 1)


def _to_signed(value: int, bits: int) -> int:
    return value - (1 << bits) if value & (1 << (bits - 1)) else value


class ByteCursorBuffer:
    """
    Growable big-endian byte buffer with a single read/write cursor.

    Reads never grow the storage: asking for bytes past the end raises
    BufferUnderrun and leaves the cursor where it was. Writes always fit,
    the storage is zero-padded up to exactly ``pos + width`` first.
    """

    __slots__ = ("buf", "pos")

    def __init__(self, data: BytesLike = b""):
        self.buf = bytearray(data)
        self.pos = 0

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "ByteCursorBuffer":
        """Wrap a copy of ``data``; the caller's object is never aliased."""
        return cls(data)

    def __len__(self) -> int: return len(self.buf)
    def __bytes__(self) -> bytes: return bytes(self.buf)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={len(self.buf)}, pos={self.pos})"

    # cursor
    def data(self) -> bytearray:
        """The live storage, not a copy."""
        return self.buf

    def tell(self) -> int: return self.pos
    def remaining(self) -> int: return len(self.buf) - self.pos

    def seek(self, pos: int) -> None:
        # past-the-end is allowed here; the next read reports it
        if pos < 0: raise ValueError(f"negative position: {pos}")
        self.pos = pos

    def skip(self, n: int) -> None:
        self._span(n)
        self.pos += n

    def ensure_capacity(self, size: int) -> None:
        if size < 0: raise ValueError(f"negative size: {size}")
        needed = self.pos + size - len(self.buf)
        if needed > 0:
            log.debug("grow %d -> %d bytes", len(self.buf), len(self.buf) + needed)
            self.buf.extend(bytes(needed))

    # raw spans
    def _span(self, n: int) -> int:
        end = self.pos + n
        if n < 0 or end > len(self.buf):
            raise BufferUnderrun(f"underrun: need {n} at {self.pos}, have {len(self.buf)}")
        return end

    def peek(self, n: int) -> bytes:
        return bytes(self.buf[self.pos:self._span(n)])

    def read_bytes(self, n: int) -> bytes:
        """Copy of the next ``n`` bytes; mutating it never touches the buffer."""
        end = self._span(n)
        out = bytes(self.buf[self.pos:end])
        self.pos = end
        return out

    def write_bytes(self, data: BytesLike) -> None:
        n = len(data)
        self.ensure_capacity(n)
        self.buf[self.pos:self.pos + n] = data
        self.pos += n

    # unsigned, big-endian
    def _unpack(self, fmt: str, n: int):
        return struct.unpack(fmt, self.read_bytes(n))[0]

    def _pack(self, fmt: str, value, bits: int) -> None:
        _check_range(value, bits, signed=False)
        self.write_bytes(struct.pack(fmt, value))

    def read_u8(self) -> int:  return self._unpack(">B", 1)
    def read_u16(self) -> int: return self._unpack(">H", 2)
    def read_u32(self) -> int: return self._unpack(">I", 4)
    def read_u64(self) -> int: return self._unpack(">Q", 8)

    def write_u8(self, value: int) -> None:  self._pack(">B", value, 8)
    def write_u16(self, value: int) -> None: self._pack(">H", value, 16)
    def write_u32(self, value: int) -> None: self._pack(">I", value, 32)
    def write_u64(self, value: int) -> None: self._pack(">Q", value, 64)

    # signed: same bits as the unsigned kind of equal width
    def read_s8(self) -> int:  return _to_signed(self.read_u8(), 8)
    def read_s16(self) -> int: return _to_signed(self.read_u16(), 16)
    def read_s32(self) -> int: return _to_signed(self.read_u32(), 32)
    def read_s64(self) -> int: return _to_signed(self.read_u64(), 64)

    def write_s8(self, value: int) -> None:  self.write_u8(_to_unsigned(value, 8))
    def write_s16(self, value: int) -> None: self.write_u16(_to_unsigned(value, 16))
    def write_s32(self, value: int) -> None: self.write_u32(_to_unsigned(value, 32))
    def write_s64(self, value: int) -> None: self.write_u64(_to_unsigned(value, 64))

    # IEEE-754 through the unsigned path
    def read_f32(self) -> float:
        """Signalling NaN patterns come back quieted (7F800001 -> 7FC00001)."""
        return struct.unpack("=f", struct.pack("=I", self.read_u32()))[0]

    def read_f64(self) -> float:
        return struct.unpack("=d", struct.pack("=Q", self.read_u64()))[0]

    def write_f32(self, value: float) -> None:
        try:
            bits = struct.pack("=f", value)
        except OverflowError as e:
            raise ValueError(f"f32 out of range: {value}") from e
        self.write_u32(struct.unpack("=I", bits)[0])

    def write_f64(self, value: float) -> None:
        self.write_u64(struct.unpack("=Q", struct.pack("=d", value))[0])

    def read_bool(self) -> bool: return self.read_u8() != 0
    def write_bool(self, value: bool) -> None: self.write_u8(1 if value else 0)
