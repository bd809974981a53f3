from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict
from .buffer import ByteCursorBuffer
from bytecursor.models.common import ScalarKind


@dataclass(frozen=True)
class ScalarCodec:
    kind: ScalarKind
    width: int  # bytes on the wire
    read: Callable[[ByteCursorBuffer], object]
    write: Callable[[ByteCursorBuffer, object], None]


def _codec(kind: ScalarKind) -> ScalarCodec:
    name = kind.value
    return ScalarCodec(
        kind,
        kind.width,
        getattr(ByteCursorBuffer, f"read_{name}"),
        getattr(ByteCursorBuffer, f"write_{name}"),
    )


# One entry per kind, in ScalarKind declaration order.
SCALAR_CODECS: Dict[ScalarKind, ScalarCodec] = {k: _codec(k) for k in ScalarKind}


def codec_for(kind: ScalarKind | str) -> ScalarCodec:
    return SCALAR_CODECS[ScalarKind(kind)]


def layout_width(kinds) -> int:
    """Total encoded size of a sequence of kinds."""
    return sum(SCALAR_CODECS[ScalarKind(k)].width for k in kinds)
