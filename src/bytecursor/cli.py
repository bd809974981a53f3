from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path
from pydantic import ValidationError
from .binary.reader import ParseError, decode_values, iter_records, parse_layout
from .models.common import ScalarKind
from .models.record import Record

log = logging.getLogger(__name__)

def _parse_scalar(kind: ScalarKind, text: str):
    if kind is ScalarKind.BOOL:
        low = text.strip().lower()
        if low in ("1", "true", "yes"):
            return True
        if low in ("0", "false", "no"):
            return False
        raise ParseError(f"bad bool literal {text!r}")
    if kind.is_float:
        return float(text)
    # int(..., 0) accepts 0x / 0o / 0b prefixes
    return int(text, 0)

def parse_assignment(item: str) -> tuple[ScalarKind, object]:
    """'u32=0xDEADBEEF' -> (ScalarKind.U32, 3735928559)"""
    kind_txt, sep, value_txt = item.partition("=")
    if not sep:
        raise ParseError(f"expected KIND=VALUE, got {item!r}")
    kinds = parse_layout(kind_txt)
    if len(kinds) != 1:
        raise ParseError(f"one kind per assignment, got {kind_txt!r}")
    kind = kinds[0]
    try:
        return kind, _parse_scalar(kind, value_txt)
    except ValueError as e:
        raise ParseError(f"bad value for {kind.value}: {value_txt!r}") from e

def cmd_decode(args):
    if args.repeat or args.max_records is not None:
        out = [
            r.model_dump(mode="json")
            for r in iter_records(args.input, args.layout, offset=args.offset, max_records=args.max_records)
        ]
    else:
        out = decode_values(args.input, args.layout, offset=args.offset).model_dump(mode="json")
    print(json.dumps(out, indent=2))
    return 0

def cmd_encode(args):
    rec = Record.from_pairs([parse_assignment(a) for a in args.values])
    data = rec.to_binary()
    Path(args.output).write_bytes(data)
    log.debug("wrote %d bytes to %s", len(data), args.output)
    return 0

def cmd_info(args):
    data = Path(args.input).read_bytes()
    head = data[: args.head]
    print(f"size={len(data)}")
    print(f"head={head.hex(' ')}")
    return 0

def build_parser():
    p = argparse.ArgumentParser(prog="bytecursor", description="Big-endian fixed-width scalar codec")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("decode", help="decode scalars from a binary file as JSON")
    sp.add_argument("input", help="Path to binary file")
    sp.add_argument("--layout", required=True, help="Comma separated kinds, e.g. u32,s16,f64,bool")
    sp.add_argument("--offset", type=int, default=0, help="Start decoding at this byte offset")
    sp.add_argument("--repeat", action="store_true", help="Repeat the layout until end of input")
    sp.add_argument("--max-records", type=int, default=None, help="Stop after N records (implies --repeat)")
    sp.set_defaults(func=cmd_decode)

    sp = sub.add_parser("encode", help="encode KIND=VALUE pairs into a binary file")
    sp.add_argument("output")
    sp.add_argument("values", nargs="+", metavar="KIND=VALUE")
    sp.set_defaults(func=cmd_encode)

    sp = sub.add_parser("info", help="print size and leading bytes")
    sp.add_argument("input")
    sp.add_argument("--head", type=int, default=16, help="Number of leading bytes to show")
    sp.set_defaults(func=cmd_info)

    return p

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return ns.func(ns)
    except (ParseError, ValidationError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
