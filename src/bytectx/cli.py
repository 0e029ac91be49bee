from __future__ import annotations
import argparse, json, sys
from typing import Any, List, Tuple

from .codecs.boolean import BOOL
from .codecs.num import BY_NAME as NUM_CODECS
from .codecs.text import BYTES, STR
from .cursor import read_iter, read_with, write_with
from .errors import ByteError
from .models.context import BE, LE, NATIVE, BytesCtx, StrCtx
from .offset import Offset

ENDIANS = {"be": BE, "le": LE, "native": NATIVE}


class SpecError(ValueError):
    pass


def parse_type(spec: str, endian) -> Tuple[Any, Any]:
    """
    Turn a type spec into (codec, ctx):
      bool | u8..f64 | str:len=N | str:delim=D | str:until=D,N | bytes:len=N
    """
    kind, _, arg = spec.partition(":")
    if kind == "bool" and not arg:
        return BOOL, None
    if kind in NUM_CODECS and not arg:
        return NUM_CODECS[kind], endian

    key, _, val = arg.partition("=")
    try:
        if kind == "str" and key == "len":
            return STR, StrCtx.of_len(int(val, 0))
        if kind == "str" and key == "delim":
            return STR, StrCtx.delimited(int(val, 0))
        if kind == "str" and key == "until":
            d, n = val.split(",")
            return STR, StrCtx.delimited_until(int(d, 0), int(n, 0))
        if kind == "bytes" and key == "len":
            return BYTES, BytesCtx.of_len(int(val, 0))
    except ValueError as e:
        raise SpecError(f"bad type spec {spec!r}: {e}") from e
    raise SpecError(f"unknown type spec {spec!r}")


def _jsonable(v: Any) -> Any:
    if isinstance(v, (memoryview, bytes, bytearray)):
        return bytes(v).hex()
    return v


def _load_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise SpecError(f"bad hex input: {e}") from e


def _fail(err: ByteError) -> int:
    print(f"error: {type(err).__name__}: {err}", file=sys.stderr)
    return 1


def cmd_decode(args) -> int:
    data = _load_hex(args.hex)
    endian = ENDIANS[args.endian]
    plan = [parse_type(t, endian) for t in args.types]

    off = Offset()
    values: List[Any] = []
    try:
        for codec, ctx in plan:
            values.append(_jsonable(read_with(data, off, codec, ctx)))
    except ByteError as err:
        return _fail(err)

    if off.pos < len(data):
        print(f"Warning: {len(data) - off.pos} trailing bytes not decoded", file=sys.stderr)
    print(json.dumps({"values": values, "offset": off.pos}))
    return 0


def cmd_iter(args) -> int:
    data = _load_hex(args.hex)
    codec, ctx = parse_type(args.type, ENDIANS[args.endian])
    off = Offset()
    values = [_jsonable(v) for v in read_iter(data, off, codec, ctx)]
    print(json.dumps({"values": values, "offset": off.pos}))
    return 0


def _coerce(codec, raw: str) -> Any:
    if codec is BOOL:
        if raw.lower() in ("1", "true", "yes"):
            return True
        if raw.lower() in ("0", "false", "no"):
            return False
        raise SpecError(f"bad bool value {raw!r}")
    if codec is STR:
        return raw
    if codec is BYTES:
        return _load_hex(raw)
    try:
        return float(raw) if codec.name.startswith("f") else int(raw, 0)
    except ValueError as e:
        raise SpecError(f"bad {codec.name} value {raw!r}") from e


def cmd_encode(args) -> int:
    endian = ENDIANS[args.endian]
    items = []
    for item in args.items:
        spec, sep, raw = item.partition("=")
        # str:len=N=value / str:delim=D=value carry their own '=' in the type spec
        if spec.startswith(("str:", "bytes:")):
            spec, sep, raw = item.rpartition("=")
        if not sep:
            raise SpecError(f"expected TYPE=VALUE, got {item!r}")
        codec, ctx = parse_type(spec, endian)
        items.append((codec, ctx, _coerce(codec, raw)))

    buf = bytearray(args.size)
    off = Offset()
    try:
        for codec, ctx, value in items:
            write_with(buf, off, codec, value, ctx)
    except ByteError as err:
        return _fail(err)
    print(bytes(buf[:off.pos]).hex())
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="bytectx", description="decode/encode values at a byte cursor")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("decode", help="decode a sequence of values from a hex buffer")
    sp.add_argument("hex", help="input bytes as hex, e.g. 0005484954")
    sp.add_argument("types", nargs="+", help="type specs in wire order")
    sp.add_argument("--endian", default="native", choices=sorted(ENDIANS))
    sp.set_defaults(func=cmd_decode)

    sp = sub.add_parser("iter", help="decode one type repeatedly until it stops")
    sp.add_argument("hex")
    sp.add_argument("type")
    sp.add_argument("--endian", default="native", choices=sorted(ENDIANS))
    sp.set_defaults(func=cmd_iter)

    sp = sub.add_parser("encode", help="encode TYPE=VALUE items into a fixed-size buffer")
    sp.add_argument("items", nargs="+")
    sp.add_argument("--size", type=int, required=True, help="buffer size in bytes")
    sp.add_argument("--endian", default="native", choices=sorted(ENDIANS))
    sp.set_defaults(func=cmd_encode)

    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    try:
        return ns.func(ns)
    except SpecError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
