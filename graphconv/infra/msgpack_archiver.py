import functools
import msgpack
from msgpack.exceptions import UnpackException
from typing import Any

from graphconv.core.errors import DecodeFailure, EncodeFailure
from graphconv.core.models.records import RecordRegistry, default_registry, record_values
from graphconv.core.ports.codec import ArchiveCodec

TUPLE_CODE = 0
SET_CODE = 1
FROZENSET_CODE = 2

MAX_EXT_DEPTH = 128
"""
Maximum number of nested extension values (tuples, sets, records).
Each level re-enters msgpack, so the bound keeps hostile archives far
away from the interpreter and C stack limits.
"""


class MsgPackArchiveCodec(ArchiveCodec):
    """
    MsgPack-based implementation of the ArchiveCodec interface.

    This is the secure mode: only the closed value union is accepted
    (None, bool, int, float, str, bytes, list, tuple, set, frozenset,
    dict) plus dataclass records known to the registry. Types are checked
    strictly, subclasses of the builtin containers are rejected.

    Tuples, sets and records travel as msgpack extension types so they
    come back as what they were instead of plain lists. They may be
    nested at most MAX_EXT_DEPTH levels deep.
    """
    secure = True

    def __init__(self, registry: RecordRegistry = default_registry) -> None:
        self._registry = registry

    def encode(self, graph: Any) -> bytes:
        try:
            return self._pack(graph, 0)
        except (TypeError, ValueError, OverflowError, RecursionError) as ex:
            raise EncodeFailure("encode", str(ex)) from ex

    def decode(self, data: bytes) -> Any:
        try:
            return self._unpack(data, 0)
        except (TypeError, ValueError, RecursionError, UnpackException) as ex:
            raise DecodeFailure("decode", str(ex) or type(ex).__name__) from ex

    def _pack(self, obj: Any, depth: int) -> bytes:
        if depth > MAX_EXT_DEPTH:
            raise EncodeFailure("encode", f"Nesting exceeds {MAX_EXT_DEPTH} extension levels")

        return msgpack.packb(
            obj,
            default=functools.partial(self._default, depth=depth + 1),
            use_bin_type=True,
            strict_types=True
        )

    def _unpack(self, data: bytes, depth: int) -> Any:
        if depth > MAX_EXT_DEPTH:
            raise DecodeFailure("decode", f"Nesting exceeds {MAX_EXT_DEPTH} extension levels")

        return msgpack.unpackb(
            data,
            ext_hook=functools.partial(self._ext_hook, depth=depth + 1),
            raw=False,
            strict_map_key=False
        )

    def _default(self, obj: Any, depth: int) -> msgpack.ExtType:
        cls = type(obj)

        if cls is tuple:
            return msgpack.ExtType(TUPLE_CODE, self._pack(list(obj), depth))

        if cls is set:
            return msgpack.ExtType(SET_CODE, self._pack(list(obj), depth))

        if cls is frozenset:
            return msgpack.ExtType(FROZENSET_CODE, self._pack(list(obj), depth))

        code = self._registry.code_of(cls)
        if code is None:
            raise TypeError(f"Type {cls.__qualname__} is not allowed in a secure archive")

        return msgpack.ExtType(code, self._pack(record_values(obj), depth))

    def _ext_hook(self, code: int, data: bytes, depth: int) -> Any:
        if code == TUPLE_CODE:
            return tuple(self._unpack(data, depth))

        if code == SET_CODE:
            return set(self._unpack(data, depth))

        if code == FROZENSET_CODE:
            return frozenset(self._unpack(data, depth))

        cls = self._registry.type_of(code)
        if cls is None:
            raise DecodeFailure("decode", f"Unknown record code {code}")

        return cls(*self._unpack(data, depth))
