import json
import math
from typing import Any, NoReturn

from graphconv.core.errors import DecodeFailure, EncodeFailure
from graphconv.core.models.options import JSONReadOptions, JSONWriteOptions
from graphconv.core.ports.codec import JsonCodec


class StdJsonCodec(JsonCodec):
    """
    JSON codec on top of the standard library, tightened to RFC 8259:

    - NaN and Infinity are rejected in both directions
    - object keys must be strings (``json`` would silently stringify
      numbers and booleans)
    - only dict, list, tuple, str, int, float, bool and None are accepted
    """

    def serialize(self, value: Any, options: JSONWriteOptions) -> bytes:
        if options.pretty_printed:
            indent, separators = 2, (",", ": ")
        else:
            indent, separators = None, (",", ":")

        try:
            self._check(value, "$", set())
            text = json.dumps(
                value,
                allow_nan=False,
                ensure_ascii=options.escape_non_ascii,
                sort_keys=options.sorted_keys,
                indent=indent,
                separators=separators
            )
            return text.encode("utf-8")
        except (TypeError, ValueError, RecursionError) as ex:
            raise EncodeFailure("serialize", str(ex)) from ex

    def parse(self, data: bytes, options: JSONReadOptions) -> Any:
        try:
            value = json.loads(data, parse_constant=self._reject_constant)
        except (TypeError, ValueError, RecursionError) as ex:
            raise DecodeFailure("parse", str(ex)) from ex

        if not options.fragments_allowed and not isinstance(value, (dict, list)):
            raise DecodeFailure(
                "parse",
                f"Top-level value must be an array or an object, got {type(value).__name__}"
            )

        return value

    @staticmethod
    def _reject_constant(name: str) -> NoReturn:
        raise ValueError(f"{name} is not a valid JSON number")

    def _check(self, value: Any, path: str, seen: set[int]) -> None:
        if value is None or isinstance(value, (str, bool, int)):
            return

        if isinstance(value, float):
            if not math.isfinite(value):
                raise EncodeFailure("serialize", f"{path}: {value} is not a valid JSON number")
            return

        if isinstance(value, (dict, list, tuple)):
            # Containers currently being walked, to report cycles instead of recursing forever
            if id(value) in seen:
                raise EncodeFailure("serialize", f"{path}: circular reference detected")
            seen.add(id(value))

            if isinstance(value, dict):
                for key, item in value.items():
                    if not isinstance(key, str):
                        raise EncodeFailure(
                            "serialize",
                            f"{path}: object key {key!r} is not a string"
                        )
                    self._check(item, f"{path}.{key}", seen)
            else:
                for index, item in enumerate(value):
                    self._check(item, f"{path}[{index}]", seen)

            seen.discard(id(value))
            return

        raise EncodeFailure(
            "serialize",
            f"{path}: type {type(value).__name__} is not JSON serializable"
        )
