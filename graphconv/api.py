"""
Module-level conversion functions backed by the process-wide converter.

None in, None out. Invalid input also yields None, after one ERROR record
on the ``core.converter`` logger.
"""
from typing import Any

from graphconv.bootstrap.deps import get_converter
from graphconv.core.converter import DEFAULT_READ_OPTIONS, DEFAULT_WRITE_OPTIONS
from graphconv.core.models.options import JSONReadOptions, JSONWriteOptions
from graphconv.core.models.values import ArchiveValue, JSONValue


def encode_archive(obj: ArchiveValue | None) -> bytes | None:
    return get_converter().encode_archive(obj)


def decode_archive(data: bytes | None) -> Any:
    return get_converter().decode_archive(data)


def encode_json_bytes(obj: JSONValue, options: JSONWriteOptions = DEFAULT_WRITE_OPTIONS) -> bytes | None:
    return get_converter().encode_json_bytes(obj, options)


def encode_json_string(obj: JSONValue, options: JSONWriteOptions = DEFAULT_WRITE_OPTIONS) -> str | None:
    return get_converter().encode_json_string(obj, options)


def decode_json_from_bytes(data: bytes | None, options: JSONReadOptions = DEFAULT_READ_OPTIONS) -> JSONValue:
    return get_converter().decode_json_from_bytes(data, options)


def decode_json_from_string(text: str | None, options: JSONReadOptions = DEFAULT_READ_OPTIONS) -> JSONValue:
    return get_converter().decode_json_from_string(text, options)
