import logging
from typing import Any, Callable, TypeVar

from graphconv.core.errors import ConversionError, DecodeFailure, EncodeFailure
from graphconv.core.models.options import JSONReadOptions, JSONWriteOptions
from graphconv.core.models.values import ArchiveValue, JSONValue
from graphconv.core.ports.codec import ArchiveCodec, JsonCodec

R = TypeVar("R")

DEFAULT_WRITE_OPTIONS = JSONWriteOptions()
DEFAULT_READ_OPTIONS = JSONReadOptions()


class Converter:
    """
    Converts object graphs to and from binary archives and JSON.

    Every operation comes in two flavours:

    - strict (`archive`, `unarchive`, `to_json_bytes`, `to_json_string`,
      `from_json_bytes`, `from_json_string`) raise EncodeFailure or
      DecodeFailure so callers can tell what went wrong;
    - lenient (`encode_archive`, `decode_archive`, `encode_json_bytes`,
      `encode_json_string`, `decode_json_from_bytes`,
      `decode_json_from_string`) never raise: a failure is logged once and
      the result is None.

    In both flavours a None input is not an error and yields None without
    logging anything. With the lenient flavour, a None result therefore
    does not tell whether the input was missing or invalid.

    The converter holds no state besides its codecs and can be shared
    across threads.
    """

    def __init__(self, archive_codec: ArchiveCodec, json_codec: JsonCodec) -> None:
        self._archive_codec = archive_codec
        self._json_codec = json_codec
        self._logger = logging.getLogger("core.converter")

    @property
    def secure(self) -> bool:
        return self._archive_codec.secure

    def archive(self, obj: ArchiveValue | None) -> bytes | None:
        if obj is None:
            return None
        return self._archive_codec.encode(obj)

    def unarchive(self, data: bytes | None) -> Any:
        if data is None:
            return None
        return self._archive_codec.decode(data)

    def to_json_bytes(
        self,
        obj: JSONValue,
        options: JSONWriteOptions = DEFAULT_WRITE_OPTIONS
    ) -> bytes | None:
        if obj is None:
            return None
        return self._json_codec.serialize(obj, options)

    def to_json_string(
        self,
        obj: JSONValue,
        options: JSONWriteOptions = DEFAULT_WRITE_OPTIONS
    ) -> str | None:
        data = self.to_json_bytes(obj, options)
        if data is None:
            return None

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as ex:
            raise EncodeFailure("to_json_string", str(ex)) from ex

    def from_json_bytes(
        self,
        data: bytes | None,
        options: JSONReadOptions = DEFAULT_READ_OPTIONS
    ) -> JSONValue:
        if data is None:
            return None
        return self._json_codec.parse(data, options)

    def from_json_string(
        self,
        text: str | None,
        options: JSONReadOptions = DEFAULT_READ_OPTIONS
    ) -> JSONValue:
        if text is None:
            return None

        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as ex:
            raise DecodeFailure("from_json_string", str(ex)) from ex

        return self.from_json_bytes(data, options)

    def encode_archive(self, obj: ArchiveValue | None) -> bytes | None:
        return self._absent_on_failure("encode_archive", self.archive, obj)

    def decode_archive(self, data: bytes | None) -> Any:
        return self._absent_on_failure("decode_archive", self.unarchive, data)

    def encode_json_bytes(
        self,
        obj: JSONValue,
        options: JSONWriteOptions = DEFAULT_WRITE_OPTIONS
    ) -> bytes | None:
        return self._absent_on_failure("encode_json_bytes", self.to_json_bytes, obj, options)

    def encode_json_string(
        self,
        obj: JSONValue,
        options: JSONWriteOptions = DEFAULT_WRITE_OPTIONS
    ) -> str | None:
        return self._absent_on_failure("encode_json_string", self.to_json_string, obj, options)

    def decode_json_from_bytes(
        self,
        data: bytes | None,
        options: JSONReadOptions = DEFAULT_READ_OPTIONS
    ) -> JSONValue:
        return self._absent_on_failure("decode_json_from_bytes", self.from_json_bytes, data, options)

    def decode_json_from_string(
        self,
        text: str | None,
        options: JSONReadOptions = DEFAULT_READ_OPTIONS
    ) -> JSONValue:
        return self._absent_on_failure("decode_json_from_string", self.from_json_string, text, options)

    def _absent_on_failure(self, operation: str, func: Callable[..., R], *args: Any) -> R | None:
        try:
            return func(*args)
        except ConversionError as ex:
            self._logger.error(f"{operation} error: {ex.reason}")
            return None
