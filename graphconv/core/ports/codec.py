from typing import Protocol, Any

from graphconv.core.models.options import JSONReadOptions, JSONWriteOptions


class ArchiveCodec(Protocol):
    """
    Defines the interface for turning an object graph into an opaque
    binary archive and back.

    Implementations must be:
    - pure (no side effects, no state retained between calls)
    - safe against malformed input: failures are reported as
      EncodeFailure / DecodeFailure, never as library-specific errors
    """

    secure: bool
    """
    Whether the codec restricts archives to a known, closed set of types.
    """

    def encode(self, graph: Any) -> bytes:
        """Encode an object graph into archive bytes."""

    def decode(self, data: bytes) -> Any:
        """Rebuild the object graph stored in `data`."""


class JsonCodec(Protocol):
    """
    Defines the interface for RFC 8259 JSON encoding/decoding.

    Options are passed through unchanged. Write options only affect the
    layout of the output, never which values are accepted.
    """

    def serialize(self, value: Any, options: JSONWriteOptions) -> bytes:
        """Encode a JSON value into UTF-8 bytes."""

    def parse(self, data: bytes, options: JSONReadOptions) -> Any:
        """Decode JSON bytes into the corresponding Python value."""
