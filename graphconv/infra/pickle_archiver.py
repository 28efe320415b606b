import pickle
from typing import Any

from graphconv.core.errors import DecodeFailure, EncodeFailure
from graphconv.core.ports.codec import ArchiveCodec


class PickleArchiveCodec(ArchiveCodec):
    """
    Legacy, unchecked archive mode built on Python's ``pickle`` protocol.

    Handles arbitrary Python objects, shared references and cycles, but
    decoding may instantiate any importable class and call any reduce
    function: only feed it archives produced by a trusted peer.

    Since ``__reduce__`` and reconstruction callables can raise anything,
    every exception is reported as an EncodeFailure / DecodeFailure.
    """
    secure = False

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        self._protocol = protocol

    def encode(self, graph: Any) -> bytes:
        try:
            return pickle.dumps(graph, protocol=self._protocol)
        except Exception as ex:
            raise EncodeFailure("encode", str(ex) or type(ex).__name__) from ex

    def decode(self, data: bytes) -> Any:
        try:
            return pickle.loads(data)  # noqa: S301
        except Exception as ex:
            raise DecodeFailure("decode", str(ex) or type(ex).__name__) from ex
