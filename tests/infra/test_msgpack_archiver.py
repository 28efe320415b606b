import msgpack
import pickle
import pytest
from dataclasses import dataclass

from graphconv.core.errors import DecodeFailure, EncodeFailure
from graphconv.core.models.records import RecordRegistry, archivable
from graphconv.infra.msgpack_archiver import MAX_EXT_DEPTH, TUPLE_CODE, MsgPackArchiveCodec
from tests.fake.fake_records import Product, Transaction, Unregistered


@pytest.mark.parametrize("graph", [
    True,
    0,
    -42,
    2 ** 63,
    3.5,
    "",
    "héllo",
    b"\x00\x01",
    [],
    [1, [2, [3]]],
    (1, "two", (3.0,)),
    {1, 2, 3},
    frozenset({"a", "b"}),
    {"a": {"b": [1, 2]}},
    {1: "int key", (1, 2): "tuple key", frozenset({3}): "frozenset key"},
    {"nested": [None, {"x": b"y"}]},
])
def test_roundtrip_builtin_values(msgpack_codec, graph):
    decoded = msgpack_codec.decode(msgpack_codec.encode(graph))

    assert decoded == graph
    assert type(decoded) is type(graph)


def test_roundtrip_records(msgpack_codec):
    product = Product("com.example.gem", 0.99, ["consumable"])
    graph = {
        "pending": [Transaction("t-1", product, 2, b"receipt")],
        "catalog": (product,),
    }

    decoded = msgpack_codec.decode(msgpack_codec.encode(graph))

    assert decoded == graph
    assert isinstance(decoded["pending"][0], Transaction)
    assert isinstance(decoded["pending"][0].product, Product)
    assert isinstance(decoded["catalog"], tuple)


def test_secure_flag(msgpack_codec):
    assert msgpack_codec.secure is True


def test_encode_unregistered_record(msgpack_codec):
    with pytest.raises(EncodeFailure, match="Unregistered"):
        msgpack_codec.encode([Unregistered("x")])


@pytest.mark.parametrize("graph", [
    object(),
    {"when": 1j},
])
def test_encode_unsupported_types(msgpack_codec, graph):
    with pytest.raises(EncodeFailure):
        msgpack_codec.encode(graph)


def test_encode_subclass_is_rejected(msgpack_codec):
    class Tags(list):
        pass

    with pytest.raises(EncodeFailure):
        msgpack_codec.encode(Tags([1]))


def test_encode_integer_out_of_range(msgpack_codec):
    with pytest.raises(EncodeFailure):
        msgpack_codec.encode(2 ** 64)


def test_encode_cycle_fails(msgpack_codec):
    graph: list = []
    graph.append(graph)

    with pytest.raises(EncodeFailure):
        msgpack_codec.encode(graph)


@pytest.mark.parametrize("data", [
    b"",
    b"\x93\x01",
    b"\xc1",
    b"\x01\x02",
])
def test_decode_malformed(msgpack_codec, data):
    with pytest.raises(DecodeFailure):
        msgpack_codec.decode(data)


def test_decode_pickle_archive(msgpack_codec):
    with pytest.raises(DecodeFailure):
        msgpack_codec.decode(pickle.dumps({"a": 1}))


def test_decode_unknown_record_code(msgpack_codec):
    registry = RecordRegistry()

    @archivable(99, registry=registry)
    @dataclass
    class Foreign:
        value: int

    data = MsgPackArchiveCodec(registry=registry).encode(Foreign(1))

    with pytest.raises(DecodeFailure, match="Unknown record code 99"):
        msgpack_codec.decode(data)


def test_decode_record_with_wrong_arity(msgpack_codec):
    registry = RecordRegistry()

    @archivable(16, registry=registry)
    @dataclass
    class ShortProduct:
        identifier: str
        price: float
        tags: list
        extra: int
        more: int

    data = MsgPackArchiveCodec(registry=registry).encode(ShortProduct("x", 1.0, [], 1, 2))

    with pytest.raises(DecodeFailure):
        msgpack_codec.decode(data)


def nested_ext_archive(levels: int) -> bytes:
    data = msgpack.packb([])
    for _ in range(levels):
        data = msgpack.packb(msgpack.ExtType(TUPLE_CODE, data))
    return data


def test_roundtrip_nested_tuples_within_bound(msgpack_codec):
    graph: tuple = ()
    for _ in range(50):
        graph = (graph,)

    assert msgpack_codec.decode(msgpack_codec.encode(graph)) == graph


@pytest.mark.parametrize("levels", [MAX_EXT_DEPTH + 1, 1200, 5000])
def test_decode_deeply_nested_extensions(msgpack_codec, levels):
    with pytest.raises(DecodeFailure, match="Nesting exceeds"):
        msgpack_codec.decode(nested_ext_archive(levels))


def test_encode_deeply_nested_tuples(msgpack_codec):
    graph: tuple = ()
    for _ in range(5000):
        graph = (graph,)

    with pytest.raises(EncodeFailure, match="Nesting exceeds"):
        msgpack_codec.encode(graph)


def test_encode_deeply_nested_records(msgpack_codec):
    graph = Product("leaf", 0.0)
    for _ in range(MAX_EXT_DEPTH + 10):
        graph = Product("node", 1.0, [graph])

    with pytest.raises(EncodeFailure):
        msgpack_codec.encode(graph)
