import pytest
from typing import Generator

from graphconv.bootstrap import deps
from graphconv.core.converter import Converter
from graphconv.infra.json_codec import StdJsonCodec
from graphconv.infra.msgpack_archiver import MsgPackArchiveCodec
from graphconv.infra.pickle_archiver import PickleArchiveCodec
from tests.fake.fake_codecs import RecordingArchiveCodec, RecordingJsonCodec


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> Generator[None, None, None]:
    monkeypatch.delenv("GRAPHCONV_CONFIG", raising=False)
    monkeypatch.delenv("GRAPHCONV_SECURE_MODE", raising=False)
    monkeypatch.delenv("GRAPHCONV_LOG_LEVEL", raising=False)
    deps.reset()

    try:
        yield
    finally:
        deps.reset()


@pytest.fixture
def json_codec() -> StdJsonCodec:
    return StdJsonCodec()


@pytest.fixture
def msgpack_codec() -> MsgPackArchiveCodec:
    return MsgPackArchiveCodec()


@pytest.fixture
def pickle_codec() -> PickleArchiveCodec:
    return PickleArchiveCodec()


@pytest.fixture
def converter(msgpack_codec, json_codec) -> Converter:
    return Converter(archive_codec=msgpack_codec, json_codec=json_codec)


@pytest.fixture
def legacy_converter(pickle_codec, json_codec) -> Converter:
    return Converter(archive_codec=pickle_codec, json_codec=json_codec)


@pytest.fixture
def recording_converter() -> Converter:
    return Converter(
        archive_codec=RecordingArchiveCodec(),
        json_codec=RecordingJsonCodec()
    )


@pytest.fixture
def converter_logs(caplog):
    """Return a callable listing the records emitted by the converter so far."""
    def records():
        return [r for r in caplog.records if r.name == "core.converter"]

    return records
