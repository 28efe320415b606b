import json
from functools import lru_cache

from pydantic import ValidationError

from graphconv.bootstrap.config.settings import ConverterSettings
from graphconv.core.converter import Converter
from graphconv.core.ports.codec import ArchiveCodec, JsonCodec
from graphconv.infra.json_codec import StdJsonCodec
from graphconv.infra.msgpack_archiver import MsgPackArchiveCodec
from graphconv.infra.pickle_archiver import PickleArchiveCodec


@lru_cache
def get_converter() -> Converter:
    return Converter(
        archive_codec=get_archive_codec(),
        json_codec=get_json_codec()
    )


@lru_cache
def get_archive_codec() -> ArchiveCodec:
    config = get_config()

    if config.secure_mode:
        return MsgPackArchiveCodec()

    return PickleArchiveCodec()


@lru_cache
def get_json_codec() -> JsonCodec:
    return StdJsonCodec()


@lru_cache
def get_config() -> ConverterSettings:
    try:
        return ConverterSettings()
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(map(str, err['loc']))}: {err['msg']}")
        raise SystemExit("\n".join(msg))


def reset() -> None:
    """Forget the cached configuration and converter, e.g. after changing the environment."""
    get_config.cache_clear()
    get_archive_codec.cache_clear()
    get_json_codec.cache_clear()
    get_converter.cache_clear()
