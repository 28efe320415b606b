from dataclasses import fields, is_dataclass
from typing import Any, Callable, TypeVar

from graphconv.core.errors import RegistryError

T = TypeVar("T", bound=type)

RESERVED_CODES = range(0, 16)
"""
Extension codes used by the archive codec itself (tuples, sets...).
"""

MAX_RECORD_CODE = 127


class RecordRegistry:
    """
    Maps dataclass records to the small integer codes that identify them
    inside a secure archive.

    A record can only be archived, and an archive can only be decoded,
    when both sides know the same code for the same class. The registry
    is meant to be filled at import time and only read afterwards.
    """

    def __init__(self) -> None:
        self._by_code: dict[int, type] = {}
        self._by_type: dict[type, int] = {}

    def register(self, code: int, cls: type) -> None:
        if not isinstance(cls, type) or not is_dataclass(cls):
            raise RegistryError(f"{cls!r} is not a dataclass")

        if code in RESERVED_CODES or not 0 <= code <= MAX_RECORD_CODE:
            raise RegistryError(
                f"Record code {code} for {cls.__qualname__} must be within "
                f"{RESERVED_CODES.stop}..{MAX_RECORD_CODE}"
            )

        if (known := self._by_code.get(code)) is not None and known is not cls:
            raise RegistryError(
                f"Record code {code} already used by {known.__qualname__}"
            )

        if (known_code := self._by_type.get(cls)) is not None and known_code != code:
            raise RegistryError(
                f"{cls.__qualname__} already registered with code {known_code}"
            )

        self._by_code[code] = cls
        self._by_type[cls] = code

    def code_of(self, cls: type) -> int | None:
        return self._by_type.get(cls)

    def type_of(self, code: int) -> type | None:
        return self._by_code.get(code)

    def __contains__(self, cls: object) -> bool:
        return cls in self._by_type

    def __len__(self) -> int:
        return len(self._by_code)


default_registry = RecordRegistry()


def archivable(code: int, registry: RecordRegistry = default_registry) -> Callable[[T], T]:
    """
    Class decorator registering a dataclass as an archive record.

        @archivable(16)
        @dataclass
        class Product:
            identifier: str
            price: float
    """
    def decorator(cls: T) -> T:
        registry.register(code, cls)
        return cls

    return decorator


def record_values(record: Any) -> list[Any]:
    """Return the constructor arguments of a record, in declaration order."""
    return [getattr(record, f.name) for f in fields(record) if f.init]
