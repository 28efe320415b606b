from typing import Any, ClassVar, Protocol, Union

JSONValue = Union[
    None,
    bool,
    int,
    float,
    str,
    list["JSONValue"],
    tuple["JSONValue", ...],
    dict[str, "JSONValue"],
]
"""
RFC 8259 value union. Floats must be finite, object keys must be strings.
"""


class ArchiveRecord(Protocol):
    """Any dataclass instance. Only registered ones can be archived."""
    __dataclass_fields__: ClassVar[dict[str, Any]]


ArchiveValue = Union[
    None,
    bool,
    int,
    float,
    str,
    bytes,
    list["ArchiveValue"],
    tuple["ArchiveValue", ...],
    set[Any],
    frozenset[Any],
    dict[Any, "ArchiveValue"],
    ArchiveRecord,
]
"""
Closed set of values a secure archive accepts.
"""
