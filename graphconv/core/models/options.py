from dataclasses import dataclass


@dataclass(frozen=True)
class JSONWriteOptions:
    """
    Layout options for JSON output. None of them changes which values
    can be written.
    """
    pretty_printed: bool = False
    """
    Indent nested containers by two spaces and put each member on its own line.
    """

    sorted_keys: bool = False
    """
    Emit object members ordered by key instead of insertion order.
    """

    escape_non_ascii: bool = False
    """
    Write non-ASCII characters as \\uXXXX escapes instead of raw UTF-8.
    """


@dataclass(frozen=True)
class JSONReadOptions:
    fragments_allowed: bool = True
    """
    Accept a bare scalar (string, number, boolean, null) as the top-level
    value. When disabled, the document must be an array or an object.
    """
