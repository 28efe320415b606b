class ConversionError(Exception):
    """
    Base class for failures raised while converting between an object
    graph and one of its serialized forms.
    """

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"{operation}: {reason}")
        self.operation = operation
        self.reason = reason


class EncodeFailure(ConversionError):
    """The codec could not represent the given value."""


class DecodeFailure(ConversionError):
    """The serialized input is malformed or was produced by an incompatible codec."""


class RegistryError(ValueError):
    pass
