"""Exception hierarchy for automapper."""
from typing import Optional


def _type_name(cls: Optional[type]) -> str:
    if cls is None:
        return "None"
    return getattr(cls, "__qualname__", repr(cls))


class AutoMapperError(Exception):
    """Base exception for automapper."""

    pass


class MappingNotRegistered(AutoMapperError):
    """No forward mapping and no derivable reverse mapping for a type pair."""

    def __init__(self, source_type: type, destination_type: type):
        self.source_type = source_type
        self.destination_type = destination_type
        super().__init__(
            f"No mapping registered for {_type_name(source_type)} -> "
            f"{_type_name(destination_type)}"
        )


class SourceMemberMissing(AutoMapperError):
    """An explicitly named source member is absent (strict policy only)."""

    def __init__(self, name: str, source_type: Optional[type] = None):
        self.name = name
        self.source_type = source_type
        super().__init__(
            f"Source member '{name}' not found on {_type_name(source_type)}"
        )


class UnsupportedConstruction(AutoMapperError):
    """The destination type cannot be instantiated, even skipping __init__."""

    def __init__(self, destination_type: type, reason: str = ""):
        self.destination_type = destination_type
        self.reason = reason
        message = f"Cannot construct an instance of {_type_name(destination_type)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MappingConfigurationError(AutoMapperError):
    """A mapping definition was changed after it was frozen for execution."""

    pass
