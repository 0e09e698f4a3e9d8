"""
Mapping operations - how a single destination member obtains its value

Operations:
- DefaultOperation: copy the name-matched (convention translated) source member
- FromProperty: copy an explicitly named source member
- MapTo: recursively map the source value into another registered type
- Ignore: leave the destination member alone
- MapFrom: compute the value from the whole source object
- SetTo: assign a constant
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class MappingOperation:
    """Base class for member operations"""

    @property
    def source_name(self) -> Optional[str]:
        """Explicit source member name, if the operation names one"""
        return None


@dataclass(frozen=True)
class DefaultOperation(MappingOperation):
    """Read the source member matching the destination name"""


@dataclass(frozen=True)
class FromProperty(MappingOperation):
    """Read the named source member verbatim (no convention translation)"""

    property_name: str

    @property
    def source_name(self) -> Optional[str]:
        return self.property_name


@dataclass(frozen=True)
class MapTo(MappingOperation):
    """Map the source value (or each element of a sequence) into destination_type"""

    destination_type: type
    from_property: Optional[str] = None

    @property
    def source_name(self) -> Optional[str]:
        return self.from_property


@dataclass(frozen=True)
class Ignore(MappingOperation):
    """Never read a source value"""


@dataclass(frozen=True)
class MapFrom(MappingOperation):
    """Compute the value from the source object; not reversible"""

    compute: Callable[[Any], Any]


@dataclass(frozen=True)
class SetTo(MappingOperation):
    """Assign a constant value; not reversible"""

    value: Any


DEFAULT = DefaultOperation()


class Operation:
    """
    Factory for mapping operations

    Usage:
    ```python
    registry.register(Post, PostDto) \\
        .for_member("author", Operation.map_to(AuthorDto)) \\
        .for_member("title", Operation.from_property("headline")) \\
        .for_member("slug", Operation.map_from(lambda post: slugify(post.title))) \\
        .for_member("internal_id", Operation.ignore())
    ```
    """

    @staticmethod
    def default() -> MappingOperation:
        return DEFAULT

    @staticmethod
    def from_property(name: str) -> MappingOperation:
        return FromProperty(name)

    @staticmethod
    def map_to(destination_type: type, from_property: Optional[str] = None) -> MappingOperation:
        return MapTo(destination_type, from_property)

    @staticmethod
    def ignore() -> MappingOperation:
        return Ignore()

    @staticmethod
    def map_from(compute: Callable[[Any], Any]) -> MappingOperation:
        return MapFrom(compute)

    @staticmethod
    def set_to(value: Any) -> MappingOperation:
        return SetTo(value)

    @staticmethod
    def coerce(operation: Any) -> MappingOperation:
        """Accept an operation or a bare callable (treated as map_from)"""
        if isinstance(operation, MappingOperation):
            return operation
        if callable(operation):
            return MapFrom(operation)
        raise TypeError(
            f"Expected a MappingOperation or a callable, got {type(operation).__name__}"
        )
