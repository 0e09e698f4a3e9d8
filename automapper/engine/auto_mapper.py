"""
AutoMapper - executes registered mappings member by member

Integrates:
- MappingRegistry: definition lookup and reverse derivation
- ReflectionFacility: member enumeration, reads, writes, construction
- Operations: default, from_property, map_to, ignore, map_from, set_to
- Nested mapping: explicit (map_to) and by declared member type
"""

import logging
from typing import Any, Callable, Iterable, List, Optional

from automapper.settings import MapperSettings
from automapper.exceptions import SourceMemberMissing
from automapper.introspection.reflection import ReflectionFacility, UNSET
from automapper.mapping.definition import FrozenMappingDefinition
from automapper.mapping.operations import (
    Ignore,
    MapFrom,
    MapTo,
    MappingOperation,
    SetTo,
)
from automapper.mapping.registry import MappingRegistry

logger = logging.getLogger(__name__)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class AutoMapper:
    """
    Maps objects into registered destination types

    Usage:
    ```python
    registry = MappingRegistry()
    registry.register(ChildClass, ChildClassDto)
    registry.register(ParentClass, ParentClassDto) \\
        .for_member("child", Operation.map_to(ChildClassDto))

    mapper = AutoMapper(registry)
    dto = mapper.map(parent, ParentClassDto)
    # dto.child is a ChildClassDto
    ```
    """

    def __init__(
        self,
        registry: Optional[MappingRegistry] = None,
        reflection: Optional[ReflectionFacility] = None,
        settings: Optional[MapperSettings] = None,
    ):
        """
        Initialize AutoMapper

        Args:
            registry: Mapping definitions (a new empty registry if omitted)
            reflection: Reflection facility (the registry's if omitted)
            settings: Engine policies (read from the environment if omitted)
        """
        if reflection is None:
            reflection = registry.reflection if registry is not None else ReflectionFacility()
        self.reflection = reflection
        self.registry = registry if registry is not None else MappingRegistry(reflection)
        self.settings = settings or MapperSettings.from_env()

    @classmethod
    def initialize(
        cls,
        configure: Callable[[MappingRegistry], Any],
        settings: Optional[MapperSettings] = None,
    ) -> "AutoMapper":
        """
        Build a mapper from a configuration callback

        Args:
            configure: Called once with a fresh registry to register mappings
            settings: Engine policies
        """
        registry = MappingRegistry()
        configure(registry)
        return cls(registry, settings=settings)

    def get_registry(self) -> MappingRegistry:
        """Registry this mapper resolves definitions from"""
        return self.registry

    def map(self, source: Any, destination_type: type) -> Any:
        """
        Map a source object into a new destination_type instance

        Returns:
            The new instance, or None when source is None

        Raises:
            MappingNotRegistered: If the type pair cannot be resolved
            SourceMemberMissing: If a from_property source is absent (strict policy)
            UnsupportedConstruction: If destination_type cannot be instantiated
        """
        if source is None:
            return None

        definition = self.registry.resolve(type(source), destination_type)
        destination = self._construct(definition)
        return self._fill(definition, source, destination)

    def map_onto(self, source: Any, destination: Any) -> Any:
        """Map a source object into an existing destination instance"""
        definition = self.registry.resolve(type(source), type(destination))
        return self._fill(definition, source, destination)

    map_to_object = map_onto

    def map_sequence(self, sources: Iterable[Any], destination_type: type) -> List[Any]:
        """Map each source object, preserving order and length"""
        return [self.map(source, destination_type) for source in sources]

    map_multiple = map_sequence

    def _construct(self, definition: FrozenMappingDefinition) -> Any:
        """Create the destination, skipping __init__ when requested or unavoidable"""
        cls = definition.destination_type

        skip = definition.skip_constructor
        if skip is None:
            skip = self.settings.skip_constructor

        if not skip and self.reflection.requires_arguments(cls):
            logger.debug(
                f"{cls.__qualname__} requires constructor arguments; "
                f"constructing without __init__"
            )
            skip = True

        return self.reflection.construct(cls, skip_constructor=skip)

    def _fill(self, definition: FrozenMappingDefinition, source: Any, destination: Any) -> Any:
        """Apply every destination member's operation"""
        for member in self.reflection.list_members(destination):
            operation = definition.operation_for(member)
            if isinstance(operation, Ignore):
                continue

            value = self._resolve_value(definition, operation, source, member)
            if value is UNSET:
                logger.debug(
                    f"No source value for {definition.destination_type.__qualname__}.{member}"
                )
                continue

            if isinstance(operation, MapTo):
                value = self._map_nested(value, operation.destination_type)
            else:
                value = self._map_declared(value, definition.destination_type, member)

            try:
                self.reflection.write_member(destination, member, value)
            except AttributeError as e:
                logger.warning(
                    f"Cannot write {definition.destination_type.__qualname__}.{member}: {e}"
                )

        return destination

    def _resolve_value(
        self,
        definition: FrozenMappingDefinition,
        operation: MappingOperation,
        source: Any,
        member: str,
    ) -> Any:
        """Source value for a member, or UNSET"""
        if isinstance(operation, MapFrom):
            return operation.compute(source)

        if isinstance(operation, SetTo):
            return operation.value

        source_name = operation.source_name
        if source_name is None:
            return self.reflection.read_member(source, definition.source_member_for(member))

        value = self.reflection.read_member(source, source_name)
        if value is UNSET and self.settings.strict_from_property:
            raise SourceMemberMissing(source_name, type(source))
        return value

    def _map_nested(self, value: Any, destination_type: type) -> Any:
        """Apply an explicit map_to to a single value or a sequence"""
        if _is_sequence(value):
            mapped = [self._map_single(item, destination_type) for item in value]
            return tuple(mapped) if isinstance(value, tuple) else mapped
        return self._map_single(value, destination_type)

    def _map_single(self, value: Any, destination_type: type) -> Any:
        if value is None:
            return None
        if isinstance(value, destination_type) and not self.registry.can_resolve(
            type(value), destination_type
        ):
            return value
        return self.map(value, destination_type)

    def _map_declared(self, value: Any, destination_type: type, member: str) -> Any:
        """Map a value whose runtime type has a mapping to the member's declared type"""
        if value is None:
            return value

        declared, is_sequence = self.reflection.member_type(destination_type, member)
        if declared is None:
            return value

        if is_sequence:
            if not _is_sequence(value) or not value:
                return value
            if all(
                not isinstance(item, declared)
                and self.registry.can_resolve(type(item), declared)
                for item in value
            ):
                mapped = self.map_sequence(value, declared)
                return tuple(mapped) if isinstance(value, tuple) else mapped
            return value

        if not isinstance(value, declared) and self.registry.can_resolve(type(value), declared):
            return self.map(value, declared)
        return value
