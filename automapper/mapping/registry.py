"""
Mapping Registry - stores mapping definitions keyed by (source type, destination type)

Reverse mappings are derived lazily from reversible forward definitions and
cached. A derivation is deterministic, so concurrent first lookups of the same
pair may both fill the cache slot and the last writer wins with an equal value.

Reverse derivation rules:
- naming conventions are swapped
- FromProperty(n) on member m becomes FromProperty(m) on member n
- MapTo(X) is inverted when the source member has a declared type Y and
  (X, Y) can be resolved; otherwise the member falls back to the default
- MapFrom, SetTo and Ignore cannot be inverted and fall back to the default
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional, Tuple

from automapper.exceptions import MappingNotRegistered
from automapper.introspection.reflection import ReflectionFacility
from automapper.mapping.definition import FrozenMappingDefinition, MappingDefinition
from automapper.mapping.operations import FromProperty, MapTo, MappingOperation

logger = logging.getLogger(__name__)

TypePair = Tuple[type, type]


class MappingRegistry:
    """Registry of mapping definitions"""

    def __init__(self, reflection: Optional[ReflectionFacility] = None):
        """
        Initialize MappingRegistry

        Args:
            reflection: Facility used to look up declared member types when
                inverting MapTo operations
        """
        self.reflection = reflection or ReflectionFacility()
        self._definitions: Dict[TypePair, MappingDefinition] = {}
        self._derived: Dict[TypePair, FrozenMappingDefinition] = {}

    def register(self, source_type: type, destination_type: type) -> MappingDefinition:
        """
        Register a mapping, replacing any previous one for the same pair

        Returns:
            The new definition, for chained configuration
        """
        key = (source_type, destination_type)
        if key in self._definitions:
            logger.debug(
                f"Replacing mapping {source_type.__qualname__} -> "
                f"{destination_type.__qualname__}"
            )

        definition = MappingDefinition(source_type, destination_type)
        self._definitions[key] = definition
        self._derived.pop(key, None)
        self._derived.pop((destination_type, source_type), None)
        return definition

    def get_definition(
        self, source_type: type, destination_type: type
    ) -> Optional[MappingDefinition]:
        """Registered (forward) definition for a pair, if any"""
        return self._definitions.get((source_type, destination_type))

    def resolve(self, source_type: type, destination_type: type) -> FrozenMappingDefinition:
        """
        Resolve the definition used to map source_type into destination_type

        Raises:
            MappingNotRegistered: If neither a forward definition nor a
                reversible definition for the swapped pair exists
        """
        key = (source_type, destination_type)

        definition = self._definitions.get(key)
        if definition is not None:
            return definition.freeze()

        derived = self._derived.get(key)
        if derived is not None:
            return derived

        forward = self._definitions.get((destination_type, source_type))
        if forward is None or not forward.reversible:
            raise MappingNotRegistered(source_type, destination_type)

        derived = self._derive_reverse(forward.freeze())
        self._derived[key] = derived
        return derived

    def can_resolve(self, source_type: type, destination_type: type) -> bool:
        """Whether resolve() would succeed for the pair"""
        if (source_type, destination_type) in self._definitions:
            return True
        forward = self._definitions.get((destination_type, source_type))
        return forward is not None and forward.reversible

    def definitions(self) -> List[MappingDefinition]:
        """All registered forward definitions"""
        return list(self._definitions.values())

    def __contains__(self, pair: TypePair) -> bool:
        return pair in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[TypePair]:
        return iter(list(self._definitions))

    def _derive_reverse(self, forward: FrozenMappingDefinition) -> FrozenMappingDefinition:
        """Build the inverse of a reversible forward definition"""
        overrides: Dict[str, MappingOperation] = {}

        for member, operation in forward.overrides.items():
            inverted = self._invert(forward, member, operation)
            if inverted is None:
                logger.debug(
                    f"Operation {type(operation).__name__} on '{member}' is not "
                    f"reversible; reverse mapping uses the default"
                )
                continue
            reverse_member, reverse_operation = inverted
            overrides[reverse_member] = reverse_operation

        logger.debug(
            f"Derived reverse mapping {forward.destination_type.__qualname__} -> "
            f"{forward.source_type.__qualname__} ({len(overrides)} overrides)"
        )

        return FrozenMappingDefinition(
            source_type=forward.destination_type,
            destination_type=forward.source_type,
            source_convention=forward.destination_convention,
            destination_convention=forward.source_convention,
            overrides=MappingProxyType(overrides),
            reversible=False,
            derived=True,
        )

    def _invert(
        self,
        forward: FrozenMappingDefinition,
        member: str,
        operation: MappingOperation,
    ) -> Optional[Tuple[str, MappingOperation]]:
        if isinstance(operation, MapTo):
            source_member = operation.from_property or forward.source_member_for(member)
            member_type, _ = self.reflection.member_type(forward.source_type, source_member)

            if member_type is not None and self.can_resolve(
                operation.destination_type, member_type
            ):
                from_property = member if operation.from_property else None
                return source_member, MapTo(member_type, from_property)

            if operation.from_property:
                return operation.from_property, FromProperty(member)
            return None

        if isinstance(operation, FromProperty):
            return operation.property_name, FromProperty(member)

        return None
