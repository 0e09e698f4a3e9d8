"""
Mapping Definition - configuration for one (source type, destination type) pair

A MappingDefinition is a chained builder used while configuring the registry.
Before mapping starts it is frozen into a FrozenMappingDefinition, after which
the builder refuses further changes.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from automapper.exceptions import MappingConfigurationError
from automapper.mapping.operations import DEFAULT, MappingOperation, Operation
from automapper.naming.conventions import (
    IdentityNamingConvention,
    NamingConvention,
    translate,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrozenMappingDefinition:
    """Immutable mapping configuration used at execution time"""

    source_type: type
    destination_type: type
    source_convention: NamingConvention = field(default_factory=IdentityNamingConvention)
    destination_convention: NamingConvention = field(default_factory=IdentityNamingConvention)
    overrides: Mapping[str, MappingOperation] = field(
        default_factory=lambda: MappingProxyType({})
    )
    reversible: bool = False
    skip_constructor: Optional[bool] = None
    derived: bool = False

    def operation_for(self, member: str) -> MappingOperation:
        """Override registered for member, or the default operation"""
        return self.overrides.get(member, DEFAULT)

    def source_member_for(self, member: str) -> str:
        """Source member name a default operation reads for member"""
        return translate(member, self.destination_convention, self.source_convention)

    def __eq__(self, other):
        if not isinstance(other, FrozenMappingDefinition):
            return NotImplemented
        return (
            self.source_type is other.source_type
            and self.destination_type is other.destination_type
            and self.source_convention == other.source_convention
            and self.destination_convention == other.destination_convention
            and dict(self.overrides) == dict(other.overrides)
            and self.reversible == other.reversible
            and self.skip_constructor == other.skip_constructor
            and self.derived == other.derived
        )

    def __hash__(self):
        return hash((self.source_type, self.destination_type))


class MappingDefinition:
    """
    Builder for a source -> destination mapping

    Usage:
    ```python
    registry.register(CamelCaseSource, SnakeCaseSource) \\
        .with_naming_conventions(CamelCaseNamingConvention(), SnakeCaseNamingConvention()) \\
        .for_member("some_other_property", Operation.from_property("anotherProperty")) \\
        .reverse_map()
    ```
    """

    def __init__(self, source_type: type, destination_type: type):
        """
        Initialize MappingDefinition

        Args:
            source_type: Type instances are mapped from
            destination_type: Type instances are mapped into
        """
        self.source_type = source_type
        self.destination_type = destination_type
        self.source_convention: NamingConvention = IdentityNamingConvention()
        self.destination_convention: NamingConvention = IdentityNamingConvention()
        self.overrides: Dict[str, MappingOperation] = {}
        self.reversible = False
        self.should_skip_constructor: Optional[bool] = None
        self._frozen: Optional[FrozenMappingDefinition] = None

    @property
    def is_frozen(self) -> bool:
        return self._frozen is not None

    def _check_mutable(self) -> None:
        if self._frozen is not None:
            raise MappingConfigurationError(
                f"Mapping {self.source_type.__qualname__} -> "
                f"{self.destination_type.__qualname__} is already in use and "
                "can no longer be configured"
            )

    def register_override(self, member: str, operation: Any) -> "MappingDefinition":
        """Set the operation for a destination member; last write wins"""
        self._check_mutable()
        self.overrides[member] = Operation.coerce(operation)
        return self

    for_member = register_override

    def with_naming_conventions(
        self,
        source: NamingConvention,
        destination: NamingConvention,
    ) -> "MappingDefinition":
        """Set the source and destination naming conventions"""
        self._check_mutable()
        self.source_convention = source
        self.destination_convention = destination
        return self

    def mark_reversible(self) -> "MappingDefinition":
        """Make the inverse mapping available under the swapped type pair"""
        self._check_mutable()
        self.reversible = True
        return self

    reverse_map = mark_reversible

    def skip_constructor(self) -> "MappingDefinition":
        """Create destination instances without running __init__"""
        self._check_mutable()
        self.should_skip_constructor = True
        return self

    def dont_skip_constructor(self) -> "MappingDefinition":
        """Always run __init__ when it can be called without arguments"""
        self._check_mutable()
        self.should_skip_constructor = False
        return self

    def freeze(self) -> FrozenMappingDefinition:
        """Freeze this definition for execution; later calls return the same snapshot"""
        if self._frozen is None:
            self._frozen = FrozenMappingDefinition(
                source_type=self.source_type,
                destination_type=self.destination_type,
                source_convention=self.source_convention,
                destination_convention=self.destination_convention,
                overrides=MappingProxyType(dict(self.overrides)),
                reversible=self.reversible,
                skip_constructor=self.should_skip_constructor,
            )
            logger.debug(
                f"Frozen mapping {self.source_type.__qualname__} -> "
                f"{self.destination_type.__qualname__} "
                f"({len(self.overrides)} overrides)"
            )
        return self._frozen

    def __repr__(self):
        return (
            f"MappingDefinition({self.source_type.__qualname__} -> "
            f"{self.destination_type.__qualname__}, overrides={list(self.overrides)})"
        )
