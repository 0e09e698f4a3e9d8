"""
automapper - object-to-object mapping

Maps instances of one type onto another with:
- Name-matched member copying across naming conventions
- Per-member operations (from_property, map_to, ignore, map_from, set_to)
- Nested object and sequence mapping
- Reverse mapping derivation
"""

from .engine import AutoMapper
from .exceptions import (
    AutoMapperError,
    MappingNotRegistered,
    SourceMemberMissing,
    UnsupportedConstruction,
    MappingConfigurationError,
)
from .introspection import ReflectionFacility, UNSET
from .mapping import (
    MappingDefinition,
    FrozenMappingDefinition,
    MappingRegistry,
    Operation,
)
from .naming import (
    CamelCaseNamingConvention,
    PascalCaseNamingConvention,
    SnakeCaseNamingConvention,
    KebabCaseNamingConvention,
    IdentityNamingConvention,
    translate,
)

__version__ = "0.1.0"

__all__ = [
    "AutoMapper",
    "AutoMapperError",
    "MappingNotRegistered",
    "SourceMemberMissing",
    "UnsupportedConstruction",
    "MappingConfigurationError",
    "ReflectionFacility",
    "UNSET",
    "MappingDefinition",
    "FrozenMappingDefinition",
    "MappingRegistry",
    "Operation",
    "CamelCaseNamingConvention",
    "PascalCaseNamingConvention",
    "SnakeCaseNamingConvention",
    "KebabCaseNamingConvention",
    "IdentityNamingConvention",
    "translate",
]
