"""
Mapping Configuration Module

- Operations: per-member rules (default, from_property, map_to, ignore, map_from, set_to)
- MappingDefinition: chained builder for one (source, destination) pair
- MappingRegistry: definitions keyed by type pair, with lazy reverse derivation
"""

from .operations import (
    MappingOperation,
    DefaultOperation,
    FromProperty,
    MapTo,
    Ignore,
    MapFrom,
    SetTo,
    Operation,
)
from .definition import MappingDefinition, FrozenMappingDefinition
from .registry import MappingRegistry

__all__ = [
    "MappingOperation",
    "DefaultOperation",
    "FromProperty",
    "MapTo",
    "Ignore",
    "MapFrom",
    "SetTo",
    "Operation",
    "MappingDefinition",
    "FrozenMappingDefinition",
    "MappingRegistry",
]
