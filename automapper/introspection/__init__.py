"""
Introspection Module

Reflection over Python objects for the mapping engine:
- Member discovery (dataclasses, annotations, properties, slots, instance attributes)
- Visibility-independent reads/writes (protected and name-mangled private members)
- Construction with or without running __init__
- Declared member types for nested/sequence mapping
"""

from .reflection import ReflectionFacility, UNSET

__all__ = [
    "ReflectionFacility",
    "UNSET",
]
