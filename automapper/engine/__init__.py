"""Mapping engine."""

from .auto_mapper import AutoMapper

__all__ = [
    "AutoMapper",
]
