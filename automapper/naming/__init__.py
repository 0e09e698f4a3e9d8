"""
Naming Conventions

Translates member names between word-boundary styles:
- camelCase / PascalCase (boundary at capitals)
- snake_case / kebab-case (boundary at a separator)
- identity (no translation)
"""

from .conventions import (
    NamingConvention,
    IdentityNamingConvention,
    CamelCaseNamingConvention,
    PascalCaseNamingConvention,
    SnakeCaseNamingConvention,
    KebabCaseNamingConvention,
    translate,
)
from .registry import NamingConventionRegistry

__all__ = [
    "NamingConvention",
    "IdentityNamingConvention",
    "CamelCaseNamingConvention",
    "PascalCaseNamingConvention",
    "SnakeCaseNamingConvention",
    "KebabCaseNamingConvention",
    "NamingConventionRegistry",
    "translate",
]
