"""Naming convention registry."""
from typing import Dict, List

from automapper.naming.conventions import (
    NamingConvention,
    IdentityNamingConvention,
    CamelCaseNamingConvention,
    PascalCaseNamingConvention,
    SnakeCaseNamingConvention,
    KebabCaseNamingConvention,
)


class NamingConventionRegistry:
    """Registry of available naming conventions."""

    def __init__(self):
        """Initialize registry."""
        self.conventions: Dict[str, NamingConvention] = {}
        for convention in (
            IdentityNamingConvention(),
            CamelCaseNamingConvention(),
            PascalCaseNamingConvention(),
            SnakeCaseNamingConvention(),
            KebabCaseNamingConvention(),
        ):
            self.add(convention)

    def add(self, convention: NamingConvention) -> None:
        """Register a convention under its name."""
        self.conventions[convention.name] = convention

    def get(self, name: str) -> NamingConvention:
        """Get convention by name."""
        key = name.strip().lower()
        if key not in self.conventions:
            raise ValueError(
                f"Unknown naming convention: {name} "
                f"(available: {', '.join(self.names())})"
            )
        return self.conventions[key]

    def names(self) -> List[str]:
        """Names of all registered conventions."""
        return sorted(self.conventions)
