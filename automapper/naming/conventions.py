"""
Naming conventions - tokenize identifiers into words and rebuild them

A convention turns an identifier into an ordered list of lowercase words and
back. Chaining the words of one convention into another translates between
styles:

    translate("propertyName", CamelCaseNamingConvention(), SnakeCaseNamingConvention())
    # -> "property_name"
"""

import re
from typing import List


class NamingConvention:
    """Base class for word-boundary naming styles"""

    name = "identity"

    def to_words(self, identifier: str) -> List[str]:
        raise NotImplementedError

    def from_words(self, words: List[str]) -> str:
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class IdentityNamingConvention(NamingConvention):
    """Leaves identifiers untouched (a single word, case preserved)"""

    name = "identity"

    def to_words(self, identifier: str) -> List[str]:
        return [identifier] if identifier else []

    def from_words(self, words: List[str]) -> str:
        return "".join(words)


class CamelCaseNamingConvention(NamingConvention):
    """propertyName (number-only words are written with an underscore: address_2)"""

    name = "camel"

    # A run of capitals followed by a capitalized word is an acronym: HTTPServer
    WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z0-9])|[A-Z]?[a-z0-9]+|[A-Z]+")

    def to_words(self, identifier: str) -> List[str]:
        return [word.lower() for word in self.WORD_PATTERN.findall(identifier)]

    def from_words(self, words: List[str]) -> str:
        if not words:
            return ""
        head, *tail = words
        return head.lower() + _join_capitalized(tail)


class PascalCaseNamingConvention(CamelCaseNamingConvention):
    """PropertyName"""

    name = "pascal"

    def from_words(self, words: List[str]) -> str:
        if not words:
            return ""
        head, *tail = words
        return _capitalize(head) + _join_capitalized(tail)


class SeparatorNamingConvention(NamingConvention):
    """Words joined by a fixed separator character"""

    separator = "_"

    def to_words(self, identifier: str) -> List[str]:
        return [word.lower() for word in identifier.split(self.separator) if word]

    def from_words(self, words: List[str]) -> str:
        return self.separator.join(word.lower() for word in words)


class SnakeCaseNamingConvention(SeparatorNamingConvention):
    """property_name"""

    name = "snake"
    separator = "_"


class KebabCaseNamingConvention(SeparatorNamingConvention):
    """property-name"""

    name = "kebab"
    separator = "-"


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _join_capitalized(words: List[str]) -> str:
    # Number-only words keep a leading underscore: ["address", "2"] -> address_2
    return "".join("_" + word if word.isdigit() else _capitalize(word) for word in words)


def translate(
    identifier: str,
    source: NamingConvention,
    destination: NamingConvention,
) -> str:
    """
    Translate an identifier from one naming convention to another

    Args:
        identifier: Name written in the source convention
        source: Convention the identifier is written in
        destination: Convention to rewrite it in

    Returns:
        The rewritten identifier. Empty input stays empty and identical
        conventions return the input unchanged.
    """
    if not identifier or source == destination:
        return identifier

    return destination.from_words(source.to_words(identifier))
