"""
Naming utilities for safe code generation.

Turns raw JSON keys into identifiers: splits on whitespace and
punctuation, applies the target case and steps around reserved words.
"""

import re
from typing import Dict, List, Optional, Set
from enum import Enum


class NamingCase(Enum):
    """Naming case styles used for generated declarations."""

    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName


# Anything that is not a letter, digit or underscore separates two segments
_SEGMENT_SPLIT = re.compile(r"\W+")


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        builtin_types: Optional[Set[str]] = None,
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self._name_cache: Dict[str, str] = {}

    def sanitize_name(
        self,
        name: str,
        target_case: NamingCase = NamingCase.CAMEL_CASE,
        suffix_on_conflict: str = "_",
    ) -> str:
        """
        Sanitize a name for safe use in target language.

        The result depends only on the arguments, so the same key always
        maps to the same identifier.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix to add to reserved words

        Returns:
            Sanitized name safe for use
        """
        cache_key = f"{name}\x00{target_case.value}\x00{suffix_on_conflict}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        converted = convert_case(split_segments(name), target_case)
        final_name = self._resolve_conflicts(converted, suffix_on_conflict)

        self._name_cache[cache_key] = final_name
        return final_name

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Step around reserved words and builtin type names."""
        if name in self.reserved_words or name in self.builtin_types:
            return f"{name}{suffix}"
        return name


def split_segments(name: str) -> List[str]:
    """Split a raw key on whitespace and non-identifier punctuation."""
    return [part for part in _SEGMENT_SPLIT.split(name) if part]


def convert_case(segments: List[str], target_case: NamingCase) -> str:
    """Join segments in the target case style."""
    if not segments:
        return "field"

    if target_case == NamingCase.PASCAL_CASE:
        joined = "".join(_upper_first(part) for part in segments)
    else:
        joined = _lower_first(segments[0]) + "".join(
            _upper_first(part) for part in segments[1:]
        )

    # Ensure doesn't start with number
    if joined[0].isdigit():
        joined = f"_{joined}"
    return joined


def _upper_first(part: str) -> str:
    return part[:1].upper() + part[1:]


def _lower_first(part: str) -> str:
    """Lower-case the leading capital, or a whole leading acronym.

    URL -> url, URLPath -> urlPath, Name -> name.
    """
    run = 0
    while run < len(part) and part[run].isupper():
        run += 1
    # The last capital of an acronym starts the next word
    if 1 < run < len(part) and part[run].islower():
        run -= 1
    run = max(run, 1)
    return part[:run].lower() + part[run:]


def type_name_for(name: str, suffix: str = "Type") -> str:
    """Build the synthetic type name for a property name, e.g. info -> InfoType."""
    return convert_case(split_segments(name), NamingCase.PASCAL_CASE) + suffix


# Swift keywords that cannot be used as bare identifiers
SWIFT_RESERVED_WORDS = {
    "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
    "func", "import", "init", "inout", "internal", "let", "open", "operator",
    "private", "protocol", "public", "rethrows", "static", "struct",
    "subscript", "typealias", "var", "break", "case", "continue", "default",
    "defer", "do", "else", "fallthrough", "for", "guard", "if", "in",
    "repeat", "return", "switch", "where", "while", "as", "catch", "false",
    "is", "nil", "super", "self", "Self", "throw", "throws", "true", "try",
    "Any", "Type",
}

# Names the generated initializer and key container already use
SWIFT_GENERATED_NAMES = {"dictionary", "Key"}


def create_swift_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Swift."""
    return NameSanitizer(SWIFT_RESERVED_WORDS, SWIFT_GENERATED_NAMES)


_swift_sanitizer: Optional[NameSanitizer] = None


def swift_identifier(key: str) -> str:
    """Convert a raw JSON key into a camel-cased Swift identifier.

    >>> swift_identifier("miscellaneous scores")
    'miscellaneousScores'
    """
    global _swift_sanitizer
    if _swift_sanitizer is None:
        _swift_sanitizer = create_swift_sanitizer()
    return _swift_sanitizer.sanitize_name(key, NamingCase.CAMEL_CASE)
