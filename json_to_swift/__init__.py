"""
json_to_swift: generate Swift declarations from JSON documents.

Infers a type for every value in a JSON document, names the nested
object shapes and renders structs, key constants and initializers.
"""

from .codegen import (
    Configuration,
    DeclarationKeyword,
    GenerationResult,
    LineIndent,
    Property,
    PropertyKind,
    TypeUnwrapping,
    build_property,
    generate_from_json,
    get_generator,
)
from .utils import json_object

__version__ = "0.1.0"

__all__ = [
    "Configuration",
    "DeclarationKeyword",
    "GenerationResult",
    "LineIndent",
    "Property",
    "PropertyKind",
    "TypeUnwrapping",
    "build_property",
    "generate_from_json",
    "get_generator",
    "json_object",
]
