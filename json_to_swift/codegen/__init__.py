"""
Code generation from inferred JSON shapes.

Builds a property tree from a JSON document and renders it as Swift
declarations.
"""

from typing import Any, Dict, Optional, Union

from .registry import (
    RegistryError,
    get_generator,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .core.schema import Property, PropertyKind, build_property
from .core.config import (
    Configuration,
    ConfigManager,
    ConfigError,
    DeclarationKeyword,
    LineIndent,
    TypeUnwrapping,
    load_config,
)


def generate_from_json(
    json_data: Union[str, Dict[str, Any], list],
    language: str = "swift",
    config: Optional[Configuration] = None,
    indent: Optional[LineIndent] = None,
    root_name: str = "Root",
) -> Optional[GenerationResult]:
    """
    Generate code from JSON text or already parsed JSON.

    Args:
        json_data: JSON text, or a parsed object/array
        language: Target language
        config: Configuration snapshot (defaults when omitted)
        indent: Indentation unit
        root_name: Name for the top-level declaration

    Returns:
        GenerationResult, or None when the input has no object or array root
    """
    if isinstance(json_data, (str, bytes)):
        prop = Property.from_json(json_data)
    else:
        prop = build_property(json_data)

    if prop is None:
        return None

    generator = get_generator(language, config)
    return generate_code(generator, prop, indent, root_name)


__all__ = [
    "RegistryError",
    "get_generator",
    "list_supported_languages",
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    "Property",
    "PropertyKind",
    "build_property",
    "Configuration",
    "ConfigManager",
    "ConfigError",
    "DeclarationKeyword",
    "LineIndent",
    "TypeUnwrapping",
    "load_config",
    "generate_from_json",
]
