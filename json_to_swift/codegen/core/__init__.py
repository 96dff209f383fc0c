"""
Core code generation components.

Provides the property model, configuration and base classes used by
all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import Property, PropertyKind, build_property
from .keys import collect_keys
from .values import ValueType, classify_value
from .naming import NameSanitizer, NamingCase, swift_identifier
from .config import (
    Configuration,
    ConfigManager,
    ConfigError,
    DeclarationKeyword,
    LineIndent,
    TypeUnwrapping,
    load_config,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Property model
    "Property",
    "PropertyKind",
    "build_property",
    "collect_keys",
    "ValueType",
    "classify_value",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    "swift_identifier",
    # Configuration system
    "Configuration",
    "ConfigManager",
    "ConfigError",
    "DeclarationKeyword",
    "LineIndent",
    "TypeUnwrapping",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
