"""
Maps target language names to generator classes.

`get_generator` is the one place a generator is built from the forms a
configuration arrives in: a snapshot, settings overrides, or the path of
a persisted settings file.
"""

from typing import Dict, Type, Any, List, Union
from pathlib import Path

from .core.generator import CodeGenerator
from .core.config import Configuration, load_config

ConfigSource = Union[Configuration, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


_generators: Dict[str, Type[CodeGenerator]] = {}


def _registered() -> Dict[str, Type[CodeGenerator]]:
    """Language name to generator class, filled on first use."""
    if not _generators:
        from .languages.swift import SwiftGenerator

        _generators["swift"] = SwiftGenerator
    return _generators


def get_generator_class(language: str) -> Type[CodeGenerator]:
    """
    Get generator class for language.

    Raises:
        RegistryError: If language not found
    """
    generators = _registered()
    try:
        return generators[language.lower()]
    except KeyError:
        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(sorted(generators))}"
        ) from None


def _resolve_config(config: ConfigSource) -> Configuration:
    if isinstance(config, Configuration):
        return config
    if isinstance(config, (str, Path)):
        return load_config(settings_file=config)
    if isinstance(config, dict):
        return load_config(custom_config=config)
    if config is None:
        return Configuration()
    raise RegistryError(f"Invalid config type: {type(config)}")


def get_generator(language: str = "swift", config: ConfigSource = None) -> CodeGenerator:
    """
    Create a generator for language.

    Args:
        language: Language name
        config: Configuration snapshot, settings overrides, or settings file path

    Raises:
        RegistryError: If the language is unknown or the generator cannot be built
    """
    generator_class = get_generator_class(language)

    try:
        return generator_class(_resolve_config(config))
    except RegistryError:
        raise
    except Exception as e:
        raise RegistryError(f"Failed to create {language} generator: {e}") from e


def list_supported_languages() -> List[str]:
    """List all supported language names."""
    return sorted(_registered())


def is_language_supported(language: str) -> bool:
    """Check if a generator is registered for language."""
    return language.lower() in _registered()
