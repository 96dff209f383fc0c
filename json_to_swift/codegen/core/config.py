"""
Configuration management for code generation.

Generation options are an immutable snapshot handed to a generator when
it is created. Snapshots can be read from a persisted settings file (a
flat JSON object); the generator never writes settings back.
"""

import json
from pathlib import Path
from typing import Dict, Any, Mapping, Optional, Union
from dataclasses import dataclass, fields, replace
from enum import Enum


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class DeclarationKeyword(Enum):
    """Keyword used for property declarations."""

    IMMUTABLE = "let"
    MUTABLE = "var"


class TypeUnwrapping(Enum):
    """Marker appended to every property type."""

    FORCED = "!"
    OPTIONAL = "?"


# Names used by the persisted settings store
SETTINGS_KEYS = {
    "declaration": "declaration",
    "type_unwrapping": "typeUnwrapping",
    "add_keys": "addKeys",
    "add_default_value": "addDefaultValue",
    "add_init_and_dictionary": "addInitAndDictionary",
    "use_tabs": "useTabsForIndentation",
    "width": "indentationWidth",
}


def _coerce_enum(enum_cls, raw: Any):
    """Decode a stored enum: raw index, keyword value, or member name."""
    if isinstance(raw, enum_cls):
        return raw

    members = list(enum_cls)
    if isinstance(raw, bool):
        raise ConfigError(f"Invalid {enum_cls.__name__} setting: {raw!r}")
    if isinstance(raw, int):
        if 0 <= raw < len(members):
            return members[raw]
    elif isinstance(raw, str):
        for member in members:
            if raw == member.value or raw.upper() == member.name:
                return member
    raise ConfigError(f"Invalid {enum_cls.__name__} setting: {raw!r}")


def _coerce_bool(name: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    raise ConfigError(f"Setting {name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Configuration:
    """Snapshot of the options that shape generated code."""

    declaration: DeclarationKeyword = DeclarationKeyword.IMMUTABLE
    type_unwrapping: TypeUnwrapping = TypeUnwrapping.FORCED
    add_keys: bool = True
    add_default_value: bool = False
    add_init_and_dictionary: bool = False

    # Marks a synthetic type name as still to be filled in by the user
    pending_type_prefix: str = "<#"
    pending_type_suffix: str = "#>"

    key_container_name: str = "Key"

    @property
    def keyword(self) -> str:
        return self.declaration.value

    @property
    def unwrap_marker(self) -> str:
        return self.type_unwrapping.value

    def pending_type(self, type_name: str) -> str:
        """Wrap a synthetic type name in the pending-type marker."""
        return f"{self.pending_type_prefix}{type_name}{self.pending_type_suffix}"

    def replace(self, **changes) -> "Configuration":
        """Return a copy with some options changed."""
        return replace(self, **changes)

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "Configuration":
        """
        Build a snapshot from a persisted key/value settings mapping.

        Missing or null entries keep their defaults. Field names are
        accepted as well as the persisted names.

        Raises:
            ConfigError: If a stored value cannot be decoded
        """
        args = {}
        for f in fields(cls):
            stored_name = SETTINGS_KEYS.get(f.name, f.name)
            raw = settings.get(stored_name, settings.get(f.name))
            if raw is None:
                continue

            if f.name == "declaration":
                args[f.name] = _coerce_enum(DeclarationKeyword, raw)
            elif f.name == "type_unwrapping":
                args[f.name] = _coerce_enum(TypeUnwrapping, raw)
            elif f.name.startswith("add_"):
                args[f.name] = _coerce_bool(stored_name, raw)
            elif isinstance(raw, str):
                args[f.name] = raw
            else:
                raise ConfigError(f"Setting {stored_name} must be a string, got {raw!r}")

        return cls(**args)


@dataclass(frozen=True)
class LineIndent:
    """One indentation unit: a tab, or a run of spaces."""

    use_tabs: bool = False
    width: int = 4

    def __post_init__(self):
        if self.width < 0:
            raise ConfigError(f"Indentation width must not be negative: {self.width}")

    @property
    def unit(self) -> str:
        return "\t" if self.use_tabs else " " * self.width

    def render(self, level: int) -> str:
        """Indentation string for the given depth."""
        return self.unit * max(level, 0)

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "LineIndent":
        """Read indentation from the persisted settings mapping."""
        use_tabs = settings.get(SETTINGS_KEYS["use_tabs"])
        width = settings.get(SETTINGS_KEYS["width"])

        args = {}
        if use_tabs is not None:
            args["use_tabs"] = _coerce_bool(SETTINGS_KEYS["use_tabs"], use_tabs)
        if width is not None:
            if isinstance(width, bool) or not isinstance(width, int):
                raise ConfigError(f"Setting indentationWidth must be an integer, got {width!r}")
            args["width"] = width
        return cls(**args)


class ConfigManager:
    """Loads settings files and builds configuration snapshots."""

    def load_settings(self, settings_path: Union[str, Path]) -> Dict[str, Any]:
        """Load the persisted settings mapping from a JSON file."""
        path = Path(settings_path)

        if not path.exists():
            raise ConfigError(f"Settings file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Settings file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                settings = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in settings file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read settings file {path}: {e}") from e

        if not isinstance(settings, dict):
            raise ConfigError(f"Settings file must contain a JSON object: {path}")

        return settings

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        settings_file: Optional[Union[str, Path]] = None,
    ) -> Configuration:
        """
        Build a configuration snapshot.

        Args:
            custom_config: Overrides applied on top of the settings file
            settings_file: Path to a persisted settings file

        Returns:
            Merged configuration
        """
        merged: Dict[str, Any] = {}

        if settings_file:
            merged.update(self.load_settings(settings_file))

        if custom_config:
            merged.update(custom_config)

        return Configuration.from_settings(merged)

    def get_indent(
        self, settings_file: Optional[Union[str, Path]] = None
    ) -> LineIndent:
        """Read the indentation unit from a settings file, or the default."""
        if not settings_file:
            return LineIndent()
        return LineIndent.from_settings(self.load_settings(settings_file))

    def validate_config(self, config: Configuration) -> list[str]:
        """
        Validate a configuration snapshot.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not config.key_container_name.isidentifier():
            warnings.append(f"Invalid key container name: {config.key_container_name}")

        if not config.pending_type_prefix and not config.pending_type_suffix:
            warnings.append("Pending type marker is empty; placeholders will not stand out")

        if config.add_default_value and config.declaration == DeclarationKeyword.IMMUTABLE:
            if config.add_init_and_dictionary:
                warnings.append(
                    "Immutable properties with default values cannot be assigned in init"
                )

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    settings_file: Optional[Union[str, Path]] = None,
) -> Configuration:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Overrides applied on top of the settings file
        settings_file: Path to a persisted settings file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, settings_file)
