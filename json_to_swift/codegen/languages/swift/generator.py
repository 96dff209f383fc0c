"""
Swift code generator implementation.

Generates Swift structs, a key container and an optional dictionary
initializer from a property tree.
"""

from typing import Dict, List, Optional, Any
from pathlib import Path

from ...core.config import Configuration, LineIndent
from ...core.generator import CodeGenerator, GeneratorError
from ...core.naming import swift_identifier
from ...core.schema import Property, PropertyKind
from ...core.templates import string_literal
from ...core.values import ANY

REQUIRED_TEMPLATES = ("key_block.swift.j2", "struct.swift.j2", "init.swift.j2")


class SwiftGenerator(CodeGenerator):
    """Code generator for Swift structs."""

    def __init__(self, config: Optional[Configuration] = None):
        """Initialize Swift generator with configuration."""
        super().__init__(config)

        for template_name in REQUIRED_TEMPLATES:
            if not self.template_exists(template_name):
                raise GeneratorError(f"{template_name} template not found")

    def get_template_directory(self) -> Path:
        """Return the Swift templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "swift"

    @property
    def file_extension(self) -> str:
        """Return Swift file extension."""
        return ".swift"

    # Fragments

    def property_keys(self, prop: Property, indent: LineIndent, level: int = 0) -> str:
        """Render the key container for every unique key in the tree."""
        if not self.config.add_keys:
            return ""

        keys = [
            {"name": swift_identifier(key), "original": key}
            for key in prop.all_keys()
        ]
        return self.render_template(
            "key_block.swift.j2",
            {
                "indent": indent.render(level),
                "member_indent": indent.render(level + 1),
                "container": self.config.key_container_name,
                "keyword": self.config.keyword,
                "keys": keys,
            },
        )

    def type_content(self, prop: Property, indent: LineIndent, level: int = 0) -> str:
        """Render a struct for each object-shaped child, nesting recursively."""
        structs = []

        for child in prop.children.values():
            if not child.has_type:
                continue

            body = (
                self.property_content(child, indent, level)
                + self.init_content(child, indent, level)
                + self.type_content(child, indent, level + 1)
            )
            structs.append(
                self.render_template(
                    "struct.swift.j2",
                    {
                        "indent": indent.render(level),
                        "type_name": self._pending_type(child),
                        "body": body,
                    },
                )
            )

        return "".join(structs)

    def property_content(
        self, prop: Property, indent: LineIndent, level: int = 0
    ) -> str:
        """Render one declaration line per direct child."""
        member_indent = indent.render(level + 1)
        lines = []

        for child in prop.children.values():
            line = (
                f"{member_indent}{self.config.keyword} {child.name}: "
                f"{self.declared_type(child)}{self.config.unwrap_marker}"
            )
            if self.config.add_default_value:
                line += f" = {self.default_value(child)}"
            lines.append(line + "\n")

        return "".join(lines)

    def init_content(self, prop: Property, indent: LineIndent, level: int = 0) -> str:
        """Render the dictionary initializer and dictionary export."""
        if not self.config.add_init_and_dictionary:
            return ""

        assignments = []
        exports = []
        for child in prop.children.values():
            ref = self._key_reference(child)
            assignments.append(self._assignment(child, ref))
            exports.append(self._export(child, ref))

        return self.render_template(
            "init.swift.j2",
            {
                "indent": indent.render(level + 1),
                "inner": indent.render(level + 2),
                "assignments": assignments,
                "exports": exports,
            },
        )

    def generate(
        self,
        prop: Property,
        indent: Optional[LineIndent] = None,
        root_name: str = "Root",
    ) -> str:
        """Generate a complete struct for the root of a property tree."""
        indent = indent or LineIndent()

        body = (
            self.property_content(prop, indent, 0)
            + self.property_keys(prop, indent, 1)
            + self.init_content(prop, indent, 0)
            + self.type_content(prop, indent, 1)
        )
        code = self.render_template(
            "struct.swift.j2",
            {"indent": "", "type_name": root_name, "body": body},
        )
        return self.format_code(code.lstrip("\n"))

    # Type rendering

    def _pending_type(self, prop: Property) -> str:
        return self.config.pending_type(prop.synthetic_type_name)

    def declared_type(self, prop: Property) -> str:
        """Swift type of a property, without the unwrap marker."""
        if prop.kind == PropertyKind.SCALAR:
            return prop.value_type.type_name
        if prop.kind == PropertyKind.ARRAY_OF_SCALAR:
            return f"[{prop.value_type.type_name}]"
        if prop.kind == PropertyKind.ARRAY_OF_OBJECT:
            return f"[{self._pending_type(prop)}]"
        if prop.kind == PropertyKind.OBJECT:
            return self._pending_type(prop)
        return "[Any]"

    def default_value(self, prop: Property) -> str:
        """Default literal for a property declaration."""
        if prop.kind == PropertyKind.SCALAR:
            return prop.value_type.default_literal
        if prop.kind == PropertyKind.OBJECT:
            return "[:]"
        return "[]"

    # Initializer lines

    def _key_reference(self, prop: Property) -> str:
        # Key constants are instance members
        if self.config.add_keys:
            return f"{self.config.key_container_name}().{swift_identifier(prop.key)}"
        return string_literal(prop.key)

    def _assignment(self, prop: Property, ref: str) -> str:
        value = f"dictionary[{ref}]"

        if prop.kind == PropertyKind.OBJECT:
            return (
                f"{prop.name} = {self._pending_type(prop)}"
                f"(dictionary: {value} as? [String: Any])"
            )

        if prop.kind == PropertyKind.ARRAY_OF_OBJECT:
            expression = (
                f"({value} as? [[String: Any]])?"
                f".compactMap {{ {self._pending_type(prop)}(dictionary: $0) }}"
            )
        elif prop.kind == PropertyKind.SCALAR and prop.value_type == ANY:
            return f"{prop.name} = {value}"
        else:
            expression = f"{value} as? {self.declared_type(prop)}"

        if self.config.add_default_value:
            expression += f" ?? {self.default_value(prop)}"
        return f"{prop.name} = {expression}"

    def _export(self, prop: Property, ref: str) -> str:
        if prop.kind == PropertyKind.OBJECT:
            return f"dictionary[{ref}] = {prop.name}?.dictionary"
        if prop.kind == PropertyKind.ARRAY_OF_OBJECT:
            return f"dictionary[{ref}] = {prop.name}?.map {{ $0.dictionary }}"
        return f"dictionary[{ref}] = {prop.name}"

    def validate_property(self, prop: Property) -> List[str]:
        """Add Swift-specific checks to the base validation."""
        warnings = super().validate_property(prop)

        identifiers: Dict[str, str] = {}
        for key in prop.all_keys():
            identifier = swift_identifier(key)
            if identifier in identifiers:
                warnings.append(
                    f"Keys '{identifiers[identifier]}' and '{key}' share the "
                    f"constant {self.config.key_container_name}.{identifier}"
                )
            else:
                identifiers[identifier] = key

        return warnings


def create_swift_generator(config: Optional[Dict[str, Any]] = None) -> SwiftGenerator:
    """Create a Swift generator from persisted-style settings overrides."""
    return SwiftGenerator(Configuration.from_settings(config or {}))
