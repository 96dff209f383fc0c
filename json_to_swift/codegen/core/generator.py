"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement:
four independent fragments (keys, nested types, properties and the
initializer) plus a full-file rendering built from them.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from pathlib import Path

from json_to_swift.logging_config import get_logger
from .config import Configuration, LineIndent
from .schema import Property, PropertyKind
from .templates import TemplateEngine, create_template_engine
from .values import ANY

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[Configuration] = None):
        """Initialize generator with an immutable configuration snapshot."""
        self.config = config or Configuration()
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'swift')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.swift')."""
        pass

    @abstractmethod
    def get_template_directory(self) -> Path:
        """Return the directory containing templates for this generator."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        return self._template_engine

    # Fragments. `level` is the depth of the declaration whose contents are
    # rendered: declarations sit at `level`, members at `level + 1`.

    @abstractmethod
    def property_keys(self, prop: Property, indent: LineIndent, level: int = 0) -> str:
        """Key container listing every unique key, or "" when keys are off."""
        pass

    @abstractmethod
    def type_content(self, prop: Property, indent: LineIndent, level: int = 0) -> str:
        """Type declarations for every nested object shape below prop."""
        pass

    @abstractmethod
    def property_content(
        self, prop: Property, indent: LineIndent, level: int = 0
    ) -> str:
        """One declaration line per direct child of prop."""
        pass

    @abstractmethod
    def init_content(self, prop: Property, indent: LineIndent, level: int = 0) -> str:
        """Initializer from an untyped mapping, or "" when disabled."""
        pass

    @abstractmethod
    def generate(
        self,
        prop: Property,
        indent: Optional[LineIndent] = None,
        root_name: str = "Root",
    ) -> str:
        """
        Generate a complete declaration for a property tree.

        Args:
            prop: Root of the property tree
            indent: Indentation unit
            root_name: Name of the top-level declaration

        Returns:
            Generated code as a string
        """
        pass

    def validate_property(self, prop: Property) -> List[str]:
        """
        Check a property tree for shapes that generate weak code.

        Language generators may override this to add their own checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        def visit(node: Property, path: str):
            names: Dict[str, str] = {}
            for key, child in node.children.items():
                child_path = f"{path}.{child.name}" if path else child.name

                if child.kind == PropertyKind.EMPTY_ARRAY:
                    warnings.append(f"Empty array {child_path}: element type unknown")
                elif child.value_type == ANY:
                    warnings.append(f"Field {child_path}: type could not be inferred")

                if child.name in names:
                    warnings.append(
                        f"Keys '{names[child.name]}' and '{key}' both map to "
                        f"'{child.name}' in {path or 'root'}"
                    )
                else:
                    names[child.name] = key

                visit(child, child_path)

        visit(prop, "")
        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[Exception] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def _count_types(prop: Property) -> int:
    return sum(
        (1 if child.has_type else 0) + _count_types(child)
        for child in prop.children.values()
    )


def generate_code(
    generator: CodeGenerator,
    prop: Property,
    indent: Optional[LineIndent] = None,
    root_name: str = "Root",
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        prop: Root of the property tree
        indent: Indentation unit
        root_name: Name of the top-level declaration

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_property(prop)
        code = generator.generate(prop, indent, root_name)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "root_name": root_name,
            "root_kind": prop.kind.value,
            "key_count": len(prop.all_keys()),
            "type_count": _count_types(prop),
        }
        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
