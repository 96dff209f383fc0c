"""
Core property model for code generation.

Converts a parsed JSON value into a tree of Property nodes that the
generators render. Every nested object, and every array of objects,
gets a synthetic type name the user fills in later.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from enum import Enum

from json_to_swift.logging_config import get_logger
from json_to_swift.utils import json_object
from .keys import collect_keys
from .naming import swift_identifier, type_name_for
from .values import ValueType, classify_value, common_value_type, is_scalar

logger = get_logger(__name__)


class PropertyKind(Enum):
    """Shapes a property can take."""

    SCALAR = "scalar"
    OBJECT = "object"
    ARRAY_OF_SCALAR = "array_of_scalar"
    ARRAY_OF_OBJECT = "array_of_object"
    EMPTY_ARRAY = "empty_array"


@dataclass(frozen=True)
class Property:
    """A node in the inferred type tree: one JSON key, or the document root."""

    key: str
    name: str
    kind: PropertyKind = PropertyKind.OBJECT
    value_type: Optional[ValueType] = None
    children: Dict[str, "Property"] = field(default_factory=dict)
    type_name_suffix: str = "Type"

    @property
    def has_type(self) -> bool:
        """True when this property needs its own type declaration."""
        return self.kind in (PropertyKind.OBJECT, PropertyKind.ARRAY_OF_OBJECT)

    @property
    def synthetic_type_name(self) -> Optional[str]:
        """Placeholder type name for object shapes, e.g. ``InfoType``."""
        if not self.has_type:
            return None
        return type_name_for(self.name, self.type_name_suffix)

    @property
    def is_array(self) -> bool:
        return self.kind in (
            PropertyKind.ARRAY_OF_SCALAR,
            PropertyKind.ARRAY_OF_OBJECT,
            PropertyKind.EMPTY_ARRAY,
        )

    def all_keys(self) -> List[str]:
        """Unique original keys of this tree, depth-first."""
        return collect_keys(self)

    @classmethod
    def from_json(
        cls, text: str, key: str = "", name: str = "", type_name_suffix: str = "Type"
    ) -> Optional["Property"]:
        """
        Build a property tree from JSON text.

        Returns:
            Root Property, or None if the text is not valid JSON or its root
            is not an object or array
        """
        value = json_object(text)
        if value is None:
            return None
        return build_property(value, key, name, type_name_suffix)


def build_property(
    value: Any, key: str = "", name: str = "", type_name_suffix: str = "Type"
) -> Optional[Property]:
    """
    Build a root Property from a parsed JSON value.

    Args:
        value: Parsed JSON value
        key: Key for the root (empty for a document root)
        name: Identifier for the root; derived from key when empty
        type_name_suffix: Suffix for synthetic type names

    Returns:
        Root Property, or None if value is a bare scalar
    """
    if is_scalar(value):
        logger.debug("Root value is a %s, not an object or array", type(value).__name__)
        return None

    if not name and key:
        name = swift_identifier(key)

    root = _convert_node(value, key, name, type_name_suffix)
    logger.debug("Built %s root with %d children", root.kind.value, len(root.children))
    return root


def _convert_node(value: Any, key: str, name: str, suffix: str) -> Property:
    """Recursively convert a JSON value into a Property."""
    if isinstance(value, dict):
        return Property(
            key=key,
            name=name,
            kind=PropertyKind.OBJECT,
            children=_convert_children(value, suffix),
            type_name_suffix=suffix,
        )

    if isinstance(value, list):
        return _convert_array(value, key, name, suffix)

    return Property(
        key=key,
        name=name,
        kind=PropertyKind.SCALAR,
        value_type=classify_value(value),
        type_name_suffix=suffix,
    )


def _convert_children(mapping: Dict[str, Any], suffix: str) -> Dict[str, Property]:
    children = {}
    for child_key, child_value in mapping.items():
        children[child_key] = _convert_node(
            child_value, child_key, swift_identifier(child_key), suffix
        )
    return children


def _convert_array(items: list, key: str, name: str, suffix: str) -> Property:
    """Convert an array; object arrays take their shape from the first object."""
    if not items:
        return Property(
            key=key, name=name, kind=PropertyKind.EMPTY_ARRAY, type_name_suffix=suffix
        )

    objects = [item for item in items if isinstance(item, dict)]
    if not objects:
        return Property(
            key=key,
            name=name,
            kind=PropertyKind.ARRAY_OF_SCALAR,
            value_type=common_value_type(items),
            type_name_suffix=suffix,
        )

    # Only the first object is inspected; keys that appear solely in later
    # elements are not represented.
    first = objects[0]
    missed = sorted(
        {k for other in objects[1:] for k in other if k not in first}
    )
    if missed:
        logger.warning(
            "Array '%s': keys only present after the first element are ignored: %s",
            key or "<root>",
            ", ".join(missed),
        )

    return Property(
        key=key,
        name=name,
        kind=PropertyKind.ARRAY_OF_OBJECT,
        children=_convert_children(first, suffix),
        type_name_suffix=suffix,
    )
