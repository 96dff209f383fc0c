"""
Key collection across a property tree.

The key container lists every original JSON key exactly once, in the
order a depth-first walk first meets it.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .schema import Property


def collect_keys(root: "Property") -> List[str]:
    """
    Collect unique original keys from a property tree.

    Pre-order, depth-first, children in document order. The root's own key
    is included unless it is empty (a document root has no key); child keys
    are kept even when empty.

    Args:
        root: Root of the property tree

    Returns:
        Keys in first-discovered order
    """
    seen = set()
    ordered: List[str] = []

    def visit(prop: "Property"):
        if prop.key not in seen:
            seen.add(prop.key)
            ordered.append(prop.key)
        for child in prop.children.values():
            visit(child)

    if root.key:
        visit(root)
    else:
        for child in root.children.values():
            visit(child)
    return ordered
