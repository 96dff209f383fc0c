"""
Swift code generator module.

Generates Swift structs, key constants and dictionary initializers
from an inferred property tree.
"""

from .generator import SwiftGenerator, create_swift_generator

__all__ = [
    "SwiftGenerator",
    "create_swift_generator",
]
