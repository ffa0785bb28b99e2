"""
Java code generator module.

Generates Java value classes from table schemas.
"""

from .generator import JavaGenerator, emit_source
from .naming import JAVA_RESERVED_WORDS, is_java_reserved

__all__ = [
    "JavaGenerator",
    "emit_source",
    "JAVA_RESERVED_WORDS",
    "is_java_reserved",
]
