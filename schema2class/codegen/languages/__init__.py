"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .java import JavaGenerator, emit_source

__all__ = ["JavaGenerator", "emit_source"]
