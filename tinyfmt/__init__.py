"""
tiny-ts-fmt: a minimal TypeScript/JavaScript formatter.

Normalizes operator spacing, brace placement, statement terminators and
indentation of function declarations.
"""

__version__ = "0.1.0"
