"""Structural counts over a class declaration subtree.

All counts walk the whole subtree, so members of nested types are counted
toward the enclosing class as well.
"""

from __future__ import annotations

from ...core.models import ClassDeclaration


def class_size(declaration: ClassDeclaration) -> int:
    """Number of method plus property declarations in the class subtree."""
    methods = sum(1 for _ in declaration.iter_methods())
    properties = sum(1 for _ in declaration.iter_properties())
    return methods + properties


def overridden_operations(declaration: ClassDeclaration) -> int:
    """Number of methods carrying the ``override`` modifier."""
    return sum(1 for method in declaration.iter_methods() if method.is_override)


def added_operations(declaration: ClassDeclaration) -> int:
    """Number of methods without the ``override`` modifier."""
    return sum(1 for method in declaration.iter_methods() if not method.is_override)


def parent_name(declaration: ClassDeclaration) -> str | None:
    """Name of the first base-type reference, if it is written as a simple name."""
    if not declaration.base_types:
        return None
    first = declaration.base_types[0]
    return first.name if first.is_simple else None
