"""Metric collectors for class declarations.

Example:
    from lk_metrics.analysis.collectors import InheritanceResolver

    resolver = InheritanceResolver(classes, interfaces)
    depth = resolver.depth(classes[0])
"""

from .complexity import OperationComplexityScorer
from .inheritance import InheritanceResolver
from .structure import (
    added_operations,
    class_size,
    overridden_operations,
    parent_name,
)

__all__ = [
    "InheritanceResolver",
    "OperationComplexityScorer",
    "added_operations",
    "class_size",
    "overridden_operations",
    "parent_name",
]
