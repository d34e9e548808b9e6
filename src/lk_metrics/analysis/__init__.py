"""Class metrics analysis.

Key Components:
    - ClassInfo / MethodInfo: Immutable per-class and per-method records
    - InheritanceResolver: Depth resolution over the declaration set
    - OperationComplexityScorer: Weighted syntactic complexity per method
    - ClassMetricsAggregator: Combines the above into one ClassInfo per class

Example:
    infos = compute_class_metrics(classes, interfaces)
    for info in infos:
        print(info.name, info.inheritance_depth, info.operation_complexity)
"""

from .aggregator import (
    ClassMetricsAggregator,
    average_parameters_per_operation,
    compute_class_metrics,
    compute_declaration_set_metrics,
    specialization_index,
)
from .collectors import InheritanceResolver, OperationComplexityScorer
from .metrics import ClassInfo, MethodInfo

__all__ = [
    "ClassInfo",
    "MethodInfo",
    "ClassMetricsAggregator",
    "InheritanceResolver",
    "OperationComplexityScorer",
    "average_parameters_per_operation",
    "compute_class_metrics",
    "compute_declaration_set_metrics",
    "specialization_index",
]
