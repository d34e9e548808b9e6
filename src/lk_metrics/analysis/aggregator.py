"""Per-class Lorenz & Kidd metrics aggregation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from loguru import logger

from ..config.weights import ComplexityWeights
from ..core.models import ClassDeclaration, DeclarationSet, InterfaceDeclaration
from .collectors.complexity import OperationComplexityScorer
from .collectors.inheritance import InheritanceResolver
from .collectors.structure import (
    added_operations,
    class_size,
    overridden_operations,
    parent_name,
)
from .metrics import ClassInfo, MethodInfo


def specialization_index(
    inheritance_depth: int, method_count: int, overridden: int
) -> float:
    """(overridden * depth) / method_count, or 0.0 for classes without methods."""
    if method_count == 0:
        return 0.0
    return (overridden * inheritance_depth) / method_count


def average_parameters_per_operation(method_infos: Sequence[MethodInfo]) -> float:
    """Mean parameter count over ``method_infos``, or 0.0 when empty."""
    if not method_infos:
        return 0.0
    return sum(m.parameter_count for m in method_infos) / len(method_infos)


class ClassMetricsAggregator:
    """Builds one ``ClassInfo`` per class against a fixed declaration set.

    Each class is computed independently from read-only inputs, so results
    do not depend on the order in which classes are aggregated.

    Example:
        aggregator = ClassMetricsAggregator(classes, interfaces)
        infos = [aggregator.aggregate(c) for c in classes]
    """

    def __init__(
        self,
        classes: Iterable[ClassDeclaration],
        interfaces: Iterable[InterfaceDeclaration],
        weights: ComplexityWeights | None = None,
    ) -> None:
        self.resolver = InheritanceResolver(tuple(classes), tuple(interfaces))
        self.scorer = OperationComplexityScorer(weights)

    @property
    def weights(self) -> ComplexityWeights:
        return self.scorer.weights

    def aggregate(self, declaration: ClassDeclaration) -> ClassInfo:
        """Compute the full metrics record for a single class."""
        overridden = overridden_operations(declaration)
        added = added_operations(declaration)
        depth = self.resolver.depth(declaration)
        operation_complexity, method_infos = self.scorer.score_class(declaration)

        return ClassInfo(
            name=declaration.name,
            parent_name=parent_name(declaration),
            class_size=class_size(declaration),
            inheritance_depth=depth,
            overridden_operations=overridden,
            added_operations=added,
            specialization_index=specialization_index(
                depth, method_count=overridden + added, overridden=overridden
            ),
            operation_complexity=operation_complexity,
            method_infos=method_infos,
            average_parameters_per_operation=average_parameters_per_operation(
                method_infos
            ),
        )

    def aggregate_all(self) -> list[ClassInfo]:
        """Aggregate every class the aggregator was built with, in input order."""
        infos = [self.aggregate(c) for c in self.resolver.classes]
        logger.debug(f"Computed metrics for {len(infos)} classes")
        return infos


def compute_class_metrics(
    classes: Iterable[ClassDeclaration],
    interfaces: Iterable[InterfaceDeclaration],
    weights: ComplexityWeights | None = None,
) -> list[ClassInfo]:
    """Compute metrics for every class, in the order the classes were given.

    Args:
        classes: All class declarations of the corpus
        interfaces: All interface declarations of the corpus
        weights: Complexity weights (defaults when omitted)

    Returns:
        One ClassInfo per class declaration
    """
    return ClassMetricsAggregator(classes, interfaces, weights).aggregate_all()


def compute_declaration_set_metrics(
    declarations: DeclarationSet, weights: ComplexityWeights | None = None
) -> list[ClassInfo]:
    """Compute metrics for a ``DeclarationSet`` produced by a front-end."""
    return compute_class_metrics(
        declarations.list_class_declarations(),
        declarations.list_interface_declarations(),
        weights,
    )
