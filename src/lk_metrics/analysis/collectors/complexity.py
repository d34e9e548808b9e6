"""Operation complexity scoring.

Operation complexity is a weighted count of syntactic shapes inside a
method body (parameters, local variables, assignments, arithmetic and
invocations). Weights come from ``ComplexityWeights`` and can be overridden
per scorer.

Invocation weights are decided by argument count first:

    Foo(x)       -> message_with_parameters   (any callee shape)
    Foo()        -> call
    obj.Foo()    -> method_call
    Foo<T>()     -> message_without_parameters
"""

from __future__ import annotations

from ...config.weights import DEFAULT_WEIGHTS, ComplexityWeights
from ...core.models import (
    CalleeKind,
    ClassDeclaration,
    Invocation,
    MethodDeclaration,
)
from ..metrics import MethodInfo


class OperationComplexityScorer:
    """Scores methods with a configurable linear complexity model."""

    def __init__(self, weights: ComplexityWeights | None = None) -> None:
        """Initialize scorer.

        Args:
            weights: Shape weights (defaults to ``DEFAULT_WEIGHTS``)
        """
        self.weights = weights or DEFAULT_WEIGHTS

    def invocation_cost(self, invocation: Invocation) -> float:
        """Weight of a single invocation expression."""
        if invocation.argument_count > 0:
            return self.weights.message_with_parameters
        if invocation.callee is CalleeKind.IDENTIFIER:
            return self.weights.call
        if invocation.callee is CalleeKind.MEMBER_ACCESS:
            return self.weights.method_call
        return self.weights.message_without_parameters

    def score(self, method: MethodDeclaration) -> MethodInfo:
        """Compute the complexity of one method.

        Args:
            method: Method declaration to score

        Returns:
            MethodInfo with the raw parameter count and weighted complexity
        """
        w = self.weights
        complexity = 0.0

        parameter_count = len(method.parameters)
        complexity += parameter_count * w.parameter

        complexity += len(method.variables) * w.variable

        for invocation in method.invocations:
            complexity += self.invocation_cost(invocation)

        complexity += len(method.assignments) * w.assignment

        arithmetic = sum(1 for op in method.binary_operations if op.is_arithmetic)
        complexity += arithmetic * w.math_operation

        return MethodInfo(
            name=method.name,
            parameter_count=parameter_count,
            complexity=complexity,
        )

    def score_class(
        self, declaration: ClassDeclaration
    ) -> tuple[float, tuple[MethodInfo, ...]]:
        """Score every method in a class subtree.

        Returns:
            Tuple of (total complexity, per-method infos in document order)
        """
        method_infos = tuple(self.score(m) for m in declaration.iter_methods())
        total = 0.0
        for info in method_infos:
            total += info.complexity
        return total, method_infos
