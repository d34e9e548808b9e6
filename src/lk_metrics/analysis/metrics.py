"""Metric records produced by the class metrics engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MethodInfo:
    """Complexity metrics for a single method.

    Attributes:
        name: Method name as declared
        parameter_count: Raw number of parameter declarations in the method
        complexity: Weighted operation complexity score
    """

    name: str
    parameter_count: int
    complexity: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "parameter_count": self.parameter_count,
            "complexity": self.complexity,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MethodInfo:
        return cls(
            name=data["name"],
            parameter_count=int(data["parameter_count"]),
            complexity=float(data["complexity"]),
        )


@dataclass(frozen=True)
class ClassInfo:
    """Lorenz & Kidd metrics for one class declaration.

    Attributes:
        name: Class name
        parent_name: First base-type reference when it is a simple name
        class_size: Methods plus properties in the class subtree
        inheritance_depth: Resolved depth (0 when nothing resolves)
        overridden_operations: Methods marked ``override``
        added_operations: Methods not marked ``override``
        specialization_index: (overridden * depth) / (overridden + added)
        operation_complexity: Sum of method complexities
        method_infos: Per-method metrics in document order
        average_parameters_per_operation: Mean parameter count per method
    """

    name: str
    parent_name: str | None
    class_size: int
    inheritance_depth: int
    overridden_operations: int
    added_operations: int
    specialization_index: float
    operation_complexity: float
    method_infos: tuple[MethodInfo, ...] = field(default_factory=tuple)
    average_parameters_per_operation: float = 0.0

    @property
    def method_count(self) -> int:
        return self.overridden_operations + self.added_operations

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary.

        Floats are kept as-is so a JSON round-trip preserves them exactly.
        """
        return {
            "name": self.name,
            "parent_name": self.parent_name,
            "class_size": self.class_size,
            "inheritance_depth": self.inheritance_depth,
            "overridden_operations": self.overridden_operations,
            "added_operations": self.added_operations,
            "specialization_index": self.specialization_index,
            "operation_complexity": self.operation_complexity,
            "method_infos": [m.to_dict() for m in self.method_infos],
            "average_parameters_per_operation": self.average_parameters_per_operation,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClassInfo:
        return cls(
            name=data["name"],
            parent_name=data.get("parent_name"),
            class_size=int(data["class_size"]),
            inheritance_depth=int(data["inheritance_depth"]),
            overridden_operations=int(data["overridden_operations"]),
            added_operations=int(data["added_operations"]),
            specialization_index=float(data["specialization_index"]),
            operation_complexity=float(data["operation_complexity"]),
            method_infos=tuple(
                MethodInfo.from_dict(m) for m in data.get("method_infos", [])
            ),
            average_parameters_per_operation=float(
                data["average_parameters_per_operation"]
            ),
        )
