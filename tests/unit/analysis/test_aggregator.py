"""Unit tests for structural counts and class metrics aggregation."""

import pytest

from lk_metrics.analysis import (
    ClassMetricsAggregator,
    average_parameters_per_operation,
    compute_class_metrics,
    compute_declaration_set_metrics,
    specialization_index,
)
from lk_metrics.analysis.collectors.structure import (
    added_operations,
    class_size,
    overridden_operations,
    parent_name,
)
from lk_metrics.analysis.metrics import MethodInfo
from lk_metrics.config.weights import ComplexityWeights
from lk_metrics.core.models import (
    BaseTypeRef,
    CalleeKind,
    ClassDeclaration,
    DeclarationSet,
    InterfaceDeclaration,
    Invocation,
    MethodDeclaration,
    ParameterDeclaration,
    PropertyDeclaration,
    VariableDeclaration,
)


def method(name, *modifiers, parameters=0):
    return MethodDeclaration(
        name=name,
        modifiers=frozenset(modifiers),
        parameters=tuple(ParameterDeclaration(f"p{i}") for i in range(parameters)),
    )


@pytest.fixture
def shapes():
    """IShape <- Shape <- Circle hierarchy with overridden members."""
    ishape = InterfaceDeclaration(name="IShape")
    shape = ClassDeclaration(
        name="Shape",
        base_types=(BaseTypeRef("IShape"),),
        members=(
            method("Area", "public", "abstract"),
            PropertyDeclaration("Name", "string"),
        ),
    )
    circle = ClassDeclaration(
        name="Circle",
        base_types=(BaseTypeRef("Shape"),),
        members=(
            method("Area", "public", "override"),
            method("ToString", "public", "override"),
            method("Scale", "public", parameters=2),
            PropertyDeclaration("Radius", "double"),
        ),
    )
    return (shape, circle), (ishape,)


class TestStructuralCounts:
    """Size and added/overridden splits."""

    def test_class_size_counts_methods_and_properties(self, shapes):
        (shape, circle), _ = shapes
        assert class_size(shape) == 2
        assert class_size(circle) == 4

    def test_overridden_and_added_partition_methods(self, shapes):
        (_, circle), _ = shapes
        assert overridden_operations(circle) == 2
        assert added_operations(circle) == 1
        assert overridden_operations(circle) + added_operations(circle) == len(
            circle.methods
        )

    def test_nested_type_members_count(self):
        inner = ClassDeclaration(
            name="Inner",
            members=(method("Run", "override"), PropertyDeclaration("Id")),
        )
        outer = ClassDeclaration(name="Outer", members=(method("Go"), inner))
        # Go, Run and Id
        assert class_size(outer) == 3
        assert overridden_operations(outer) == 1
        assert added_operations(outer) == 1

    def test_parent_name(self):
        assert parent_name(ClassDeclaration(name="A")) is None
        simple = ClassDeclaration(name="A", base_types=(BaseTypeRef("Base"),))
        assert parent_name(simple) == "Base"
        qualified = ClassDeclaration(
            name="A",
            base_types=(BaseTypeRef("System.Object", is_simple=False), BaseTypeRef("I")),
        )
        assert parent_name(qualified) is None


class TestFormulas:
    """Zero-division behavior of derived ratios."""

    def test_specialization_index(self):
        assert specialization_index(3, method_count=4, overridden=2) == pytest.approx(1.5)

    def test_specialization_index_without_methods(self):
        assert specialization_index(5, method_count=0, overridden=0) == 0.0

    def test_average_parameters(self):
        infos = [MethodInfo("a", 1, 0.0), MethodInfo("b", 2, 0.0)]
        assert average_parameters_per_operation(infos) == pytest.approx(1.5)

    def test_average_parameters_without_methods(self):
        assert average_parameters_per_operation([]) == 0.0


class TestClassMetricsAggregator:
    """End-to-end aggregation over hand-built declarations."""

    def test_scenario_foo(self):
        """Foo { void Bar(int x) { var y = 0; Baz(); } }"""
        bar = MethodDeclaration(
            name="Bar",
            parameters=(ParameterDeclaration("x", "int"),),
            variables=(VariableDeclaration(("y",), "var"),),
            invocations=(Invocation(0, CalleeKind.IDENTIFIER, "Baz"),),
        )
        foo = ClassDeclaration(name="Foo", members=(bar,))

        (info,) = compute_class_metrics([foo], [])

        assert info.name == "Foo"
        assert info.parent_name is None
        assert info.class_size == 1
        assert info.added_operations == 1
        assert info.overridden_operations == 0
        assert info.inheritance_depth == 0
        assert info.specialization_index == 0.0
        assert len(info.method_infos) == 1
        assert info.method_infos[0].name == "Bar"
        assert info.method_infos[0].parameter_count == 1
        assert info.method_infos[0].complexity == pytest.approx(7.8)
        assert info.average_parameters_per_operation == pytest.approx(1.0)
        assert info.operation_complexity == pytest.approx(7.8)

    def test_hierarchy(self, shapes):
        classes, interfaces = shapes
        shape_info, circle_info = compute_class_metrics(classes, interfaces)

        assert shape_info.inheritance_depth == 1
        assert shape_info.parent_name == "IShape"
        assert shape_info.specialization_index == 0.0

        assert circle_info.parent_name == "Shape"
        assert circle_info.inheritance_depth == 1
        assert circle_info.specialization_index == pytest.approx(2 * 1 / 3)
        assert circle_info.average_parameters_per_operation == pytest.approx(2 / 3)
        assert circle_info.operation_complexity == pytest.approx(0.6)

    def test_class_without_methods_is_zeroed(self):
        only_props = ClassDeclaration(
            name="Dto",
            base_types=(BaseTypeRef("IDto"),),
            members=(PropertyDeclaration("Id"), PropertyDeclaration("Name")),
        )
        (info,) = compute_class_metrics([only_props], [InterfaceDeclaration("IDto")])

        assert info.class_size == 2
        assert info.inheritance_depth == 1
        assert info.method_infos == ()
        assert info.operation_complexity == 0.0
        assert info.specialization_index == 0.0
        assert info.average_parameters_per_operation == 0.0

    def test_output_order_matches_input(self):
        names = ["Zeta", "Alpha", "Mid", "Alpha"]
        classes = [ClassDeclaration(name=n) for n in names]
        assert [i.name for i in compute_class_metrics(classes, [])] == names

    def test_results_independent_of_aggregation_order(self, shapes):
        classes, interfaces = shapes
        aggregator = ClassMetricsAggregator(classes, interfaces)
        forward = [aggregator.aggregate(c) for c in classes]
        backward = [aggregator.aggregate(c) for c in reversed(classes)]
        assert forward == list(reversed(backward))

    def test_custom_weights_flow_through(self, shapes):
        classes, interfaces = shapes
        weights = ComplexityWeights(parameter=1.0)
        _, circle_info = compute_class_metrics(classes, interfaces, weights)
        assert circle_info.operation_complexity == pytest.approx(2.0)

    def test_declaration_set_entry_point(self, shapes):
        classes, interfaces = shapes
        declarations = DeclarationSet(classes=classes, interfaces=interfaces)
        assert compute_declaration_set_metrics(declarations) == compute_class_metrics(
            classes, interfaces
        )

    def test_declarations_are_not_mutated(self, shapes):
        classes, interfaces = shapes
        before = (tuple(classes), tuple(interfaces))
        compute_class_metrics(classes, interfaces)
        assert (tuple(classes), tuple(interfaces)) == before
