"""Tests for the structural declaration model."""

import dataclasses

import pytest

from lk_metrics.core.models import (
    BaseTypeRef,
    BinaryOperation,
    ClassDeclaration,
    DeclarationSet,
    InterfaceDeclaration,
    MethodDeclaration,
    PropertyDeclaration,
)


class TestClassDeclaration:
    def test_subtree_walk_in_document_order(self):
        inner_iface = InterfaceDeclaration(
            name="IInner", members=(MethodDeclaration("Contract"),)
        )
        inner = ClassDeclaration(
            name="Inner",
            members=(MethodDeclaration("B"), PropertyDeclaration("P2"), inner_iface),
        )
        outer = ClassDeclaration(
            name="Outer",
            members=(
                MethodDeclaration("A"),
                PropertyDeclaration("P1"),
                inner,
                MethodDeclaration("C"),
            ),
        )
        assert [m.name for m in outer.methods] == ["A", "B", "Contract", "C"]
        assert [p.name for p in outer.properties] == ["P1", "P2"]

    def test_simple_base_names(self):
        declaration = ClassDeclaration(
            name="A",
            base_types=(
                BaseTypeRef("Base"),
                BaseTypeRef("System.IDisposable", is_simple=False),
                BaseTypeRef("IFoo"),
            ),
        )
        assert declaration.simple_base_names == ["Base", "IFoo"]
        assert ClassDeclaration(name="A").simple_base_names == []

    def test_declarations_are_immutable(self):
        declaration = ClassDeclaration(name="A")
        with pytest.raises(dataclasses.FrozenInstanceError):
            declaration.name = "B"


class TestMethodDeclaration:
    def test_is_override(self):
        assert MethodDeclaration("M", frozenset({"public", "override"})).is_override
        assert not MethodDeclaration("M", frozenset({"public", "virtual"})).is_override

    @pytest.mark.parametrize("operator", ["+", "-", "*", "/"])
    def test_arithmetic_operators(self, operator):
        assert BinaryOperation(operator).is_arithmetic

    @pytest.mark.parametrize("operator", ["%", "==", "&&", "??", "<<", "|"])
    def test_non_arithmetic_operators(self, operator):
        assert not BinaryOperation(operator).is_arithmetic


class TestDeclarationSet:
    def test_collaborator_accessors(self):
        classes = (ClassDeclaration("A"),)
        interfaces = (InterfaceDeclaration("I"),)
        declarations = DeclarationSet(classes, interfaces)
        assert declarations.list_class_declarations() == classes
        assert declarations.list_interface_declarations() == interfaces

    def test_merge_preserves_order(self):
        first = DeclarationSet((ClassDeclaration("A"),), (), ("a.cs",))
        second = DeclarationSet(
            (ClassDeclaration("B"),), (InterfaceDeclaration("I"),), ("b.cs",)
        )
        merged = first.merge(second)
        assert [c.name for c in merged.classes] == ["A", "B"]
        assert [i.name for i in merged.interfaces] == ["I"]
        assert merged.source_files == ("a.cs", "b.cs")
