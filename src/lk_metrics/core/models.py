"""Structural declaration model consumed by the metrics engine.

The front-end (see ``lk_metrics.parsers``) turns source text into these
read-only records. The engine only ever inspects them; nothing here is
mutated after construction.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

OVERRIDE_MODIFIER = "override"

ARITHMETIC_OPERATORS = frozenset({"+", "-", "*", "/"})


class CalleeKind(str, Enum):
    """Syntactic shape of the expression being invoked."""

    IDENTIFIER = "identifier"  # Foo()
    MEMBER_ACCESS = "member_access"  # obj.Foo()
    OTHER = "other"  # Foo<T>(), (getter())(), a?.B() ...


@dataclass(frozen=True)
class BaseTypeRef:
    """A single entry in a class's base-type list, as written."""

    name: str
    is_simple: bool = True  # False for qualified / generic / other references


@dataclass(frozen=True)
class ParameterDeclaration:
    name: str
    type_name: str | None = None


@dataclass(frozen=True)
class VariableDeclaration:
    """A local variable declaration (``int a = 1, b;`` is one declaration)."""

    names: tuple[str, ...] = ()
    type_name: str | None = None


@dataclass(frozen=True)
class Invocation:
    """An invocation expression with its argument count and callee shape."""

    argument_count: int
    callee: CalleeKind
    callee_text: str | None = None


@dataclass(frozen=True)
class Assignment:
    operator: str = "="


@dataclass(frozen=True)
class BinaryOperation:
    operator: str

    @property
    def is_arithmetic(self) -> bool:
        return self.operator in ARITHMETIC_OPERATORS


@dataclass(frozen=True)
class PropertyDeclaration:
    name: str
    type_name: str | None = None
    modifiers: frozenset[str] = frozenset()


@dataclass(frozen=True)
class MethodDeclaration:
    """A method declaration and the syntactic shapes found inside it.

    Every collection covers the method's whole subtree, so parameters of a
    lambda inside the body count alongside the declared parameters.
    """

    name: str
    modifiers: frozenset[str] = frozenset()
    parameters: tuple[ParameterDeclaration, ...] = ()
    variables: tuple[VariableDeclaration, ...] = ()
    invocations: tuple[Invocation, ...] = ()
    assignments: tuple[Assignment, ...] = ()
    binary_operations: tuple[BinaryOperation, ...] = ()

    @property
    def is_override(self) -> bool:
        return OVERRIDE_MODIFIER in self.modifiers


@dataclass(frozen=True)
class _TypeDeclaration:
    """Shared shape of class and interface declarations.

    ``members`` keeps methods, properties and nested type declarations in
    document order so subtree walks visit them the way they were written.
    """

    name: str
    members: tuple[Member, ...] = ()

    def iter_methods(self) -> Iterator[MethodDeclaration]:
        """Yield every method in the declaration subtree, nested types included."""
        for member in self.members:
            if isinstance(member, MethodDeclaration):
                yield member
            elif isinstance(member, _TypeDeclaration):
                yield from member.iter_methods()

    def iter_properties(self) -> Iterator[PropertyDeclaration]:
        """Yield every property in the declaration subtree, nested types included."""
        for member in self.members:
            if isinstance(member, PropertyDeclaration):
                yield member
            elif isinstance(member, _TypeDeclaration):
                yield from member.iter_properties()

    @property
    def methods(self) -> tuple[MethodDeclaration, ...]:
        return tuple(self.iter_methods())

    @property
    def properties(self) -> tuple[PropertyDeclaration, ...]:
        return tuple(self.iter_properties())


@dataclass(frozen=True)
class InterfaceDeclaration(_TypeDeclaration):
    pass


@dataclass(frozen=True)
class ClassDeclaration(_TypeDeclaration):
    """A class (or struct / record) declaration.

    ``base_types`` is ``None`` when the declaration has no base list at all,
    which is distinct from an empty tuple only for hand-built declarations.
    """

    base_types: tuple[BaseTypeRef, ...] | None = None

    @property
    def simple_base_names(self) -> list[str]:
        """Names of the simple base references, in written order."""
        if not self.base_types:
            return []
        return [ref.name for ref in self.base_types if ref.is_simple]


Member = MethodDeclaration | PropertyDeclaration | ClassDeclaration | InterfaceDeclaration


@dataclass(frozen=True)
class DeclarationSet:
    """All class and interface declarations of an analyzed corpus.

    Order is significant: name lookups during inheritance resolution take the
    first declaration with a matching name.
    """

    classes: tuple[ClassDeclaration, ...] = ()
    interfaces: tuple[InterfaceDeclaration, ...] = ()
    source_files: tuple[str, ...] = field(default=(), compare=False)

    def list_class_declarations(self) -> tuple[ClassDeclaration, ...]:
        return self.classes

    def list_interface_declarations(self) -> tuple[InterfaceDeclaration, ...]:
        return self.interfaces

    def merge(self, other: DeclarationSet) -> DeclarationSet:
        """Return a new set with ``other``'s declarations appended."""
        return DeclarationSet(
            classes=self.classes + other.classes,
            interfaces=self.interfaces + other.interfaces,
            source_files=self.source_files + other.source_files,
        )
